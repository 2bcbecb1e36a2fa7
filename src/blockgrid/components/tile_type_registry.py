from dataclasses import dataclass

@dataclass(slots=True)
class TileTypeRegistry:
    """Empty tag component marking the single entity that stores the palette.

    The same entity also carries a TileTypes component mapping colour name -> RGB.
    """
    pass
