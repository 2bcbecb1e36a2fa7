from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple, List

RGB = Tuple[int, int, int]


@dataclass(slots=True)
class TileTypes:
    """Canonical colour definitions stored on a single entity.

    Lives alongside TileTypeRegistry (tag). ``types`` maps a colour name to the
    RGB used when drawing it; ``spawnable`` is the subset new grids are coloured from.
    """
    types: Dict[str, RGB]
    spawnable: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.types:
            raise ValueError("TileTypes requires at least one colour definition")
        if self.spawnable:
            self.set_spawnable(self.spawnable)
        else:
            self.spawnable = list(self.types.keys())

    def background_for(self, type_name: str) -> RGB:
        return self.types[type_name]

    def spawnable_types(self) -> List[str]:
        return list(self.spawnable)

    def defined_types(self) -> List[str]:
        return list(self.types.keys())

    def set_spawnable(self, type_names: Iterable[str]) -> None:
        # Preserve order while filtering unknown and duplicate names.
        seen: set[str] = set()
        filtered: List[str] = []
        for name in type_names:
            if name in self.types and name not in seen:
                filtered.append(name)
                seen.add(name)
        self.spawnable = filtered or list(self.types.keys())

    def register_type(self, type_name: str, color: RGB, *, spawnable: bool = True) -> None:
        self.types[type_name] = color
        if spawnable and type_name not in self.spawnable:
            self.spawnable.append(type_name)
        elif not spawnable and type_name in self.spawnable:
            self.spawnable = [name for name in self.spawnable if name != type_name]
