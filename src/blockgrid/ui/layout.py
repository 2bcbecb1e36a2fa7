from blockgrid.constants import BOTTOM_MARGIN, BOARD_MAX_WIDTH_PCT, BOARD_MAX_HEIGHT_PCT, MIN_TILE_SIZE

def compute_grid_geometry(window_width: int, window_height: int, cols: int, rows: int):
    """Return (tile_size, start_x, start_y) for a cols x rows board.

    Shared by RenderSystem and InputSystem so clicks map onto the cells that were drawn.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    tile_by_w = max_board_w / cols
    tile_by_h = max_board_h / rows
    tile_size = int(min(tile_by_w, tile_by_h))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total_width = cols * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def cell_at_point(x: float, y: float, window_width: int, window_height: int, cols: int, rows: int):
    """Map a window point to (col, row) grid coordinates, or None outside the board."""
    tile_size, start_x, start_y = compute_grid_geometry(window_width, window_height, cols, rows)
    if x < start_x or x >= start_x + cols * tile_size:
        return None
    if y < start_y or y >= start_y + rows * tile_size:
        return None
    col = int((x - start_x) // tile_size)
    row = int((y - start_y) // tile_size)
    if 0 <= row < rows and 0 <= col < cols:
        return col, row
    return None
