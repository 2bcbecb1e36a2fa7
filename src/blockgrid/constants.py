DEFAULT_GRID_WIDTH = 10
DEFAULT_GRID_HEIGHT = 10
BOTTOM_MARGIN = 20

# Board maximum footprint relative to window (percentage of window width/height).
# Render and input layout size the board so it does not exceed either percentage.
BOARD_MAX_WIDTH_PCT = 0.9
BOARD_MAX_HEIGHT_PCT = 0.9
MIN_TILE_SIZE = 12

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 640
WINDOW_TITLE = "Blockgrid"

# Drawn where a cell holds no tile.
EMPTY_CELL_COLOR = (24, 24, 32)
