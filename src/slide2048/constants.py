GRID_ROWS = 4
GRID_COLS = 4

# Square window subdivided into GRID_ROWS x GRID_COLS cells.
WINDOW_SIZE = 600
WINDOW_TITLE = "2048"
UPDATE_RATE = 1 / 60

CELL_WIDTH = WINDOW_SIZE // GRID_COLS
CELL_HEIGHT = WINDOW_SIZE // GRID_ROWS

# Grid lines between cells; the outer border is drawn twice as thick.
OUTLINE_THICKNESS = 10

# Pixels per second used for sliding tiles; spawned tiles grow at MOVE_VELOCITY / GROW_DIVISOR.
MOVE_VELOCITY = 2750.0
GROW_DIVISOR = 7.0
# Fraction of a cell within which a sliding tile snaps onto its target.
SNAP_FRACTION = 0.25

# Newly spawned tiles start at this fraction of the cell size.
SPAWN_SCALE = 0.5
# One in SPAWN_FOUR_ODDS spawns is a 4, the rest are 2.
SPAWN_FOUR_ODDS = 9
SEED_TILE_COUNT = 2
SEED_TILE_VALUE = 2

TILE_FONT_SIZE = 42
NOTICE_FONT_SIZE = 24

# Key symbols as delivered by arcade/pyglet; kept numeric so input handling
# does not need to import arcade.
KEY_ESCAPE = 65307
KEY_R = 114
KEY_K = 107
KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
