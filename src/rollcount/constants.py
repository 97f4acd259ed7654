# Absolute tolerance used when comparing floating point values. Gaps whose
# magnitude is at or below this value count as already converged.
FLOAT_EPSILON = 1e-4

# Selection policy used when a counter row does not name one.
DEFAULT_POLICY = "first"

# Seconds spent animating a single plan step.
ROLL_STEP_DURATION = 0.35

# Digits shown after the decimal point for float cells.
VALUE_DECIMALS = 2

LOG_LEVEL = "INFO"

WINDOW_WIDTH = 960
WINDOW_HEIGHT = 540
WINDOW_TITLE = "Rollcount"

# Counter grid geometry. Cells shrink to fit when a row holds many values,
# but never below CELL_MIN_WIDTH.
CELL_WIDTH = 72
CELL_MIN_WIDTH = 36
CELL_HEIGHT = 44
CELL_GAP = 6
ROW_GAP = 18
LABEL_WIDTH = 110
SIDE_MARGIN = 24
TOP_MARGIN = 32
FONT_SIZE = 14

# Demo rows are retargeted to random integers in this range.
DEMO_VALUE_MIN = -50
DEMO_VALUE_MAX = 999

COLOR_CELL = (38, 44, 56)
COLOR_CELL_MOVING = (64, 96, 150)
COLOR_TEXT = (232, 232, 232)
COLOR_LABEL = (170, 170, 190)

# Keyboard codes (pyglet/arcade key values) handled by the demo input system.
KEY_SPACE = 32
KEY_P = 112
