from __future__ import annotations

# --- Tick loop ----------------------------------------------------------------
FPS = 30                         # ticks per second while a round is running
IDLE_POLL_SEC = 0.25             # poll bound when nothing is counting down

# --- Game tempo -----------------------------------------------------------------
BUDGET_INITIAL = 8.0             # seconds for the first round of a 4-bit mode
BUDGET_STEP = -0.25              # seconds removed per streak step
BUDGET_MIN = 2.5                 # floor; never below what a person can type
BUDGET_PER_BIT = 0.75            # extra seconds per displayed bit above four
MAX_LIVES = 3
FEEDBACK_SEC = 0.8               # how long a won/lost round stays on screen

# --- Scoring --------------------------------------------------------------------
BASE_POINTS = 10
STREAK_STEP = 0.25               # multiplier gained per streak step
MAX_MULTIPLIER = 4.0

# --- Menu -----------------------------------------------------------------------
DEFAULT_MENU_INDEX = 4           # "normal (8 bits)"

# --- Terminal front end -----------------------------------------------------------
MIN_TERM_WIDTH = 44
MIN_TERM_HEIGHT = 16

COLOR_TITLE = 1
COLOR_BITS = 2
COLOR_HUD = 3
COLOR_GOOD = 4
COLOR_BAD = 5
COLOR_WARN = 6
COLOR_DIM = 7

MENU_PALETTE = (COLOR_GOOD, COLOR_TITLE, COLOR_HUD, COLOR_WARN, COLOR_BITS, COLOR_BAD)

TIMER_BAR_WARN_TIME = 0.50       # ratio of the budget left
TIMER_BAR_CRIT_TIME = 0.25

# --- Window front end ---------------------------------------------------------------
WINDOWED_DEFAULT_SIZE = (960, 540)

BG = (8, 10, 12)
INK = (235, 235, 235)
ACCENT = (255, 210, 90)
DIM = (110, 120, 130)
GOOD = (90, 220, 120)
BAD = (220, 80, 80)

TIMER_BAR_WIDTH_FACTOR = 0.66
TIMER_BAR_HEIGHT = 18
TIMER_BAR_BG = (40, 40, 50)
TIMER_BAR_FILL = (90, 200, 255)
TIMER_BAR_BORDER = (160, 180, 200)
TIMER_BAR_BORDER_W = 2
TIMER_BAR_WARN_COLOR = (255, 170, 80)
TIMER_BAR_CRIT_COLOR = (220, 80, 80)
TIMER_BAR_BORDER_RADIUS = 8
TIMER_BOTTOM_MARGIN_FACTOR = 0.06

BITS_FONT_SIZE = 96
HUD_FONT_SIZE = 28
MENU_FONT_SIZE = 34
