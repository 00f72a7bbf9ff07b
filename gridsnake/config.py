"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

# ── Playfield & Grid ──────────────────────────────────────────────
BASE_WIDTH, BASE_HEIGHT = 1400, 800     # 1.75 : 1
CELL                    = 25
VIEWPORT_FILL           = 0.95          # share of the window the playfield may use
MIN_GRID_CELLS          = 4             # smallest playfield, in cells per side
FPS                     = 60

# ── Colors ────────────────────────────────────────────────────────
BG          = (12,  40,  12)
DARK_GREEN  = (26,  166, 26)
LIGHT_GREEN = (0,   170, 0)
SNAKE_COL   = (40,  70,  200)
SNAKE_DIM   = (25,  45,  140)
EYE_COL     = (240, 240, 240)
APPLE_COL   = (220, 30,  30)
LEAF_COL    = (60,  120, 20)
TEXT_COL    = (0,   0,   0)
OVERLAY_COL = (10,  10,  15, 200)
TITLE_COL   = (255, 228, 77)
UI_COL      = (220, 220, 235)

# ── Gameplay ──────────────────────────────────────────────────────
INITIAL_LENGTH   = 3
INITIAL_STEP_MS  = 100      # delay between simulation ticks
MIN_STEP_MS      = 40       # fastest the game ever gets
STEP_DECREMENT   = 5        # ms shaved off per speed-up
SPEED_INTERVAL   = 5        # speed up every N points
SCORE_INCREMENT  = 1        # points per food
SWIPE_THRESHOLD  = 30       # px a drag must travel to count as a swipe
DENSE_BOARD      = 0.5      # occupied share above which food uses a free-list

# ── Persistence ───────────────────────────────────────────────────
HIGH_SCORE_KEY      = "snakeHighScore"
SCORES_ENV_VAR      = "GRIDSNAKE_SCORES"
DEFAULT_SCORES_FILE = "~/.gridsnake/scores.json"

# ── Run outcomes ──────────────────────────────────────────────────
OUTCOME_COLLISION = "collision"
OUTCOME_CLEARED   = "cleared"
