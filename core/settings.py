# core/settings.py

TITLE = "Tower Defense"
FPS = 60
MAX_FRAME_DT = 0.05           # seconds, frame delta clamp

# Board
GRID_ROWS = 5
GRID_COLS = 7
CELL_SIZE = 100               # px
OBSTACLE_SCALE = 0.8          # obstacle drawn at 80% of a cell
PANEL_WIDTH = 250             # side panel (HUD)

HEIGHT = GRID_ROWS * CELL_SIZE

# Obstacles
OBSTACLE_COUNT = 5
OBSTACLE_GOAL_MARGIN = 2      # columns next to the goal kept free (goal included)
OBSTACLE_MAX_ATTEMPTS = 1000

# Castle / waves
CASTLE_HEALTH = 10
FINAL_WAVE = 5
ENEMIES_PER_WAVE = 3          # wave n releases n * 3
SPAWN_INTERVAL = 0.5          # seconds between releases
WAVE_COOLDOWN = 3.0           # seconds between waves (also before wave 1)

# Enemies
MAX_ENEMIES = 35              # pool capacity
ENEMY_BASE_SPEED = 50.0       # px/s
ENEMY_SPEED_PER_WAVE = 10.0   # px/s per wave number
ENEMY_WORTH = 10
ENEMY_HEALTH = 1
ENEMY_RADIUS = 20
CLICK_HIT_RADIUS = 20.0
RETARGET_DISTANCE = 5.0       # px from target centre before picking the next cell
MAX_WAYPOINTS_PER_STEP = 4

# Colors (R,G,B)
BG_COLOR = (245, 245, 245)
GRID_LINE_COLOR = (0, 0, 0)
CASTLE_COLOR = (230, 41, 55)
OBSTACLE_COLOR = (127, 106, 79)
ENEMY_COLOR = (0, 121, 241)
PANEL_COLOR = (200, 200, 200)
HUD_COLOR = (0, 0, 0)
LOSE_COLOR = (230, 41, 55)
WIN_COLOR = (0, 228, 48)

# Logging
LOG_LEVEL = "INFO"
LOG_LEVEL_ENV = "TD_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
