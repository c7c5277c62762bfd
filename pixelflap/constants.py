"""Tuning constants shared by the simulation and the renderer."""

# Window configuration -----------------------------------------------------
WIDTH = 640
HEIGHT = 480
FPS = 60


# Ground -------------------------------------------------------------------
GROUND_HEIGHT = 80
FLOOR_Y = HEIGHT - GROUND_HEIGHT
WEED_COUNT = 30


# Bird physics -------------------------------------------------------------
BIRD_X = 80
BIRD_RADIUS = 12
GRAVITY = 0.35
LIFT = -9.5
ROTATION_FACTOR = 0.06


# Pipe configuration -------------------------------------------------------
PIPE_WIDTH = 64
PIPE_GAP = 200
PIPE_SPEED = 1.8
PIPE_SPAWN_OFFSET = 20
PIPE_MIN_MARGIN = 60
PIPE_BOTTOM_MARGIN = 80
PIPE_REMOVE_MARGIN = 50
SPECIAL_EVERY = 5
OSCILLATION_STEP = 0.4
OSCILLATION_AMPLITUDE = 30


# Spawn cadence in ticks ---------------------------------------------------
NORMAL_INTERVAL = 90
EASY_INTERVAL = 225


# Weather ------------------------------------------------------------------
RAIN_RATE_FULL = 0.2
RAIN_RATE_LOW = 0.05
RAIN_MIN_SPEED = 2.0
RAIN_SPEED_SPREAD = 3.0


# Timing -------------------------------------------------------------------
RESTART_DELAY_MS = 1000


# Prompts ------------------------------------------------------------------
START_PROMPT = "Click or press Space to start"
GAME_OVER_PROMPT = "Game Over"
RESTART_PROMPT = "Game Over - Press Space or Click to Restart"
