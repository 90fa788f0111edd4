"""
constants.py: Centralized default settings for the simulation and the window.
"""

# -------- Play Field Config --------
FIELD_WIDTH = 800
FIELD_HEIGHT = 600
BODY_X = 100                    # Fixed body X position (center)
BODY_START_Y = 300              # Body center at the start of every round
BODY_SIZE = 34                  # Bounding box edge, half of it on each side

# -------- Physics Config (units / tick) --------
# Fixed-step constants, one tick per rendered frame
GRAVITY = 0.4                   # Added to the vertical velocity every tick
JUMP_IMPULSE = -7.0             # Velocity set (not added) by an activation

# -------- Obstacle Config --------
OBSTACLE_WIDTH = 60
GAP_HEIGHT = 160
MIN_GAP_TOP = 50                # Minimum margin above and below the gap
OBSTACLE_SPEED = 3.0            # Horizontal speed (units/tick)
SPAWN_RATE_TICKS = 100          # Spawn every 100 ticks

# -------- Driver Config --------
RENDER_FPS = 60
DB_FILE = "neon_flap.db"
DEFAULT_PROFILE = "local"
