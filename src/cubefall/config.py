"""Global constants and default settings."""

WINDOW_WIDTH = 720
WINDOW_HEIGHT = 720
FPS = 60
WINDOW_TITLE = "Cubefall"

# Play field geometry (field units, scaled to the window height when drawn)
NOTE_SIZE = 32
LANE_LENGTH = 640
LANE_COUNT = 5

# Position at which a note should be hit
TARGET_POSITION = LANE_LENGTH - NOTE_SIZE / 2

# How much timing wiggle room a press has around the target line
TIMING_WINDOW_SECONDS = 0.15

# Difficulty is the number of lane lengths a note travels per second
DIFFICULTY_INITIAL = 1.0
DIFFICULTY_CEILING = 5.0
DIFFICULTY_GROWTH_MAX = 0.1

# Timers (milliseconds)
SPAWN_INTERVAL_MS = 200
GROWTH_INTERVAL_MS = 1000

SPAWN_CHANCE = 0.5
SECOND_NOTE_CHANCE = 0.2

# Presentation feedback durations (milliseconds)
PRESS_FEEDBACK_MS = 150
MISS_FLASH_MS = 150

# Persistence
HIGHSCORE_KEY = "highscore"
