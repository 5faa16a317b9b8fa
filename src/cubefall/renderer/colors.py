"""Color palette."""

# RGB tuples, RGBA where drawn translucent
BG = (236, 236, 236)
LANE = (187, 187, 187)
LANE_FACE = (255, 255, 255)
LANE_PRESSED = (214, 214, 214)
TARGET = (222, 222, 222)
NOTE_FACE = (68, 68, 68)
NOTE_SIDE = (34, 34, 34)
NOTE_SHADOW = (170, 170, 170)
MISS_FLASH = (255, 0, 0, 42)
HUD_TEXT = (34, 34, 34)
HUD_DIM = (120, 120, 120)
