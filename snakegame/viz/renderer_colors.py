# snakegame/viz/renderer_colors.py
BG = (0x22, 0x22, 0x22)
GRID = (0x44, 0x44, 0x44)
BODY = (0xFF, 0x57, 0x33)
HEAD = (0xFF, 0xBF, 0x00)
FOOD = (0x00, 0xFF, 0x00)
TEXT = (0xFF, 0xFF, 0xFF)
