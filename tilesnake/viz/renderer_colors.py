# tilesnake/viz/renderer_colors.py
BG_TOP = (20, 24, 33)
BG_BOTTOM = (48, 62, 82)
GRID = (255, 255, 255, 20)
FOOD = (255, 90, 90)
BODY_NEAR = (80, 220, 120)    # segment next to the head
BODY_FAR = (20, 160, 90)      # tail
HEAD = (120, 255, 160)
TEXT = (255, 255, 255)
OVERLAY = (0, 0, 0, 140)
