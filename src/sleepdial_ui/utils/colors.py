WHITE = (255, 255, 255)
GREY = (128, 128, 128)
BACKGROUND = (26, 26, 26)
ORANGE = (255, 149, 0)
CYAN = (50, 215, 255)

TICK_SHADOW = (20, 20, 20)
