"""Window geometry, asset locations and timing constants."""

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

FONT_PATH = "font arial/arial.ttf"

BG_PATH = "asset/download.jpg"
TREE_PATH = "asset/200px-Tree_SMO.png"
FRUIT_APPLE = "asset/apple.png"
FRUIT_BLACKBERRY = "asset/blackberry.png"
FRUIT_STRAWBERRY = "asset/strawberry.png"
FRUIT_PATHS = (FRUIT_APPLE, FRUIT_BLACKBERRY, FRUIT_STRAWBERRY)

DROP_SOUND = "asset/axe_tree_leaves.mp3"
FALL_SOUND = "asset/thud.wav"
BG_MUSIC = "asset/invincible_loop.wav"

# Interval between blinks of the text cursor, in milliseconds.
CURSOR_BLINK_INTERVAL = 500