# --- Constants ---
WIDTH, HEIGHT = 1280, 720  # used only when the display cannot report its size
FPS = 60

# --- Graph ---
DISTANCE_BETWEEN_VERTICES = 200

# --- Emergence regions ---
REGION_COUNT = 5
REGION_MARGIN = 100
REGION_SPREAD = 100
REGION_MIN_POINTS = 5
REGION_MAX_POINTS = 10  # exclusive
MIN_VELOCITY = 0.3

# --- Colors ---
BACKGROUND_COLOR = (232, 234, 236)   # #e8eaec
POINT_FILL_COLOR = (151, 177, 216)   # #97b1d8
POINT_STROKE_COLOR = (67, 83, 108)   # #43536c
CONNECTION_COLOR = (20, 19, 40)      # #141328
VIGNETTE_COLOR = (33, 45, 65)        # #212d41

POINT_RADIUS = 3
POINT_STROKE_WIDTH = 1
VIGNETTE_INNER_RATIO = 1 / 2.5
