# config.py
# Scan distance constants (horizontal steps are scaled against vertical units)
TAKEOFF_DISTANCE = 1
LANDING_DISTANCE = 1
HORIZONTAL_UNIT = 10

# Cruising altitude over an empty plot, and clearance kept above a tree top
GROUND_ALTITUDE = 1
TREE_CLEARANCE = 1

# Input bounds (inclusive)
MIN_DIMENSION = 1
MAX_DIMENSION = 50_000
MIN_TREE_HEIGHT = 1
MAX_TREE_HEIGHT = 30

FAIL_TOKEN = "FAIL"

# Largest field (in plots) drawn by --plot
MAX_PLOT_PLOTS = 250_000
