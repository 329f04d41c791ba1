# Quilt presets, in inches
QUILT_SIZES = {
    'Crib':  (30, 45),
    'Twin':  (70, 90),
    'Full':  (85, 95),
    'Queen': (90, 100),
    'King':  (105, 105),
}

# 2.0", 2.5", ... 6.5"
TRIANGLE_SIZES = [2 + i * 0.5 for i in range(10)]

TRIANGLE_HEIGHT_TO_SIDE_RATIO = 1.155

DEFAULT_RIGHT_COLOR = '#6366f1'
DEFAULT_LEFT_COLOR = '#818cf8'
DEFAULT_PAINT_COLOR = '#6366f1'

DEFAULT_QUILT_SIZE = 'Twin'
DEFAULT_TRIANGLE_HEIGHT = 3.0

PX_SCALE = 10       # scene units per inch
TOP_MARGIN = 10     # scene units above row 0

ZOOM_STEP = 1.2
ZOOM_MIN = 0.5
ZOOM_MAX = 5.0
