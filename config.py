from types import MappingProxyType

# Side of one top-level map square, meters.
GRID_CELL_M = 300.0
# Squares per axis (columns A..Z, rows 1..26).
MAX_GRID_INDEX = 26
# Each keypad level splits the active square 3x3.
SUBGRID_DIVISOR = 3.0

COLUMN_LETTERS = "abcdefghijklmnopqrstuvwxyz"

# Keypad layout, 1 is top-left and 9 is bottom-right. Offsets are in raw map
# units before the y flip, where +y points to higher row numbers.
KEYPAD_OFFSETS = MappingProxyType({
    1: (-1, 1),  2: (0, 1),  3: (1, 1),
    4: (-1, 0),  5: (0, 0),  6: (1, 0),
    7: (-1, -1), 8: (0, -1), 9: (1, -1),
})

# range_m -> elevation_mil, 82mm mortar
MORTAR_RANGE_TABLE = MappingProxyType({
    50: 1579, 100: 1558, 150: 1538, 200: 1517, 250: 1496,
    300: 1475, 350: 1453, 400: 1431, 450: 1409, 500: 1387,
    550: 1364, 600: 1341, 650: 1317, 700: 1292, 750: 1267,
    800: 1240, 850: 1212, 900: 1183, 950: 1152, 1000: 1118,
    1050: 1081, 1100: 1039, 1150: 988, 1200: 918, 1250: 800,
})

CRASH_LOG = "crash_log.txt"
