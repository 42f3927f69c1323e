"""
Common Constants
"""
MIN_FILE_SIZE = 4096
DEFAULT_TERMINAL_WIDTH = 80
LABEL_MARGIN = 40
MIN_CANVAS_WIDTH = 1

LIGHT_SHADE = "\u2591"
MEDIUM_SHADE = "\u2592"
DARK_SHADE = "\u2593"
BLANK = " "

BINARY_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")
