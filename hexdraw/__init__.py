from .hexdraw_exceptions import HexDrawException, FormatError, OutOfBounds, BadCommand
from .hexdraw_raster import HEX_DIGITS, check_colour, Raster
from .hexdraw_io import HexDrawIO
from .hexdraw_parser import Direction, DrawingCommand, Drawing
from .hexdraw_rle import encode_rows, encode_columns, compress_raster, COMPRESSION_STRATEGIES
from .hexdraw_image_utils import EGA_PALETTE, DEFAULT_PNG_SCALE, colour_to_rgb, raster_to_image, image_to_raster, save_png, load_png
