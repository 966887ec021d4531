import numpy as np
import hexdraw
from pathlib import Path

HEX_DIGITS = '0123456789abcdef'
"""Colour index to the digit it is written as"""
HEX_DIGIT_VALUES: dict[str, int] = {**{c: i for i, c in enumerate(HEX_DIGITS)}, **{c.upper(): i for i, c in enumerate(HEX_DIGITS)}}
"""Digits accepted when reading, both cases"""
MAX_COLOUR = 0xf


def check_colour(colour: int) -> int:
	if not isinstance(colour, (int, np.integer)) or isinstance(colour, bool) or not 0 <= colour <= MAX_COLOUR:
		raise ValueError(f'colour should be between 0 and {MAX_COLOUR}: {colour!r}')
	return int(colour)


class Raster:
	"""A rectangular picture where each pixel is one of 16 colours."""

	height: int
	width: int
	background: int
	"""colour every pixel had when the raster was created"""
	__cells: np.ndarray

	def __init__(self, height: int, width: int, background: int = 0):
		if height <= 0 or width <= 0:
			raise ValueError(f'raster dimensions should be positive: {height}x{width}')
		self.height = height
		self.width = width
		self.background = check_colour(background)
		self.__cells = np.full((height, width), self.background, dtype=np.uint8)

	@staticmethod
	def create(height: int, width: int, background: int = 0) -> 'Raster':
		return Raster(height, width, background)

	@staticmethod
	def from_array(cells: np.ndarray, background: int | None = None) -> 'Raster':
		cells = np.asarray(cells)
		if cells.ndim != 2 or cells.size == 0:
			raise ValueError(f'expected a non empty 2d array, got shape {cells.shape}')
		if cells.min() < 0 or cells.max() > MAX_COLOUR:
			raise ValueError(f'cells should hold colours between 0 and {MAX_COLOUR}')
		cells = cells.astype(np.uint8)
		if background is None:
			background = most_common_colour(cells)
		raster = Raster(cells.shape[0], cells.shape[1], background)
		raster.__cells[:, :] = cells
		return raster

	@staticmethod
	def read(reader: 'hexdraw.HexDrawIO') -> 'Raster':
		if not reader.can_read():
			raise hexdraw.FormatError('empty raster', reader.tell() + 1)

		rows: list[list[int]] = []
		width = None
		while reader.can_read():
			line = reader.read_line()
			line_number = reader.tell()
			# the first line decides the width of every other line
			if width is None:
				width = len(line)
				if width == 0:
					raise hexdraw.FormatError('empty line', line_number)
			elif len(line) != width:
				raise hexdraw.FormatError(f'inconsistent line lengths: {width} and {len(line)} on lines 1 and {line_number}', line_number)

			row = []
			for c in line:
				colour = HEX_DIGIT_VALUES.get(c)
				if colour is None:
					raise hexdraw.FormatError(f'invalid contents: {c!r}', line_number)
				row.append(colour)
			rows.append(row)

		return Raster.from_array(np.array(rows, dtype=np.uint8))

	@staticmethod
	def load(text: str) -> 'Raster':
		with hexdraw.HexDrawIO(text, True) as reader:
			return Raster.read(reader)

	@staticmethod
	def read_from_file(file_path: str | Path) -> 'Raster':
		with hexdraw.HexDrawIO.read_file(file_path) as reader:
			return Raster.read(reader)

	def in_bounds(self, row: int, col: int) -> bool:
		return 0 <= row < self.height and 0 <= col < self.width

	def set_pixel(self, row: int, col: int, colour: int):
		# negative indices would wrap around in numpy so check them here
		if not self.in_bounds(row, col):
			raise hexdraw.OutOfBounds(row, col, self.height, self.width)
		self.__cells[row, col] = check_colour(colour)

	def get_pixel(self, row: int, col: int) -> int:
		if not self.in_bounds(row, col):
			raise hexdraw.OutOfBounds(row, col, self.height, self.width)
		return int(self.__cells[row, col])

	@property
	def pixels(self) -> np.ndarray:
		"""Read only view of every pixel, indexed [row, col]."""
		view = self.__cells.view()
		view.flags.writeable = False
		return view

	def most_common_colour(self) -> int:
		return most_common_colour(self.__cells)

	def copy(self) -> 'Raster':
		return Raster.from_array(self.__cells, self.background)

	def write(self, writer: 'hexdraw.HexDrawIO'):
		for row in self.__cells.tolist():
			writer.write_line(''.join(HEX_DIGITS[c] for c in row))

	def serialize(self) -> str:
		with hexdraw.HexDrawIO() as writer:
			self.write(writer)
			return writer.getvalue()

	def write_to_file(self, file_path: str | Path) -> int:
		with hexdraw.HexDrawIO() as writer:
			self.write(writer)
			return writer.write_file(file_path)

	def compress(self) -> 'hexdraw.Drawing':
		return hexdraw.compress_raster(self)

	def to_image(self, scale: int = 1):
		return hexdraw.raster_to_image(self, scale)

	def __eq__(self, other) -> bool:
		if not isinstance(other, Raster):
			return NotImplemented
		return self.__cells.shape == other.__cells.shape and bool(np.array_equal(self.__cells, other.__cells))

	def __str__(self) -> str:
		return self.serialize()

	def __repr__(self) -> str:
		return f'Raster(height={self.height}, width={self.width}, background={self.background:x})'


def most_common_colour(cells: np.ndarray) -> int:
	# argmax picks the lowest colour on ties
	return int(np.bincount(np.asarray(cells, dtype=np.uint8).ravel(), minlength=MAX_COLOUR + 1).argmax())
