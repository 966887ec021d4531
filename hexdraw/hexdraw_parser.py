import hexdraw
import logging
import re
from enum import Enum
from pathlib import Path
from hexdraw.hexdraw_io import INT_PATTERN

# Drawing format:
# line 1         height in decimal
# line 2         width in decimal
# line 3         background colour, one hex digit
# line 4 onward  one command per line
#
# Command format:
# <direction> <distance>           move without painting
# <direction> <distance> <colour>  move and paint every pixel stepped on
#
# The cursor starts at (0, 0), the top left corner. A painting command paints
# the pixels between its start and its destination, including the destination
# but never the pixel it started on. A distance of 0 only paints the pixel
# under the cursor. Negative distances move in the opposite direction.

DISTANCE_PATTERN = INT_PATTERN
COLOUR_PATTERN = re.compile(r'[0-9a-fA-F]')


class Direction(Enum):
	UP =    'up'
	DOWN =  'down'
	LEFT =  'left'
	RIGHT = 'right'

	@property
	def step(self) -> tuple[int, int]:
		"""(row, col) offset of a single step in this direction"""
		return DIRECTION_STEPS[self]

	@property
	def opposite(self) -> 'Direction':
		return DIRECTION_OPPOSITES[self]

	def __str__(self) -> str:
		return self.value

DIRECTION_STEPS: dict[Direction, tuple[int, int]] = {
	Direction.UP:    (-1,  0),
	Direction.DOWN:  ( 1,  0),
	Direction.LEFT:  ( 0, -1),
	Direction.RIGHT: ( 0,  1),
}

DIRECTION_OPPOSITES: dict[Direction, Direction] = {
	Direction.UP: Direction.DOWN,
	Direction.DOWN: Direction.UP,
	Direction.LEFT: Direction.RIGHT,
	Direction.RIGHT: Direction.LEFT,
}


class DrawingCommand:

	direction: Direction
	"""Which way the cursor moves."""
	distance: int
	"""How many pixels to move, negative values move the other way."""
	colour: int | None
	"""Colour painted on every pixel stepped on. None when only moving."""

	def __init__(self, direction: Direction, distance: int, colour: int | None = None):
		self.direction = direction
		self.distance = distance
		self.colour = None if colour is None else hexdraw.check_colour(colour)

	@property
	def paint(self) -> bool:
		return self.colour is not None

	@staticmethod
	def read(line: str, line_number: int | None = None) -> 'DrawingCommand':
		elems = line.split()
		if len(elems) not in (2, 3):
			raise hexdraw.FormatError(f'bad command (should have 2 or 3 parts): {line!r}', line_number)

		try:
			direction = Direction(elems[0])
		except ValueError:
			raise hexdraw.FormatError(f'bad direction (should be up, down, left, or right): {elems[0]!r}', line_number) from None

		if not DISTANCE_PATTERN.fullmatch(elems[1]):
			raise hexdraw.FormatError(f'bad distance (should be a number): {elems[1]!r}', line_number)
		distance = int(elems[1])

		# check for the optional colour
		colour = None
		if len(elems) == 3:
			colour = read_colour(elems[2], line_number)

		return DrawingCommand(direction, distance, colour)

	@property
	def unit_step(self) -> tuple[int, int]:
		"""(row, col) offset of each step this command takes, flipped for negative distances."""
		(d_row, d_col) = self.direction.step
		if self.distance < 0:
			return (-d_row, -d_col)
		return (d_row, d_col)

	def __str__(self) -> str:
		if self.paint:
			return f'{self.direction} {self.distance} {self.colour:x}'
		return f'{self.direction} {self.distance}'

	def __repr__(self) -> str:
		return f'DrawingCommand({str(self)!r})'

	def __eq__(self, other) -> bool:
		if not isinstance(other, DrawingCommand):
			return NotImplemented
		return (self.direction, self.distance, self.colour) == (other.direction, other.distance, other.colour)


def read_colour(text: str, line_number: int | None = None) -> int:
	if not COLOUR_PATTERN.fullmatch(text):
		raise hexdraw.FormatError(f'bad colour (should be a hex number between 0 and f): {text!r}', line_number)
	return int(text, 16)


class Drawing:
	"""A picture described by its size, its background and the commands that paint it."""

	height: int
	width: int
	background: int
	__commands: list[DrawingCommand]
	__executed: bool

	def __init__(self, height: int, width: int, background: int = 0, commands: list[DrawingCommand] | None = None):
		if height <= 0 or width <= 0:
			raise ValueError(f'drawing dimensions should be positive: {height}x{width}')
		self.height = height
		self.width = width
		self.background = hexdraw.check_colour(background)
		self.__commands = []
		self.__executed = False
		for command in commands or []:
			self.add_command(command)

	def add_command(self, command: DrawingCommand):
		# a drawing is frozen once it has produced a raster
		if self.__executed:
			raise hexdraw.HexDrawException('tried to add a command to a drawing that was already drawn.')
		self.__commands.append(command)

	@property
	def commands(self) -> tuple[DrawingCommand, ...]:
		"""Snapshot of the commands, add more through add_command."""
		return tuple(self.__commands)

	def __len__(self) -> int:
		return len(self.__commands)

	def draw(self) -> 'hexdraw.Raster':
		"""Run every command on a blank raster.

		Raises BadCommand as soon as a command paints outside of the drawing, the
		partially painted raster is thrown away.
		"""
		self.__executed = True
		raster = hexdraw.Raster(self.height, self.width, self.background)
		self.trace(raster)
		logging.debug(f'drew {len(self.__commands)} commands onto a {self.height}x{self.width} raster')
		return raster

	def trace(self, raster: 'hexdraw.Raster', start: tuple[int, int] = (0, 0)) -> tuple[int, int]:
		"""Run every command on the given raster starting at start and return where the cursor ended up."""
		(row, col) = start
		for index, command in enumerate(self.__commands):
			try:
				if command.distance == 0:
					# only way to paint the pixel a command starts on
					if command.paint:
						raster.set_pixel(row, col, command.colour)
					continue

				(d_row, d_col) = command.unit_step
				if not command.paint:
					row += d_row * abs(command.distance)
					col += d_col * abs(command.distance)
					continue

				for _ in range(abs(command.distance)):
					row += d_row
					col += d_col
					raster.set_pixel(row, col, command.colour)
			except hexdraw.OutOfBounds as e:
				raise hexdraw.BadCommand(index, str(command), e.row, e.col) from e
		return (row, col)

	@staticmethod
	def read(reader: 'hexdraw.HexDrawIO') -> 'Drawing':
		height = reader.read_int('the height on the first line')
		width = reader.read_int('the width on the second line')
		if height <= 0 or width <= 0:
			raise hexdraw.FormatError(f'drawing dimensions should be positive: {height}x{width}', reader.tell())
		background = read_colour(reader.read_line('the background colour on the third line').strip(), reader.tell())

		drawing = Drawing(height, width, background)
		while reader.can_read():
			line = reader.read_line()
			drawing.add_command(DrawingCommand.read(line, reader.tell()))
		return drawing

	@staticmethod
	def load(text: str) -> 'Drawing':
		with hexdraw.HexDrawIO(text, True) as reader:
			return Drawing.read(reader)

	@staticmethod
	def read_from_file(file_path: str | Path) -> 'Drawing':
		with hexdraw.HexDrawIO.read_file(file_path) as reader:
			return Drawing.read(reader)

	def write(self, writer: 'hexdraw.HexDrawIO'):
		writer.write_line(str(self.height))
		writer.write_line(str(self.width))
		writer.write_line(f'{self.background:x}')
		for command in self.__commands:
			writer.write_line(str(command))

	def serialize(self) -> str:
		with hexdraw.HexDrawIO() as writer:
			self.write(writer)
			return writer.getvalue()

	def write_to_file(self, file_path: str | Path) -> int:
		with hexdraw.HexDrawIO() as writer:
			self.write(writer)
			return writer.write_file(file_path)

	def __str__(self) -> str:
		return self.serialize()

	def __repr__(self) -> str:
		return f'Drawing(height={self.height}, width={self.width}, background={self.background:x}, commands={len(self.__commands)})'
