class HexDrawException(Exception):
	"""Base class for every error raised by hexdraw."""


class FormatError(HexDrawException):
	"""Raised when drawing, raster or image input is malformed."""

	line: int | None
	"""1 based line number of the offending input, None when it doesn't come from a line"""

	def __init__(self, message: str, line: int | None = None):
		if line is not None:
			message = f'line {line}: {message}'
		super().__init__(message)
		self.line = line


class OutOfBounds(HexDrawException):
	"""Raised when a pixel outside of a raster is written to."""

	row: int
	col: int

	def __init__(self, row: int, col: int, height: int, width: int):
		super().__init__(f'pixel ({row}, {col}) is outside of a {height}x{width} raster')
		self.row = row
		self.col = col


class BadCommand(HexDrawException):
	"""Raised when a drawing command tries to paint outside of the drawing."""

	index: int
	"""0 based position of the command in the drawing"""
	command: str
	row: int
	col: int

	def __init__(self, index: int, command: str, row: int, col: int):
		super().__init__(f'command #{index} "{command}" painted outside of the drawing at ({row}, {col})')
		self.index = index
		self.command = command
		self.row = row
		self.col = col
