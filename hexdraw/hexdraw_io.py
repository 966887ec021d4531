import hexdraw
import re
from io import StringIO
from pathlib import Path

INT_PATTERN = re.compile(r'[+-]?[0-9]+')
"""Decimal numbers, ascii digits only"""

def split_lines(text: str) -> list[str]:
	# only \n ends a line, other line break characters are left for the readers to reject
	lines = [line.removesuffix('\r') for line in text.split('\n')]
	if lines and lines[-1] == '':
		lines.pop()
	return lines

class HexDrawIO:
	"""Line oriented text buffer used to read and write drawings and rasters.

	Keeps track of the current line so format errors can point at it.
	"""
	__readonly: bool
	__lines: list[str]
	__position: int
	__buffer: StringIO

	def __init__(self, initial_text: str | None = None, is_readonly: bool = False):
		self.__readonly = is_readonly
		self.__lines = split_lines(initial_text) if initial_text else []
		self.__position = 0
		self.__buffer = StringIO()
		# the buffer always holds every line so getvalue matches len
		for line in self.__lines:
			self.__buffer.write(line + '\n')

	def __enter__(self) -> 'HexDrawIO':
		if self.__buffer.closed:
			raise BufferError('buffer was already closed')
		return self

	def __exit__(self, exec_type, exec_value, traceback):
		self.close()

	def __len__(self) -> int:
		return len(self.__lines)

	def tell(self) -> int:
		"""1 based number of the last line that was read."""
		return self.__position

	def close(self):
		if not self.__buffer.closed:
			self.__buffer.close()

	def can_read(self) -> bool:
		return self.__position < len(self.__lines)

	def read_line(self, what: str = 'a line') -> str:
		if not self.can_read():
			raise hexdraw.FormatError(f'unexpected end of input, expected {what}', self.__position + 1)
		line = self.__lines[self.__position]
		self.__position += 1
		return line

	def read_int(self, what: str) -> int:
		line = self.read_line(what).strip()
		if not INT_PATTERN.fullmatch(line):
			raise hexdraw.FormatError(f'expected {what}: {line!r}', self.__position)
		return int(line)

	def write_line(self, line: str) -> int:
		# check write lock
		if self.__readonly:
			raise hexdraw.HexDrawException('buffer is non writable.')
		if '\n' in line or '\r' in line:
			raise hexdraw.HexDrawException('tried to write more than one line at once.')
		self.__lines.append(line)
		return self.__buffer.write(line + '\n')

	def getvalue(self) -> str:
		return self.__buffer.getvalue()

	@staticmethod
	def read_file(file_path: str | Path) -> 'HexDrawIO':
		with open(file_path, 'r', encoding='utf-8') as f:
			return HexDrawIO(f.read(), True)

	def write_file(self, file_path: str | Path) -> int:
		with open(file_path, 'w', encoding='utf-8', newline='\n') as f:
			return f.write(self.getvalue())
