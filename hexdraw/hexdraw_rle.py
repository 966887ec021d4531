import hexdraw
import logging
import numpy as np
from hexdraw.hexdraw_parser import Direction, DrawingCommand


def encode_rows(raster: 'hexdraw.Raster', background: int) -> 'hexdraw.Drawing':
	# right along even rows, left along odd rows, down 1 between them
	return encode_serpentine(raster, raster.pixels, background, Direction.RIGHT, Direction.DOWN)


def encode_columns(raster: 'hexdraw.Raster', background: int) -> 'hexdraw.Drawing':
	# down along even columns, up along odd columns, right 1 between them
	return encode_serpentine(raster, raster.pixels.T, background, Direction.DOWN, Direction.RIGHT)


def encode_serpentine(raster: 'hexdraw.Raster', lines: np.ndarray, background: int, along: Direction, across: Direction) -> 'hexdraw.Drawing':
	"""Encode lines of pixels as runs, walking each line in the opposite direction of the previous one.

	The walk visits every pixel exactly once so every pixel but the top left one is
	painted by exactly one step. Runs in the background colour are plain moves.
	"""
	drawing = hexdraw.Drawing(raster.height, raster.width, background)

	# nothing ever steps onto the top left pixel so it needs a 0 length paint
	top_left = int(lines[0, 0])
	if top_left != background:
		drawing.add_command(DrawingCommand(Direction.DOWN, 0, top_left))

	commands: list[DrawingCommand] = []
	for index, line in enumerate(lines.tolist()):
		direction = along
		if index % 2:
			direction = along.opposite
			line = line[::-1]

		# step onto the first pixel of the line
		if index > 0:
			commands.append(run_command(across, 1, line[0], background))

		x = 1
		while x < len(line):
			repeat = 1
			colour = line[x]
			while (x + repeat) < len(line) and line[x + repeat] == colour:
				repeat += 1
			commands.append(run_command(direction, repeat, colour, background))
			x += repeat

	# moves at the end don't paint anything
	while commands and not commands[-1].paint:
		commands.pop()

	for command in commands:
		drawing.add_command(command)
	return drawing


def run_command(direction: Direction, length: int, colour: int, background: int) -> DrawingCommand:
	if colour == background:
		return DrawingCommand(direction, length)
	return DrawingCommand(direction, length, colour)


COMPRESSION_STRATEGIES = [encode_rows, encode_columns]
"""Tried in order for every background candidate, the first shortest result wins"""


def background_candidates(raster: 'hexdraw.Raster') -> list[int]:
	candidates = [raster.get_pixel(0, 0)]
	most_common = raster.most_common_colour()
	if most_common not in candidates:
		candidates.append(most_common)
	return candidates


def compress_raster(raster: 'hexdraw.Raster') -> 'hexdraw.Drawing':
	"""Find the drawing with the fewest commands that draws the raster."""
	best: hexdraw.Drawing | None = None
	for background in background_candidates(raster):
		for strategy in COMPRESSION_STRATEGIES:
			drawing = strategy(raster, background)
			logging.debug(f'[compress] {strategy.__name__} with background {background:x}: {len(drawing)} commands')
			if best is None or len(drawing) < len(best):
				best = drawing
	return best
