import os
import sys
import logging
import argparse
from hexdraw import Drawing, Raster, HexDrawException, save_png
from pathlib import Path

DRAWING_SUFFIX = '.drawing'

def read_any(input_file_path) -> Raster:
	# drawings get drawn, anything else is read as raster text
	if Path(input_file_path).suffix == DRAWING_SUFFIX:
		return Drawing.read_from_file(input_file_path).draw()
	return Raster.read_from_file(input_file_path)

def write_text(text: str, output_path: str | None):
	if output_path is None:
		sys.stdout.write(text)
		return
	with open(output_path, 'w', encoding='utf-8', newline='\n') as f:
		f.write(text)
	print(f'wrote "{output_path}"', file=sys.stderr)

def draw_file(input_file_path, output_path):
	raster = Drawing.read_from_file(input_file_path).draw()
	write_text(raster.serialize(), output_path)

def compress_file(input_file_path, output_path, verify: bool):
	raster = Raster.read_from_file(input_file_path)
	drawing = raster.compress()
	if verify and drawing.draw() != raster:
		raise HexDrawException(f'compressed drawing of "{input_file_path}" does not redraw the same raster')
	write_text(drawing.serialize(), output_path)
	print(f'compressed "{input_file_path}" to {len(drawing)} commands', file=sys.stderr)

def png_file(input_file_path, output_path, scale: int):
	if output_path is None:
		output_path = str(Path(input_file_path).with_suffix('.png'))
	save_png(read_any(input_file_path), output_path, scale)
	print(f'wrote "{output_path}"', file=sys.stderr)

def main(argv: list[str] | None = None) -> int:
	parser = argparse.ArgumentParser(
		formatter_class=argparse.RawDescriptionHelpFormatter,
		description= os.linesep.join((
			"draw and compress 16 colour pictures.",
			"",
			"usage Examples:",
			"",
			"\tdraw a drawing as raster text:",
			"\tpicture.drawing draw picture.txt",
			"",
			"\tcompress raster text into a drawing:",
			"\tpicture.txt compress picture.drawing --verify",
			"",
			"\trender a drawing or raster text as a png:",
			"\tpicture.drawing png picture.png --scale 8"
		))
	)

	parser.add_argument('input_file', help='The input file to use.')
	parser.add_argument('action', choices=('draw', 'compress', 'png'), help='What to do with the input.')
	parser.add_argument('output', nargs='?', default=None, help='Where to write the output, stdout when omitted (next to the input for png).')
	parser.add_argument('--scale', default=1, type=int, help='Size of a pixel in the png.')
	parser.add_argument('--verify', action='store_true', help='Redraw compressed drawings and check they match the input.')
	parser.add_argument('-v', '--verbose', action='store_true', help='Print debug logs.')
	args = vars(parser.parse_args(argv))

	logging.basicConfig(level=logging.DEBUG if args['verbose'] else logging.WARNING)

	# check if input file exists
	input_file = args['input_file']
	if not Path(input_file).is_file():
		print(f'file not found: {input_file}', file=sys.stderr)
		return 1

	try:
		match args['action']:
			case 'draw':
				draw_file(input_file, args['output'])
			case 'compress':
				compress_file(input_file, args['output'], args['verify'])
			case 'png':
				png_file(input_file, args['output'], args['scale'])
			case _:
				raise ValueError('unknown action')
	except (HexDrawException, OSError) as e:
		print(f'{input_file}: {e}', file=sys.stderr)
		return 1
	return 0

if __name__ == '__main__':
	sys.exit(main())
