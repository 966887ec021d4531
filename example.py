from hexdraw import *
import os
from os import path
from io import StringIO
from glob import glob
from dataclasses import dataclass
import multiprocessing
import traceback
import sys

import typing
if typing.TYPE_CHECKING:
	import multiprocessing.pool

# Compresses every raster text file found in IN_DIR into drawings saved in OUT_DIR.
# Each file is handled by its own worker since a big raster can take a while.

IN_DIR = path.join('.', 'images')
OUT_DIR = path.join('.', 'out')
RASTER_GLOB = '*.txt'
SAVE_PNGS = True
PNG_SCALE = 8

@dataclass
class CompressedRaster():
	name: str
	input_path: str
	pixel_count: int
	command_count: int
	drawing_path: str
	png_path: str | None

def print_err(*args, **kwargs):
	with StringIO() as buf:
		print(*args, file=buf, **kwargs)
		contents = buf.getvalue()
		buf.close()
	contents = '\033[91m' + contents + '\033[0m'
	print(contents, file=sys.stderr)

def print_info(*args, **kwargs):
	with StringIO() as buf:
		print(*args, file=buf, **kwargs)
		contents = buf.getvalue()
		buf.close()
	contents = '\033[92m' + contents.strip('\r\n\t ') + '\033[0m'
	print(contents, file=sys.stdout)

def compress_one(input_path: str, out_dir: str) -> CompressedRaster:
	try:
		name = path.splitext(path.basename(input_path))[0]
		raster = Raster.read_from_file(input_path)
		drawing = raster.compress()

		# never write something that doesn't draw the same thing back
		if drawing.draw() != raster:
			raise HexDrawException(f'round trip failed for "{input_path}"')

		drawing_path = path.join(out_dir, f'{name}.drawing')
		drawing.write_to_file(drawing_path)

		png_path = None
		if SAVE_PNGS:
			png_path = path.join(out_dir, f'{name}.png')
			save_png(raster, png_path, PNG_SCALE)

		return CompressedRaster(
			name = name,
			input_path = input_path,
			pixel_count = raster.height * raster.width,
			command_count = len(drawing),
			drawing_path = drawing_path,
			png_path = png_path,
		)
	except Exception:
		print_err(f'[compress_one] {input_path}: {traceback.format_exc()}')
		raise

def compress_dir(in_dir: str, out_dir: str) -> list[CompressedRaster]:
	input_paths = sorted(glob(path.join(in_dir, RASTER_GLOB)))
	if not input_paths:
		print_err(f'[compress_dir] no raster found in "{in_dir}"')
		return []

	# ensure out dir exists
	if not path.exists(out_dir):
		os.makedirs(out_dir)

	compressed: list[CompressedRaster] = []
	with multiprocessing.Pool() as pool:
		results: list[multiprocessing.pool.ApplyResult] = []
		for input_path in input_paths:
			results.append(pool.apply_async(compress_one, args=[input_path, out_dir]))
		# collect in submission order so the summary is stable
		for r in results:
			try:
				compressed.append(r.get())
			except Exception:
				# compress_one already printed the traceback
				continue
		pool.close()
		pool.join()

	for c in compressed:
		print_info(f'[compress_dir] {c.name}: {c.pixel_count} pixels -> {c.command_count} commands ({c.drawing_path})')
	return compressed

if __name__ == '__main__':
	compress_dir(IN_DIR, OUT_DIR)
