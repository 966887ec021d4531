import logging
import numpy as np
import hexdraw
from pathlib import Path
from PIL import Image

# This is the standard 4-bit EGA colour scheme
EGA_PALETTE: list[int] = [
	0x000000, 0x0000AA, 0x00AA00, 0x00AAAA,
	0xAA0000, 0xAA00AA, 0xAA5500, 0xAAAAAA,
	0x555555, 0x5555FF, 0x55FF55, 0x55FFFF,
	0xFF5555, 0xFF55FF, 0xFFFF55, 0xFFFFFF,
]

DEFAULT_PNG_SCALE = 1


def colour_to_rgb(colour: int) -> tuple[int, int, int]:
	rgb = EGA_PALETTE[hexdraw.check_colour(colour)]
	return ((rgb >> 16) & 0xff, (rgb >> 8) & 0xff, rgb & 0xff)

def ega_palette_bytes() -> bytes:
	return b''.join(bytes(colour_to_rgb(i)) for i in range(len(EGA_PALETTE)))

def raster_to_image(raster: 'hexdraw.Raster', scale: int = DEFAULT_PNG_SCALE) -> Image.Image:
	if scale < 1:
		logging.warning(f'png scale should be at least 1, got {scale}. using 1 instead.')
		scale = 1
	# every pixel becomes a scale x scale block
	data = np.kron(raster.pixels, np.ones((scale, scale), dtype=np.uint8))
	img = Image.frombytes('P', size=(raster.width * scale, raster.height * scale), data=data.tobytes(), decoder_name='raw')
	img.putpalette(ega_palette_bytes(), rawmode='RGB')
	return img

def image_to_raster(img: Image.Image) -> 'hexdraw.Raster':
	lookup = {colour_to_rgb(i): i for i in range(len(EGA_PALETTE))}
	img_data = np.array(img.convert('RGB'), dtype=np.uint8)
	cells = np.zeros(img_data.shape[:2], dtype=np.uint8)
	for rgb in np.unique(img_data.reshape(-1, 3), axis=0).tolist():
		colour = lookup.get(tuple(rgb))
		if colour is None:
			raise hexdraw.FormatError(f'image contains a colour that is not in the EGA palette: #{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}')
		cells[(img_data == rgb).all(axis=2)] = colour
	return hexdraw.Raster.from_array(cells)

def save_png(raster: 'hexdraw.Raster', file_path: str | Path, scale: int = DEFAULT_PNG_SCALE):
	with raster_to_image(raster, scale) as img:
		img.save(file_path, format='png')

def load_png(file_path: str | Path) -> 'hexdraw.Raster':
	with Image.open(file_path) as img:
		return image_to_raster(img)
