import unittest
from hexdraw import Drawing, DrawingCommand, Direction, Raster, FormatError, BadCommand, OutOfBounds, HexDrawException
from pathlib import Path

def command(line: str) -> DrawingCommand:
	return DrawingCommand.read(line)

class TestDrawingCommand(unittest.TestCase):


	def test_read_move(self):
		c = command('up 1')
		self.assertEqual(Direction.UP, c.direction)
		self.assertEqual(1, c.distance)
		self.assertFalse(c.paint)
		self.assertIsNone(c.colour)

	def test_read_paint(self):
		c = command('left -10 C')
		self.assertEqual(Direction.LEFT, c.direction)
		self.assertEqual(-10, c.distance)
		self.assertTrue(c.paint)
		self.assertEqual(0xc, c.colour)

	def test_read_extra_whitespace(self):
		self.assertEqual(DrawingCommand(Direction.RIGHT, 3, 2), command('  right\t+3  2 '))

	def test_read_bad_token_count(self):
		for line in ('', 'up', 'up 1 2 3'):
			with self.assertRaises(FormatError):
				command(line)

	def test_read_bad_direction(self):
		with self.assertRaises(FormatError) as ctx:
			DrawingCommand.read('sideways 1', 7)
		self.assertEqual(7, ctx.exception.line)

	def test_read_bad_distance(self):
		for line in ('up x', 'up 1.5', 'up 0x1', 'up 1_0'):
			with self.assertRaises(FormatError):
				command(line)

	def test_read_bad_colour(self):
		for line in ('up 1 g', 'up 1 10', 'up 1 -1'):
			with self.assertRaises(FormatError):
				command(line)

	def test_str(self):
		self.assertEqual('right 3 a', str(DrawingCommand(Direction.RIGHT, 3, 10)))
		self.assertEqual('down -2', str(DrawingCommand(Direction.DOWN, -2)))
		self.assertEqual(command('up 4 f'), command(str(command('up 4 f'))))

	def test_unit_step(self):
		self.assertEqual((-1, 0), command('up 2').unit_step)
		self.assertEqual((1, 0), command('up -2').unit_step)
		self.assertEqual((0, -1), command('right -1').unit_step)


class TestDrawing(unittest.TestCase):


	def test_simple(self):
		drawing = Drawing.read_from_file(Path(__file__).parent / 'simple.drawing')
		self.assertEqual(5, len(drawing))
		self.assertEqual('04\n10\n12\n00\n', drawing.draw().serialize())

	def test_simple_built(self):
		drawing = Drawing(4, 2, 0)
		for line in ('down 2 1', 'right 1 2', 'up 1', 'up 1 9', 'down 0 4'):
			drawing.add_command(command(line))
		self.assertEqual(Raster.load('04\n10\n12\n00\n'), drawing.draw())

	def test_cursor(self):
		drawing = Drawing(4, 2, 0, [command('down 2 1'), command('right 1 2'), command('up 1'), command('up 1 9')])
		self.assertEqual((0, 1), drawing.trace(Raster.create(4, 2, 0)))

	def test_zero_distance_paint(self):
		drawing = Drawing(3, 3, 0, [command('right 1'), command('down 1'), command('up 0 5')])
		raster = Raster.create(3, 3, 0)
		self.assertEqual((1, 1), drawing.trace(raster))
		self.assertEqual('000\n050\n000\n', raster.serialize())

	def test_zero_distance_overwrites(self):
		drawing = Drawing(1, 1, 0, [command('left 0 3'), command('right 0 7')])
		self.assertEqual('7\n', drawing.draw().serialize())

	def test_zero_distance_move_does_nothing(self):
		drawing = Drawing(1, 2, 2, [command('right 0')])
		self.assertEqual('22\n', drawing.draw().serialize())

	def test_start_pixel_not_painted(self):
		drawing = Drawing(1, 3, 0, [command('right 2 4'), command('left 2 5')])
		self.assertEqual('554\n', drawing.draw().serialize())

	def test_negative_distance_symmetry(self):
		down = Drawing(5, 2, 0, [command('down 4'), command('right 1 1'), command('down -3 c')])
		up = Drawing(5, 2, 0, [command('down 4'), command('right 1 1'), command('up 3 c')])
		down_raster = Raster.create(5, 2, 0)
		up_raster = Raster.create(5, 2, 0)
		self.assertEqual(up.trace(up_raster), down.trace(down_raster))
		self.assertEqual(up_raster, down_raster)
		self.assertEqual('00\n0c\n0c\n0c\n01\n', down_raster.serialize())

	def test_bounds_failure(self):
		drawing = Drawing(2, 2, 0, [command('right 5 1')])
		with self.assertRaises(BadCommand) as ctx:
			drawing.draw()
		self.assertEqual(0, ctx.exception.index)
		self.assertEqual('right 5 1', ctx.exception.command)
		self.assertEqual((0, 2), (ctx.exception.row, ctx.exception.col))
		self.assertIsInstance(ctx.exception.__cause__, OutOfBounds)

	def test_bounds_failure_reports_command(self):
		drawing = Drawing(2, 2, 0, [command('down 1 3'), command('up 2 3')])
		with self.assertRaises(BadCommand) as ctx:
			drawing.draw()
		self.assertEqual(1, ctx.exception.index)
		self.assertEqual((-1, 0), (ctx.exception.row, ctx.exception.col))

	def test_zero_distance_out_of_bounds(self):
		drawing = Drawing(2, 2, 0, [command('left 3'), command('up 0 1')])
		with self.assertRaises(BadCommand):
			drawing.draw()

	def test_move_outside_without_painting(self):
		drawing = Drawing(2, 2, 0, [command('left 1000'), command('down -5'), command('right 1000'), command('down 5'), command('right 1 6'), command('left 1 6')])
		self.assertEqual('66\n00\n', drawing.draw().serialize())

	def test_frozen_after_draw(self):
		drawing = Drawing(1, 1, 0)
		drawing.draw()
		with self.assertRaises(HexDrawException):
			drawing.add_command(command('up 0 1'))
		# drawing again is fine
		self.assertEqual('0\n', drawing.draw().serialize())

	def test_read_write(self):
		with open(Path(__file__).parent / 'simple.drawing', 'r') as f:
			contents = f.read()
		self.assertEqual(contents, Drawing.load(contents).serialize())

	def test_read_bad_header(self):
		for text in ('', 'x\n2\n0\n', '4\n\n0\n', '4\n2\n', '4\n2\n10\n', '0\n2\n0\n', '4\n-2\n0\n', '1_0\n2\n0\n', '٣\n2\n0\n', '4\n0x2\n0\n'):
			with self.assertRaises(FormatError):
				Drawing.load(text)

	def test_read_bad_command_line(self):
		with self.assertRaises(FormatError) as ctx:
			Drawing.load('4\n2\n0\ndown 2 1\ndiagonal 1\n')
		self.assertEqual(5, ctx.exception.line)
		# a form feed does not end the command line
		with self.assertRaises(FormatError) as ctx:
			Drawing.load('4\n2\n0\ndown 2 1\x0cup 1\n')
		self.assertEqual(4, ctx.exception.line)

	def test_read_crlf(self):
		drawing = Drawing.load('1\r\n2\r\n0\r\nright 1 3\r\n')
		self.assertEqual('1\n2\n0\nright 1 3\n', drawing.serialize())

	def test_commands_read_only(self):
		drawing = Drawing(1, 2, 0, [command('right 1 1')])
		self.assertIsInstance(drawing.commands, tuple)
		with self.assertRaises(AttributeError):
			drawing.commands.append(command('left 1 2'))
		with self.assertRaises(AttributeError):
			drawing.commands = []
		drawing.draw()
		# the frozen rule holds since commands only go through add_command
		with self.assertRaises(HexDrawException):
			drawing.add_command(command('left 1 2'))
		self.assertEqual([command('right 1 1')], list(drawing.commands))
		self.assertEqual('01\n', drawing.draw().serialize())

	def test_read_hex_background(self):
		drawing = Drawing.load('1\n2\nB\n')
		self.assertEqual(0xb, drawing.background)
		self.assertEqual('bb\n', drawing.draw().serialize())
