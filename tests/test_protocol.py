import io
import unittest

from config import get_settings
from pilot.errors import ProtocolError
from pilot.protocol import parse_telemetry, read_course, read_telemetry, run
from pilot.pod import Telemetry

SETUP = "3\n3\n2000 4500\n14000 4500\n8000 8000\n"
TURN = (
    "2000 8000 0 0 0 2\n"
    "2000 1000 0 0 0 2\n"
    "13000 8500 0 0 0 1\n"
    "15000 500 0 0 0 1\n"
)

class TestParsing(unittest.TestCase):
    def test_read_course(self):
        course = read_course(io.StringIO(SETUP).readline)
        self.assertEqual(course.laps, 3)
        self.assertEqual(course.checkpoints, ((2000, 4500), (14000, 4500), (8000, 8000)))
        self.assertEqual(course.optimal_boost_checkpoint_id, 1)

    def test_parse_telemetry(self):
        self.assertEqual(parse_telemetry("1 -2 3 -4 359 0\n"), Telemetry(1, -2, 3, -4, 359, 0))

    def test_read_telemetry_end_of_input(self):
        self.assertIsNone(read_telemetry(io.StringIO("").readline))

    def test_truncated_turn(self):
        with self.assertRaises(ProtocolError):
            read_telemetry(io.StringIO("2000 8000 0 0 0 2\n").readline)

    def test_malformed_lines(self):
        with self.assertRaises(ProtocolError):
            parse_telemetry("1 2 3 4 5\n")
        with self.assertRaises(ProtocolError):
            parse_telemetry("1 2 3 4 five 6\n")
        with self.assertRaises(ProtocolError):
            read_course(io.StringIO("3\n3\n0 0\n").readline)

class TestRun(unittest.TestCase):
    def test_two_lines_per_turn(self):
        stdin = io.StringIO(SETUP + TURN * 3)
        stdout = io.StringIO()
        turns = run(stdin, stdout, get_settings())
        self.assertEqual(turns, 3)

        lines = stdout.getvalue().splitlines()
        self.assertEqual(len(lines), 6)
        self.assertEqual(lines[0], "8000 8000 100")
        for line in lines:
            x, y, command = line.split()
            int(x), int(y)
            self.assertTrue(command in ("BOOST", "SHIELD") or 0 <= int(command) <= 100)

    def test_checkpoint_out_of_range(self):
        bad_turn = TURN.replace("2000 8000 0 0 0 2", "2000 8000 0 0 0 7")
        with self.assertRaises(ProtocolError):
            run(io.StringIO(SETUP + bad_turn), io.StringIO(), get_settings())

if __name__ == '__main__':
    unittest.main()
