import unittest

from pilot.course import Course, find_optimal_boost_checkpoint
from pilot.errors import ProtocolError

class TestCourse(unittest.TestCase):
    def test_boost_checkpoint_follows_longest_edge(self):
        # Edges: 0->1 = 10000, 1->2 = 2000, 2->0 ~ 10198
        course = Course.build(3, [(0, 0), (10000, 0), (10000, 2000)])
        self.assertEqual(course.optimal_boost_checkpoint_id, 0)

        # Edges: 0->1 = 10000, 1->2 = 5000, 2->0 = 5000
        course = Course.build(3, [(0, 0), (10000, 0), (5000, 0)])
        self.assertEqual(course.optimal_boost_checkpoint_id, 1)

    def test_closing_edge_counts(self):
        # (10000, 5000) -> (0, 0) is ~11180, longer than the 10000 first leg
        cps = [(0, 0), (10000, 0), (10000, 5000)]
        self.assertEqual(find_optimal_boost_checkpoint(cps), 0)

    def test_ring_wraps(self):
        course = Course.build(2, [(1000, 1000), (5000, 1000), (5000, 4000), (1000, 4000)])
        self.assertEqual(course.checkpoint_count, 4)
        self.assertEqual(course.next_id(3), 0)
        self.assertEqual(course.checkpoint(5), (5000, 1000))
        self.assertEqual(course.laps, 2)

    def test_course_is_immutable(self):
        course = Course.build(3, [(0, 0), (4000, 0)])
        with self.assertRaises(Exception):
            course.laps = 5

    def test_too_few_checkpoints(self):
        with self.assertRaises(ProtocolError):
            Course.build(3, [(0, 0)])

if __name__ == '__main__':
    unittest.main()
