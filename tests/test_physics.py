import unittest

from config import BOOST_THRUST, FRICTION, SHIELD_COOLDOWN, TIMEOUT_STEPS
from simulation.cpu_physics import Checkpoint, Pod, segment_hits_circle, solve_collisions, step

CHECKPOINTS = [Checkpoint(1000, 1000, 0), Checkpoint(9000, 1000, 1), Checkpoint(5000, 7000, 2)]

class TestPodMovement(unittest.TestCase):
    def test_thrust_friction_truncate(self):
        pod = Pod(0, 0, 1000, 5000, angle=0.0)
        pod.set_command(9000, 5000, 100)
        step([pod], CHECKPOINTS)
        self.assertEqual((pod.x, pod.y), (1100, 5000))
        self.assertEqual((pod.vx, pod.vy), (int(100 * FRICTION), 0))
        self.assertEqual(pod.timeout, TIMEOUT_STEPS - 1)

    def test_rotation_is_clamped(self):
        pod = Pod(0, 0, 1000, 5000, angle=0.0)
        pod.set_command(1000, 9000, 0) # Straight down: 90 degrees away
        step([pod], CHECKPOINTS)
        self.assertAlmostEqual(pod.angle, 18.0)

    def test_boost_once(self):
        pod = Pod(0, 0, 1000, 5000, angle=0.0)
        pod.set_command(9000, 5000, "BOOST")
        step([pod], CHECKPOINTS)
        self.assertEqual(pod.x, 1000 + BOOST_THRUST)
        self.assertFalse(pod.boost_available)

        # Second BOOST falls back to full thrust
        vx = pod.vx
        pod.set_command(20000, 5000, "BOOST")
        step([pod], CHECKPOINTS)
        self.assertEqual(pod.vx, int((vx + 100) * FRICTION))
        self.assertEqual(pod.boosts_used, 1)

    def test_shield_locks_thrust(self):
        pod = Pod(0, 0, 1000, 5000, angle=0.0)
        pod.set_command(9000, 5000, "SHIELD")
        step([pod], CHECKPOINTS)
        self.assertEqual(pod.vx, 0)
        for _ in range(SHIELD_COOLDOWN):
            pod.set_command(9000, 5000, 100)
            step([pod], CHECKPOINTS)
            self.assertEqual(pod.vx, 0)
        pod.set_command(9000, 5000, 100)
        step([pod], CHECKPOINTS)
        self.assertGreater(pod.vx, 0)

class TestCheckpoints(unittest.TestCase):
    def test_segment_sweep(self):
        # Passes through the disc without ending inside it
        self.assertTrue(segment_hits_circle(0, 0, 2000, 0, 1000, 300, 600))
        self.assertFalse(segment_hits_circle(0, 0, 2000, 0, 1000, 700, 600))
        self.assertTrue(segment_hits_circle(1000, 0, 1000, 0, 1000, 100, 600))

    def test_lap_counting(self):
        pod = Pod(0, 0, 1000, 1000)
        pod.pass_checkpoint(3) # 1 -> 2
        pod.pass_checkpoint(3) # 2 -> 0
        self.assertEqual(pod.laps, 0)
        pod.pass_checkpoint(3) # 0 -> 1, lap done
        self.assertEqual(pod.laps, 1)
        self.assertEqual(pod.next_checkpoint_id, 1)
        self.assertEqual(pod.checkpoints_passed, 3)

    def test_capture_resets_timeout(self):
        pod = Pod(0, 0, 8500, 1000, angle=0.0)
        pod.timeout = 10
        pod.set_command(9000, 1000, 100)
        step([pod], CHECKPOINTS)
        self.assertEqual(pod.next_checkpoint_id, 2)
        self.assertEqual(pod.timeout, TIMEOUT_STEPS - 1)

class TestCollisions(unittest.TestCase):
    def test_head_on_bounce(self):
        a = Pod(0, 0, 5000, 5000)
        b = Pod(1, 1, 5700, 5000)
        a.vx, b.vx = 300, -300
        solve_collisions([a, b])
        self.assertLess(a.vx, 0)
        self.assertGreater(b.vx, 0)
        self.assertAlmostEqual(a.vx + b.vx, 0.0)
        self.assertGreaterEqual(b.x - a.x, 800)

    def test_shield_mass(self):
        a = Pod(0, 0, 5000, 5000)
        b = Pod(1, 1, 5700, 5000)
        a.vx, b.vx = 300, -300
        a.mass = 10.0
        solve_collisions([a, b], iterations=1)
        # Heavy pod barely moves, light pod is thrown back
        self.assertGreater(a.vx, 0)
        self.assertGreater(b.vx, 200)

if __name__ == '__main__':
    unittest.main()
