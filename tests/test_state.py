import unittest

from lift.state import Direction, MotionState, StateKind


class MotionStateTest(unittest.TestCase):
    def test_text_form(self):
        self.assertEqual(str(MotionState.stopped()), "Stopped")
        self.assertEqual(str(MotionState.opened()), "Opened")
        self.assertEqual(str(MotionState.moving(Direction.UP)), "Moving(Up)")
        self.assertEqual(str(MotionState.moving(Direction.DOWN)), "Moving(Down)")

    def test_only_moving_carries_a_direction(self):
        with self.assertRaises(ValueError):
            MotionState(StateKind.MOVING)
        with self.assertRaises(ValueError):
            MotionState(StateKind.OPENED, Direction.UP)

    def test_equality_includes_direction(self):
        self.assertEqual(MotionState.moving(Direction.UP), MotionState.moving(Direction.UP))
        self.assertNotEqual(MotionState.moving(Direction.UP), MotionState.moving(Direction.DOWN))
        self.assertTrue(MotionState.opened().is_opened)
        self.assertFalse(MotionState.stopped().is_moving)


if __name__ == "__main__":
    unittest.main()
