import unittest

from match_recorder.models import MatchClock


class MatchClockTests(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = MatchClock()

    def test_elapsed_is_zero_before_start(self) -> None:
        self.assertEqual(self.clock.elapsed_seconds(5000), 0)

    def test_running_elapsed_is_floored(self) -> None:
        self.clock.start(1000)
        self.assertEqual(self.clock.elapsed_seconds(1000), 0)
        self.assertEqual(self.clock.elapsed_seconds(1065.9), 65)

    def test_elapsed_never_negative_with_clock_skew(self) -> None:
        self.clock.start(1000)
        self.assertEqual(self.clock.elapsed_seconds(999.2), 0)
        self.assertEqual(self.clock.elapsed_seconds(400), 0)

    def test_pause_freezes_elapsed(self) -> None:
        self.clock.start(1000)
        self.clock.pause(1065)
        self.assertFalse(self.clock.running)
        self.assertEqual(self.clock.elapsed_seconds(1065), 65)
        self.assertEqual(self.clock.elapsed_seconds(5000), 65)

    def test_resume_rebases_anchor_for_continuity(self) -> None:
        self.clock.start(1000)
        self.clock.pause(1065)
        self.clock.resume(2000)
        self.assertEqual(self.clock.anchor_ms, (2000 - 65) * 1000)
        self.assertEqual(self.clock.elapsed_seconds(2000), 65)
        self.assertEqual(self.clock.elapsed_seconds(2010), 75)

    def test_resume_while_running_is_ignored(self) -> None:
        self.clock.start(1000)
        self.clock.resume(1500)
        self.clock.resume(1501)
        self.assertEqual(self.clock.anchor_ms, 1_000_000)
        self.assertEqual(self.clock.elapsed_seconds(1510), 510)

    def test_stop_freezes_final_value(self) -> None:
        self.clock.start(1000)
        self.clock.stop(1300)
        self.assertTrue(self.clock.stopped)
        self.assertEqual(self.clock.elapsed_seconds(9000), 300)

        self.clock.resume(9000)
        self.assertFalse(self.clock.running)
        self.assertEqual(self.clock.elapsed_seconds(9999), 300)

    def test_stop_while_paused_keeps_paused_value(self) -> None:
        self.clock.start(1000)
        self.clock.pause(1042)
        self.clock.stop(5000)
        self.assertEqual(self.clock.elapsed_seconds(6000), 42)

    def test_json_round_trip_preserves_running_clock(self) -> None:
        self.clock.start(1000)
        restored = MatchClock.from_json(self.clock.to_json())
        self.assertEqual(restored, self.clock)
        self.assertEqual(restored.elapsed_seconds(1030), 30)


if __name__ == "__main__":
    unittest.main()
