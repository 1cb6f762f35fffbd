# test_tween.py
import unittest

from kickflip.lerp import lerp_number
from kickflip.tween import Tween, TweenState


class Recorder:
    """ Setter stand-in that remembers every write. """
    def __init__(self, fail_on_call=None):
        self.values = []
        self.fail_on_call = fail_on_call

    def __call__(self, v):
        if self.fail_on_call is not None and len(self.values) + 1 >= self.fail_on_call:
            raise RuntimeError("target destroyed")
        self.values.append(v)


def make(setter=None, start=0.0, end=10.0, duration=2.0, **kw):
    return Tween(setter=setter or Recorder(), start=start, end=end,
                 duration=duration, lerp=lerp_number, **kw)


class TestTweenTick(unittest.TestCase):
    def test_progress_is_monotonic_and_clamped(self):
        tw = make(duration=1.0)
        seen = []
        for dt in (0.1, 0.0, 0.3, -0.5, 0.4, 0.7, 0.2):
            tw.tick(dt)
            seen.append(tw.progress)
        self.assertEqual(seen, sorted(seen))
        self.assertLessEqual(max(seen), 1.0)
        self.assertEqual(tw.progress, 1.0)
        self.assertTrue(tw.is_complete)

    def test_linear_values_and_single_completion(self):
        rec = Recorder()
        done = []
        tw = make(setter=rec, duration=2.0, on_complete=lambda: done.append(1))
        tw.tick(1.0)
        tw.tick(1.0)
        tw.tick(1.0)  # already complete: ignored
        self.assertEqual(rec.values, [5.0, 10.0])
        self.assertEqual(done, [1])
        self.assertIs(tw.state, TweenState.COMPLETED)

    def test_on_complete_runs_after_final_write(self):
        order = []
        tw = make(setter=lambda v: order.append(("set", v)), duration=1.0,
                  on_complete=lambda: order.append(("done", None)))
        tw.tick(1.0)
        self.assertEqual(order, [("set", 10.0), ("done", None)])

    def test_ease_is_applied_to_progress(self):
        rec = Recorder()
        tw = make(setter=rec, start=0.0, end=100.0, duration=1.0, ease=lambda t: t * t)
        tw.tick(0.5)
        self.assertAlmostEqual(rec.values[-1], 25.0)
        self.assertAlmostEqual(tw.progress, 0.5)

    def test_tenth_second_frames_finish_exactly_on_duration(self):
        rec = Recorder()
        done = []
        tw = make(setter=rec, duration=1.0, on_complete=lambda: done.append(1))
        for _ in range(10):
            tw.tick(0.1)
        self.assertEqual(tw.progress, 1.0)
        self.assertTrue(tw.is_complete)
        self.assertEqual(done, [1])
        self.assertEqual(len(rec.values), 10)
        self.assertEqual(rec.values[-1], 10.0)

    def test_zero_duration_completes_on_first_tick(self):
        rec = Recorder()
        done = []
        tw = make(setter=rec, duration=0.0, on_complete=lambda: done.append(1))
        tw.tick(0.0)
        self.assertEqual(rec.values, [10.0])
        self.assertTrue(tw.is_complete)
        self.assertEqual(done, [1])

    def test_negative_duration_completes_on_first_tick(self):
        tw = make(duration=-3.0)
        tw.tick(0.016)
        self.assertTrue(tw.is_complete)

    def test_negative_delay_rejected(self):
        with self.assertRaises(ValueError):
            make(delay=-1.0)


class TestTweenFaults(unittest.TestCase):
    def test_setter_fault_kills_tween(self):
        rec = Recorder(fail_on_call=2)
        done = []
        tw = make(setter=rec, duration=4.0, on_complete=lambda: done.append(1))
        tw.tick(1.0)
        with self.assertLogs("kickflip.tween", level="WARNING"):
            tw.tick(1.0)
        self.assertIs(tw.state, TweenState.KILLED)
        self.assertIsInstance(tw.error, RuntimeError)
        self.assertEqual(rec.values, [2.5])
        self.assertAlmostEqual(tw.progress, 0.25)

        tw.tick(1.0)
        tw.tick(1.0)
        self.assertEqual(rec.values, [2.5])
        self.assertEqual(done, [])

    def test_fault_on_final_tick_does_not_complete(self):
        def boom(_):
            raise RuntimeError("gone")
        done = []
        tw = make(setter=boom, duration=1.0, on_complete=lambda: done.append(1))
        with self.assertLogs("kickflip.tween", level="WARNING"):
            tw.tick(5.0)
        self.assertFalse(tw.is_complete)
        self.assertIs(tw.state, TweenState.KILLED)
        self.assertEqual(done, [])

    def test_lerp_fault_kills_tween(self):
        def bad_lerp(a, b, t):
            raise TypeError("cannot interpolate")
        tw = Tween(setter=Recorder(), start="a", end="b", duration=1.0, lerp=bad_lerp)
        with self.assertLogs("kickflip.tween", level="WARNING"):
            tw.tick(0.1)
        self.assertIs(tw.state, TweenState.KILLED)

    def test_on_complete_error_is_contained(self):
        def explode():
            raise RuntimeError("handler bug")
        tw = make(duration=1.0, on_complete=explode)
        with self.assertLogs("kickflip.tween", level="WARNING"):
            tw.tick(1.0)
        self.assertIs(tw.state, TweenState.COMPLETED)


class TestTweenKillAndConflict(unittest.TestCase):
    def test_kill_is_idempotent(self):
        rec = Recorder()
        tw = make(setter=rec)
        tw.tick(0.5)
        tw.kill()
        state_once = (tw.state, tw.progress, list(rec.values))
        tw.kill()
        self.assertEqual((tw.state, tw.progress, list(rec.values)), state_once)
        tw.tick(1.0)
        self.assertEqual(rec.values, state_once[2])

    def test_kill_after_complete_is_noop(self):
        tw = make(duration=1.0)
        tw.tick(1.0)
        tw.kill()
        self.assertIs(tw.state, TweenState.COMPLETED)

    def test_conflicts_on_setter_identity_only(self):
        s1, s2 = Recorder(), Recorder()
        a = make(setter=s1, start=0.0, end=1.0)
        b = make(setter=s1, start=50.0, end=60.0)
        c = make(setter=s2, start=0.0, end=1.0)
        self.assertTrue(a.conflicts(b))
        self.assertTrue(b.conflicts(a))
        self.assertFalse(a.conflicts(c))

    def test_equal_but_distinct_setters_do_not_conflict(self):
        target = {}
        a = make(setter=lambda v: target.update(x=v))
        b = make(setter=lambda v: target.update(x=v))
        self.assertFalse(a.conflicts(b))


class TestTweenAdvance(unittest.TestCase):
    def test_delay_is_burned_before_progress(self):
        rec = Recorder()
        tw = make(setter=rec, start=0.0, end=1.0, duration=1.0, delay=1.0)
        tw.advance(0.5)
        tw.advance(0.5)
        self.assertEqual(rec.values, [])
        self.assertIs(tw.state, TweenState.RUNNING)
        tw.advance(0.5)
        self.assertFalse(tw.is_complete)
        tw.advance(0.5)
        self.assertTrue(tw.is_complete)

    def test_delay_overflow_carries_into_progress(self):
        tw = make(start=0.0, end=1.0, duration=1.0, delay=0.3)
        tw.advance(0.5)
        self.assertAlmostEqual(tw.progress, 0.2)

    def test_no_delay_ticks_on_first_advance(self):
        rec = Recorder()
        tw = make(setter=rec, duration=1.0)
        self.assertIs(tw.state, TweenState.PENDING)
        tw.advance(0.25)
        self.assertIs(tw.state, TweenState.RUNNING)
        self.assertEqual(rec.values, [2.5])


if __name__ == "__main__":
    unittest.main()
