"""
Tests for scoring formulas and the tick-rate feedback channel.
"""

import unittest

from falling_blocks.config import GameConfig
from falling_blocks.game.events import Tick
from falling_blocks.game.rules import ScoringRules
from falling_blocks.game.scheduler import TickClock, TickRateChannel


class TestScoringRules(unittest.TestCase):

    def setUp(self):
        self.rules = ScoringRules()

    def test_line_score(self):
        self.assertEqual(self.rules.score_for_lines(0), 0)
        self.assertEqual(self.rules.score_for_lines(1), 100)
        self.assertEqual(self.rules.score_for_lines(4), 400)

    def test_level_every_five_lines(self):
        self.assertEqual(self.rules.level_for_lines(0), 0)
        self.assertEqual(self.rules.level_for_lines(4), 0)
        self.assertEqual(self.rules.level_for_lines(5), 1)
        self.assertEqual(self.rules.level_for_lines(12), 2)
        self.assertEqual(self.rules.level_for_lines(25), 5)

    def test_tick_interval_formula(self):
        expected = {0: 500, 4: 500, 5: 400, 6: 400, 7: 300, 8: 300, 9: 200, 11: 100}
        for level, interval in expected.items():
            self.assertEqual(self.rules.tick_interval(level), interval, level)

    def test_tick_interval_never_reaches_zero(self):
        for level in range(13, 40):
            self.assertEqual(self.rules.tick_interval(level), 100)

    def test_from_config(self):
        rules = ScoringRules.from_config(GameConfig(line_score=40, lock_bonus=1, base_tick_ms=800))
        self.assertEqual(rules.score_for_lines(2), 80)
        self.assertEqual(rules.lock_bonus, 1)
        self.assertEqual(rules.tick_interval(0), 800)


class TestTickRateChannel(unittest.TestCase):

    def test_subscriber_gets_current_value(self):
        channel = TickRateChannel(500)
        heard = []
        channel.subscribe(heard.append)
        self.assertEqual(heard, [500])

    def test_repeated_value_is_suppressed(self):
        channel = TickRateChannel()
        heard = []
        channel.subscribe(heard.append)
        self.assertTrue(channel.publish(500))
        self.assertFalse(channel.publish(500))
        self.assertTrue(channel.publish(400))
        self.assertEqual(heard, [500, 400])
        self.assertEqual(channel.interval, 400)

    def test_unsubscribe(self):
        channel = TickRateChannel()
        heard = []
        unsubscribe = channel.subscribe(heard.append)
        unsubscribe()
        channel.publish(300)
        self.assertEqual(heard, [])

    def test_rejects_non_positive_interval(self):
        with self.assertRaises(ValueError):
            TickRateChannel().publish(0)


class TestTickClock(unittest.TestCase):

    def test_emits_one_tick_per_interval(self):
        clock = TickClock(TickRateChannel(500))
        self.assertEqual(list(clock.advance(1200)), [Tick(0), Tick(1)])
        self.assertEqual(list(clock.advance(299)), [])
        self.assertEqual(list(clock.advance(1)), [Tick(2)])

    def test_no_ticks_without_interval(self):
        clock = TickClock(TickRateChannel())
        self.assertEqual(list(clock.advance(10000)), [])

    def test_cadence_change_restarts_period(self):
        channel = TickRateChannel(500)
        clock = TickClock(channel)
        list(clock.advance(700))
        channel.publish(400)
        self.assertEqual(list(clock.advance(399)), [])
        self.assertEqual(list(clock.advance(1)), [Tick(0)])

    def test_change_during_advance_takes_effect(self):
        channel = TickRateChannel(100)
        clock = TickClock(channel)
        ticks = []
        for tick in clock.advance(1000):
            ticks.append(tick)
            if len(ticks) == 2:
                channel.publish(50)
        self.assertEqual(len(ticks), 2)

    def test_close_detaches_from_channel(self):
        channel = TickRateChannel(100)
        clock = TickClock(channel)
        clock.close()
        list(clock.advance(150))
        channel.publish(200)
        # Pending time is no longer reset by the channel.
        self.assertEqual(list(clock.advance(150)), [Tick(1)])


if __name__ == "__main__":
    unittest.main()
