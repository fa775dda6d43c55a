"""Tests for TurnDrawer and AgeUpSignal."""

import random
import threading

import pytest

from docadventure.engine.age_signal import AgeUpSignal
from docadventure.engine.turn_draw import TurnDrawer
from docadventure.models.payloads import TurnKind


class TestTurnDrawer:
    """Test suite for TurnDrawer."""

    def test_always_situation(self):
        """Test that probability 1 always draws a situation."""
        drawer = TurnDrawer(random.Random(1), situation_probability=1.0)
        assert {drawer.draw() for _ in range(100)} == {TurnKind.SITUATION}

    def test_always_event(self):
        """Test that probability 0 always draws an event."""
        drawer = TurnDrawer(random.Random(1), situation_probability=0.0)
        assert {drawer.draw() for _ in range(100)} == {TurnKind.EVENT}

    def test_default_split(self):
        """Test that the default draw is roughly 70/30."""
        drawer = TurnDrawer(random.Random(5))
        draws = [drawer.draw() for _ in range(10000)]
        share = draws.count(TurnKind.SITUATION) / len(draws)
        assert 0.67 < share < 0.73

    def test_seeded_draws_reproducible(self):
        """Test that the same seed gives the same sequence."""
        first = TurnDrawer(random.Random(3))
        second = TurnDrawer(random.Random(3))
        assert [first.draw() for _ in range(50)] == [second.draw() for _ in range(50)]

    @pytest.mark.parametrize("probability", [-0.1, 1.5])
    def test_invalid_probability(self, probability):
        """Test that probabilities outside [0, 1] are rejected."""
        with pytest.raises(ValueError):
            TurnDrawer(situation_probability=probability)


class TestAgeUpSignal:
    """Test suite for AgeUpSignal."""

    def test_trigger_and_drain(self):
        """Test that drain returns and clears the pending count."""
        signal = AgeUpSignal()
        signal.trigger()
        signal.trigger()
        assert signal.pending == 2
        assert signal.drain() == 2
        assert signal.pending == 0
        assert signal.drain() == 0

    def test_concurrent_triggers(self):
        """Test that triggers from many threads are all counted."""
        signal = AgeUpSignal()

        def trigger_many():
            for _ in range(1000):
                signal.trigger()

        threads = [threading.Thread(target=trigger_many) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert signal.drain() == 8000
