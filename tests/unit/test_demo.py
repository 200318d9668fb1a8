"""
Unit tests for the watch-mode demo script.
"""
import pytest

import demo


@pytest.fixture(autouse=True)
def no_waiting(monkeypatch) -> None:
    """Skip sleeps and screen clears."""
    monkeypatch.setattr(demo.time, "sleep", lambda seconds: None)
    monkeypatch.setattr(demo, "clear_screen", lambda: None)


class TestDemo:
    """Test demo runs."""

    def test_seeded_run_completes(self, capsys) -> None:
        """A seeded run plays every game to the end."""
        demo.demo(delay=0, games=2, size=4, mines=3, seed=5)
        out = capsys.readouterr().out
        assert "=== Final:" in out
        assert out.count("=== Game 2/2 ===") == 1

    def test_unseeded_run_completes(self, capsys) -> None:
        """The seed is optional."""
        demo.demo(delay=0, games=1, size=3, mines=1)
        assert "/1 wins" in capsys.readouterr().out

    def test_seeded_runs_are_reproducible(self, capsys) -> None:
        """Same seed, same transcript."""
        demo.demo(delay=0, games=1, size=5, mines=4, seed=9)
        first = capsys.readouterr().out
        demo.demo(delay=0, games=1, size=5, mines=4, seed=9)
        assert capsys.readouterr().out == first
