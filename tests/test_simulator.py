"""Tests for simulator module."""

import numpy as np
import pandas as pd
import pytest

from monty_hall_sim.game import determine_winner
from monty_hall_sim.simulator import BatchResult, play_game, play_n_games


def test_play_game_basic():
    """Test play_game returns one stay row and one switch row."""
    rng = np.random.default_rng(42)

    record = play_game(rng)

    assert [r.strategy for r in record.results] == ["stay", "switch"]
    assert all(r.outcome in ("WIN", "LOSE") for r in record.results)

    df = record.to_frame()
    assert isinstance(df, pd.DataFrame)
    assert len(df) == 2


def test_play_game_shares_one_game():
    """Test both strategies are judged on the same game and opened door."""
    rng = np.random.default_rng(42)

    for _ in range(200):
        record = play_game(rng)

        assert record.opened_door != record.first_pick
        assert record.game[record.opened_door] == "goat"
        assert record.stay_pick == record.first_pick
        assert record.switch_pick not in (record.opened_door, record.first_pick)

        assert record.stay.outcome == determine_winner(record.stay_pick, record.game)
        assert record.switch.outcome == determine_winner(
            record.switch_pick, record.game
        )
        # Exactly one of the two strategies wins on a shared game
        assert {record.stay.outcome, record.switch.outcome} == {"WIN", "LOSE"}


def test_play_game_deterministic():
    """Test that a game is deterministic with same seed."""
    record1 = play_game(np.random.default_rng(42))
    record2 = play_game(np.random.default_rng(42))

    assert record1 == record2


def test_play_n_games_row_counts():
    """Test a batch has 2n rows, n per strategy."""
    batch = play_n_games(50, np.random.default_rng(42), show=False)

    assert isinstance(batch, BatchResult)
    assert batch.n_games == 50
    assert len(batch) == 100

    df = batch.to_frame()
    assert list(df.columns) == ["strategy", "outcome"]
    assert (df["strategy"] == "stay").sum() == 50
    assert (df["strategy"] == "switch").sum() == 50
    # Rows alternate stay/switch in play order
    assert df["strategy"].tolist() == ["stay", "switch"] * 50


def test_play_n_games_default_count():
    """Test the default batch size is 100 games."""
    batch = play_n_games(rng=np.random.default_rng(1), show=False)

    assert batch.n_games == 100
    assert len(batch) == 200


def test_play_n_games_invalid_n():
    """Test batches of zero or negative games are rejected."""
    with pytest.raises(ValueError, match="Number of games must be positive"):
        play_n_games(0, show=False)

    with pytest.raises(ValueError, match="Number of games must be positive"):
        play_n_games(-3, show=False)

    with pytest.raises(ValueError, match="Number of games must be an integer"):
        play_n_games(2.5, show=False)


def test_play_n_games_seed_reproducible():
    """Test the seed argument gives reproducible batches."""
    batch1 = play_n_games(30, seed=7, show=False)
    batch2 = play_n_games(30, seed=7, show=False)

    assert batch1.results == batch2.results


def test_play_n_games_independent_batches():
    """Test batches do not share accumulated results."""
    rng = np.random.default_rng(42)

    batch1 = play_n_games(10, rng, show=False)
    batch2 = play_n_games(5, rng, show=False)

    assert len(batch1) == 20
    assert len(batch2) == 10


def test_play_n_games_prints_table(capsys):
    """Test the proportion table is printed by default."""
    play_n_games(20, np.random.default_rng(42))

    out = capsys.readouterr().out
    assert "WIN" in out
    assert "LOSE" in out
    assert "stay" in out
    assert "switch" in out


def test_play_n_games_quiet(capsys):
    """Test nothing is printed with show=False."""
    play_n_games(20, np.random.default_rng(42), show=False)

    assert capsys.readouterr().out == ""


def test_play_n_games_verbose_progress(capsys):
    """Test progress lines are printed in verbose mode."""
    play_n_games(40, np.random.default_rng(42), show=False, verbose=True)

    out = capsys.readouterr().out
    assert "Progress: 2/40" in out
    assert "Progress: 40/40" in out


def test_batch_result_proportions():
    """Test proportions sum to one per strategy."""
    batch = play_n_games(200, np.random.default_rng(42), show=False)
    table = batch.proportions()

    assert list(table.index) == ["stay", "switch"]
    assert list(table.columns) == ["WIN", "LOSE"]
    for strategy in ("stay", "switch"):
        assert table.loc[strategy].sum() == pytest.approx(1.0, abs=0.011)


def test_batch_result_win_proportion_complementary():
    """Test stay and switch win rates add up to one on shared games."""
    batch = play_n_games(300, np.random.default_rng(3), show=False)

    total = batch.win_proportion("stay") + batch.win_proportion("switch")
    assert total == pytest.approx(1.0)

    with pytest.raises(ValueError, match="Unknown strategy"):
        batch.win_proportion("hold")


def test_batch_result_summary():
    """Test the batch summary matches the collected rows."""
    batch = play_n_games(100, np.random.default_rng(42), show=False)
    stats = batch.summary()

    assert stats["games"] == 100
    assert stats["stay_win_rate"] == pytest.approx(batch.win_proportion("stay"))


def test_switch_beats_stay_over_many_games():
    """Test win rates converge to 1/3 for stay and 2/3 for switch."""
    batch = play_n_games(50_000, np.random.default_rng(2024), show=False)

    assert batch.win_proportion("stay") == pytest.approx(1 / 3, abs=0.02)
    assert batch.win_proportion("switch") == pytest.approx(2 / 3, abs=0.02)
