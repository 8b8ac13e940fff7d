"""Tests for the terminal driver."""

from click.testing import CliRunner

from cli.main import main


def test_plays_to_the_end_without_input():
    """Test that the game finishes when stdin is exhausted."""
    runner = CliRunner()
    result = runner.invoke(main, input="", env={"NAIPE_SEED": "42"})

    assert result.exit_code == 0
    assert result.output.strip() in ("Player 1 Won!", "Player 2 Won!")


def test_steps_on_each_line():
    """Test that lines of input are consumed as steps."""
    runner = CliRunner()
    result = runner.invoke(main, input="\n" * 10, env={"NAIPE_SEED": "42"})

    assert result.exit_code == 0
    assert result.output.strip().endswith("Won!")


def test_seed_makes_result_reproducible():
    """Test that the same seed always crowns the same player."""
    runner = CliRunner()
    first = runner.invoke(main, input="", env={"NAIPE_SEED": "2024"})
    second = runner.invoke(main, input="", env={"NAIPE_SEED": "2024"})

    assert first.exit_code == second.exit_code == 0
    assert first.output == second.output
