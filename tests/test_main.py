"""
Tests for the command line entry point.
"""

import pytest
from unittest.mock import patch, MagicMock

from video_summarizer import main as cli
from video_summarizer.models.schemas import PipelineStage, SummaryResult
from video_summarizer.utils.error_handling import PipelineError, TranscriptFetchError


@pytest.fixture
def mock_pipeline():
    """Fixture to mock pipeline construction."""
    with patch('video_summarizer.main.build_pipeline') as mock_build:
        yield mock_build.return_value


def test_main_prints_summary(mock_pipeline, config_file, monkeypatch, capsys):
    monkeypatch.setattr(cli.config, "CONFIG_PATH", str(config_file))
    monkeypatch.setattr("builtins.input", lambda prompt: "https://youtu.be/V3TUEeB0kW0")
    mock_pipeline.process.return_value = SummaryResult(
        video_id="V3TUEeB0kW0", transcript="text", summary="A\n\nB"
    )

    assert cli.main() == 0

    out = capsys.readouterr().out
    assert "Video Summary:" in out
    assert "A\n\nB" in out
    mock_pipeline.process.assert_called_once_with("https://youtu.be/V3TUEeB0kW0")


def test_main_prints_error_chain(mock_pipeline, config_file, monkeypatch, capsys):
    monkeypatch.setattr(cli.config, "CONFIG_PATH", str(config_file))
    monkeypatch.setattr("builtins.input", lambda prompt: "https://youtu.be/V3TUEeB0kW0")

    cause = TranscriptFetchError("Failed to fetch captions for V3TUEeB0kW0")
    error = PipelineError("Failed to fetch transcript", stage=PipelineStage.FETCH_TRANSCRIPT, cause=cause)
    error.__cause__ = cause
    mock_pipeline.process.side_effect = error

    assert cli.main() == 1

    out = capsys.readouterr().out
    assert "Error: Failed to fetch transcript: Failed to fetch captions for V3TUEeB0kW0" in out
    assert "Video Summary:" not in out


def test_main_missing_credentials_aborts_before_prompt(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(cli.config, "CONFIG_PATH", str(tmp_path / "missing.json"))
    prompt = MagicMock()
    monkeypatch.setattr("builtins.input", prompt)

    assert cli.main() == 1

    prompt.assert_not_called()
    assert "Failed to open config file" in capsys.readouterr().out


def test_summarize_youtube_video(mock_pipeline):
    mock_pipeline.process.return_value = SummaryResult(summary="done")

    result = cli.summarize_youtube_video("https://youtu.be/V3TUEeB0kW0", "hf_test_token")

    assert result.summary == "done"
    mock_pipeline.process.assert_called_once_with("https://youtu.be/V3TUEeB0kW0")


@pytest.mark.parametrize("chunk_size", ["0", "-5", "not-a-number"])
def test_main_invalid_chunk_budget(chunk_size, config_file, monkeypatch, capsys):
    monkeypatch.setattr(cli.config, "CONFIG_PATH", str(config_file))
    monkeypatch.setattr(cli.config, "CHUNK_MAX_LENGTH", chunk_size)
    prompt = MagicMock()
    monkeypatch.setattr("builtins.input", prompt)

    assert cli.main() == 1

    prompt.assert_not_called()
    assert "Error: Invalid summarization settings: chunk_size" in capsys.readouterr().out
