"""
Configuration for pytest tests.
"""

import json
import pytest
from unittest.mock import MagicMock

import requests

from video_summarizer.models.schemas import SummaryConfig


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://youtu.be/V3TUEeB0kW0?si=-InVol0JhtWji-6R"


@pytest.fixture(scope="session")
def test_video_id():
    """Return the video ID contained in test_video_url."""
    return "V3TUEeB0kW0"


@pytest.fixture
def summary_config():
    """Fixture to create a SummaryConfig pointing at a fake endpoint."""
    return SummaryConfig(
        api_url="https://inference.test/models/bart",
        api_token="test_api_token",
        chunk_size=1024,
    )


@pytest.fixture
def config_file(tmp_path):
    """Write a credential file and return its path."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"token": "hf_test_token"}), encoding="utf-8")
    return path


def make_response(payload=None, text=None, status_code=200):
    """Build a fake requests.Response-like object."""
    response = MagicMock()
    response.status_code = status_code
    if text is None:
        text = json.dumps(payload)
    response.text = text

    def _json():
        return json.loads(text)

    response.json.side_effect = _json

    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def fake_response():
    """Expose make_response to tests."""
    return make_response
