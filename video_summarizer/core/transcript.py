"""
Module for locating a video's identifier and fetching its transcript.
"""

import json
import re
import shlex
import subprocess
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import requests
from pydantic import ValidationError
from youtube_transcript_api import CouldNotRetrieveTranscript, YouTubeTranscriptApi

from video_summarizer.models.schemas import TranscriptEntry, TranscriptSourceType
from video_summarizer.utils.error_handling import ConfigError, TranscriptFetchError
from video_summarizer.utils.helpers import truncate_text
from video_summarizer.utils.logger import logging

VIDEO_ID_PATTERN = re.compile(r"(?:v=|/)([0-9A-Za-z_-]{11})")


def extract_video_id(url: str) -> Optional[str]:
    """
    Extract the 11-character video ID from a YouTube URL.

    Args:
        url: Anything URL-like, e.g. ``https://youtu.be/<id>`` or ``...watch?v=<id>``

    Returns:
        The video ID, or None if nothing matched
    """
    match = VIDEO_ID_PATTERN.search(url.strip())
    return match.group(1) if match else None


def join_transcript_entries(raw: str) -> str:
    """
    Parse a JSON array of transcript entries and join their text.

    Raises:
        ValueError: If the payload is not an array of objects with ``text``
    """
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")
    entries = [TranscriptEntry.model_validate(item) for item in data]
    return " ".join(entry.text for entry in entries)


class TranscriptSource(ABC):
    """Something that turns a video ID into transcript text."""

    @abstractmethod
    def fetch(self, video_id: str) -> str:
        """
        Fetch the full transcript for a video.

        Raises:
            TranscriptFetchError: If the transcript cannot be obtained
        """


class YouTubeTranscriptSource(TranscriptSource):
    """Fetches captions directly from YouTube with youtube-transcript-api."""

    def __init__(self, languages: Sequence[str] = ("en",)):
        self.languages = list(languages)
        self.api = YouTubeTranscriptApi()

    def fetch(self, video_id: str) -> str:
        logging.info(f"Fetching YouTube captions for: {video_id}")
        try:
            transcript = self.api.fetch(video_id, languages=self.languages)
        except (CouldNotRetrieveTranscript, requests.RequestException) as e:
            raise TranscriptFetchError(f"Failed to fetch captions for {video_id}") from e
        return " ".join(snippet.text for snippet in transcript)


class HttpTranscriptSource(TranscriptSource):
    """Fetches a transcript from an HTTP service returning ``[{"text": ...}, ...]``."""

    def __init__(self, url_template: str, timeout: Optional[float] = None):
        """
        Args:
            url_template: URL containing a ``{video_id}`` placeholder
            timeout: Optional request timeout in seconds
        """
        if "{video_id}" not in url_template:
            raise ConfigError(f"Transcript URL template must contain '{{video_id}}': {url_template}")
        self.url_template = url_template
        self.timeout = timeout

    def fetch(self, video_id: str) -> str:
        url = self.url_template.format(video_id=video_id)
        logging.info(f"Fetching transcript from: {url}")

        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise TranscriptFetchError(f"Failed to fetch transcript from {url}") from e

        logging.debug(f"Raw transcript response: {truncate_text(response.text, 500)}")
        try:
            return join_transcript_entries(response.text)
        except (ValueError, ValidationError) as e:
            raise TranscriptFetchError(
                f"Failed to parse transcript JSON: {truncate_text(response.text, 200)}"
            ) from e


class ProcessTranscriptSource(TranscriptSource):
    """Delegates transcript fetching to an external command that prints JSON entries."""

    def __init__(self, command: str, timeout: Optional[float] = None):
        """
        Args:
            command: Shell-style command line; ``{video_id}`` is substituted,
                or the ID is appended when no placeholder is present
            timeout: Optional time limit for the command in seconds
        """
        self.args = shlex.split(command)
        if not self.args:
            raise ConfigError("Transcript command must not be empty")
        self.timeout = timeout

    def _build_args(self, video_id: str) -> List[str]:
        if any("{video_id}" in arg for arg in self.args):
            return [arg.replace("{video_id}", video_id) for arg in self.args]
        return self.args + [video_id]

    def fetch(self, video_id: str) -> str:
        args = self._build_args(video_id)
        logging.info(f"Running transcript command: {' '.join(args)}")

        try:
            completed = subprocess.run(
                args,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as e:
            stderr = truncate_text((e.stderr or "").strip(), 200)
            raise TranscriptFetchError(
                f"Transcript command exited with status {e.returncode}: {stderr}"
            ) from e
        except UnicodeDecodeError as e:
            raise TranscriptFetchError(
                f"Transcript command {args[0]} printed output that is not valid UTF-8"
            ) from e
        except (OSError, subprocess.SubprocessError) as e:
            raise TranscriptFetchError(f"Failed to run transcript command {args[0]}") from e

        try:
            return join_transcript_entries(completed.stdout)
        except (ValueError, ValidationError) as e:
            raise TranscriptFetchError(
                f"Failed to parse transcript command output: {truncate_text(completed.stdout, 200)}"
            ) from e


def create_transcript_source(config, timeout: Optional[float] = None) -> TranscriptSource:
    """
    Build the transcript source named by ``config.TRANSCRIPT_SOURCE``.

    Args:
        config: Configuration class (see ``video_summarizer.config``)
        timeout: Validated request timeout in seconds, if any

    Raises:
        ConfigError: For an unknown source type or missing settings
    """
    try:
        source_type = TranscriptSourceType(str(config.TRANSCRIPT_SOURCE).lower())
    except ValueError as e:
        raise ConfigError(f"Unknown transcript source: {config.TRANSCRIPT_SOURCE}") from e

    if source_type == TranscriptSourceType.HTTP:
        if not config.TRANSCRIPT_API_URL:
            raise ConfigError("TRANSCRIPT_API_URL is required for the http transcript source")
        return HttpTranscriptSource(config.TRANSCRIPT_API_URL, timeout=timeout)

    if source_type == TranscriptSourceType.PROCESS:
        if not config.TRANSCRIPT_COMMAND:
            raise ConfigError("TRANSCRIPT_COMMAND is required for the process transcript source")
        return ProcessTranscriptSource(config.TRANSCRIPT_COMMAND, timeout=timeout)

    return YouTubeTranscriptSource(config.TRANSCRIPT_LANGUAGES or ["en"])
