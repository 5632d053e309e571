"""
Centralized error types for the application.

Every stage raises its own error type and chains the underlying cause with
``raise ... from exc``; ``format_error_chain`` renders that chain for the CLI.
"""

from typing import Optional

from video_summarizer.models.schemas import PipelineStage, SummaryResult


class VideoSummarizerError(Exception):
    """Base class for all application errors."""


class ConfigError(VideoSummarizerError):
    """Credential file missing or unparseable."""


class TranscriptFetchError(VideoSummarizerError):
    """Transcript could not be fetched or parsed."""


class SummarizationError(VideoSummarizerError):
    """Base class for summarization failures."""


class SummarizationTransportError(SummarizationError):
    """The request for one chunk failed at the transport level."""

    def __init__(self, message: str, position: int):
        super().__init__(message)
        self.position = position


class SummarizationParseError(SummarizationError):
    """The response for one chunk did not have the expected shape."""

    def __init__(self, message: str, position: int):
        super().__init__(message)
        self.position = position


class NoSummaryProduced(SummarizationError):
    """All chunks were processed but none yielded a summary."""


class PipelineError(VideoSummarizerError):
    """
    Terminal pipeline failure.

    Attributes:
        stage: The step that was being attempted
        cause: The underlying exception, if any
        result: Whatever the pipeline had produced before failing
    """

    def __init__(
        self,
        message: str,
        stage: PipelineStage,
        cause: Optional[BaseException] = None,
        result: Optional[SummaryResult] = None,
    ):
        super().__init__(message)
        self.stage = stage
        self.cause = cause
        self.result = result or SummaryResult()


class IdentifierNotFound(PipelineError):
    """No video identifier could be extracted from the input."""

    def __init__(self, source: str):
        super().__init__(
            f"Failed to extract video ID from URL: {source!r}",
            stage=PipelineStage.EXTRACT_IDENTIFIER,
        )
        self.source = source


def format_error_chain(error: BaseException) -> str:
    """
    Render an exception and its causes as ``outer: inner: root``.

    Args:
        error: The outermost exception

    Returns:
        Single-line description of the whole chain
    """
    messages = []
    seen = set()
    current: Optional[BaseException] = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        messages.append(str(current) or type(current).__name__)
        current = current.__cause__
    return ": ".join(messages)
