"""
Data models for the transcript summarizer.
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class TranscriptSourceType(str, Enum):
    """Ways a transcript can be obtained."""
    YOUTUBE = "youtube"
    HTTP = "http"
    PROCESS = "process"


class PipelineStage(str, Enum):
    """Steps of a pipeline run, in order."""
    EXTRACT_IDENTIFIER = "extract_identifier"
    FETCH_TRANSCRIPT = "fetch_transcript"
    SUMMARIZE = "summarize"


class TranscriptEntry(BaseModel):
    """One caption line as returned by a transcript service."""
    text: str
    start: Optional[float] = None
    duration: Optional[float] = None


class SummaryConfig(BaseModel):
    """Configuration for summarization requests."""
    api_url: str = "https://api-inference.huggingface.co/models/facebook/bart-large-cnn"
    api_token: str
    chunk_size: int = Field(default=1024, ge=1)
    max_length: int = 150
    min_length: int = 30
    do_sample: bool = False
    timeout: Optional[float] = None

    model_config = {"frozen": True}

    @field_validator('api_token')
    def validate_api_token(cls, v):
        if not v.strip():
            raise ValueError('API token must not be empty')
        return v

    def generation_parameters(self) -> dict:
        """Parameters sent alongside every chunk."""
        return {
            "max_length": self.max_length,
            "min_length": self.min_length,
            "do_sample": self.do_sample,
        }


class SummaryResult(BaseModel):
    """Outcome of one pipeline run."""
    video_id: Optional[str] = None
    transcript: Optional[str] = None
    summary: Optional[str] = None

    model_config = {"frozen": True}
