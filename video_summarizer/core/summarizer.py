"""
Module for summarizing transcripts through the Hugging Face Inference API.
"""

from typing import Optional

import requests

from video_summarizer.core.chunker import chunk_text
from video_summarizer.models.schemas import SummaryConfig
from video_summarizer.utils.error_handling import (
    NoSummaryProduced,
    SummarizationParseError,
    SummarizationTransportError,
)
from video_summarizer.utils.helpers import truncate_text
from video_summarizer.utils.logger import logging

SUMMARY_SEPARATOR = "\n\n"


class HuggingFaceSummarizer:
    """Class to handle chunked transcript summarization."""

    def __init__(self, config: SummaryConfig):
        """
        Initialize the summarizer.

        Args:
            config: Endpoint, credential and generation settings
        """
        self.config = config

    def _headers(self) -> dict:
        return {"Authorization": f"Bearer {self.config.api_token}"}

    def summarize_chunk(self, chunk: str, position: int = 0) -> Optional[str]:
        """
        Summarize a single chunk.

        Only the first element of the returned array is read.

        Args:
            chunk: Text to summarize
            position: Index of the chunk in the transcript, used in errors

        Returns:
            The summary text, or None if the endpoint returned an empty array
        """
        payload = {
            "inputs": chunk,
            "parameters": self.config.generation_parameters(),
        }

        try:
            response = requests.post(
                self.config.api_url,
                headers=self._headers(),
                json=payload,
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logging.error(f"Summarization request failed for chunk {position}: {str(e)}")
            raise SummarizationTransportError(
                f"Summarization request failed for chunk {position}", position
            ) from e

        try:
            results = response.json()
        except ValueError as e:
            logging.error(f"Unparseable summarization response for chunk {position}: {str(e)}")
            raise SummarizationParseError(
                f"Failed to parse summarization response for chunk {position}: "
                f"{truncate_text(response.text, 200)}",
                position,
            ) from e

        if not isinstance(results, list):
            logging.error(f"Summarization response for chunk {position} is not a JSON array")
            raise SummarizationParseError(
                f"Expected a JSON array for chunk {position}, got {type(results).__name__}",
                position,
            )
        if not results:
            logging.warning(f"Empty summarization response for chunk {position}")
            return None

        first = results[0]
        summary = first.get("summary_text") if isinstance(first, dict) else None
        if not isinstance(summary, str):
            logging.error(f"Summarization response for chunk {position} has no summary_text")
            raise SummarizationParseError(
                f"Missing 'summary_text' in response for chunk {position}", position
            )
        return summary

    def summarize(self, text: str) -> str:
        """
        Summarize a full transcript.

        Chunks are summarized one after another in document order; the first
        failure aborts the remaining chunks.

        Args:
            text: Full transcript text

        Returns:
            Chunk summaries joined by blank lines
        """
        chunks = chunk_text(text, self.config.chunk_size)
        logging.info(f"Summarizing {len(chunks)} chunk(s)")

        summaries = []
        for position, chunk in enumerate(chunks):
            logging.debug(f"Summarizing chunk {position + 1}/{len(chunks)} ({len(chunk)} chars)")
            summary = self.summarize_chunk(chunk, position)
            if summary is not None:
                summaries.append(summary)

        if not summaries:
            raise NoSummaryProduced("No summary generated")

        return SUMMARY_SEPARATOR.join(summaries)
