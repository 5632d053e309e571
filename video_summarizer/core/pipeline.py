"""
Module tying identifier extraction, transcript fetching and summarization together.
"""

from video_summarizer.core.summarizer import HuggingFaceSummarizer
from video_summarizer.core.transcript import TranscriptSource, extract_video_id
from video_summarizer.models.schemas import PipelineStage, SummaryResult
from video_summarizer.utils.error_handling import IdentifierNotFound, PipelineError
from video_summarizer.utils.logger import logging


class VideoSummaryPipeline:
    """Runs one URL through extraction, transcript fetch and summarization."""

    def __init__(self, transcript_source: TranscriptSource, summarizer: HuggingFaceSummarizer):
        """
        Initialize the pipeline.

        Args:
            transcript_source: Where transcripts come from
            summarizer: Client used to summarize the transcript
        """
        self.transcript_source = transcript_source
        self.summarizer = summarizer

    def process(self, url: str) -> SummaryResult:
        """
        Process a YouTube URL into a summary.

        Each step runs once; the first failure is raised as a ``PipelineError``
        carrying the failed stage, its cause and whatever was produced so far.

        Args:
            url: YouTube video URL

        Returns:
            SummaryResult with video ID, transcript and summary filled
        """
        video_id = extract_video_id(url)
        if video_id is None:
            logging.error(f"No video ID found in: {url.strip()!r}")
            raise IdentifierNotFound(url)

        logging.info(f"Extracted video ID: {video_id}")
        result = SummaryResult(video_id=video_id)

        try:
            transcript = self.transcript_source.fetch(video_id)
        except Exception as e:
            logging.error(f"Transcript fetch failed for {video_id}: {str(e)}")
            raise PipelineError(
                "Failed to fetch transcript",
                stage=PipelineStage.FETCH_TRANSCRIPT,
                cause=e,
                result=result,
            ) from e

        logging.info(f"Fetched transcript ({len(transcript)} chars)")
        result = result.model_copy(update={"transcript": transcript})

        try:
            summary = self.summarizer.summarize(transcript)
        except Exception as e:
            logging.error(f"Summarization failed for {video_id}: {str(e)}")
            raise PipelineError(
                "Failed to generate summary",
                stage=PipelineStage.SUMMARIZE,
                cause=e,
                result=result,
            ) from e

        logging.info("Summary complete.")
        return result.model_copy(update={"summary": summary})
