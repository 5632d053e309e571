"""
Main entry point for the YouTube Transcript Summarizer.
"""

import sys

from video_summarizer.config import config, load_api_token, summary_config
from video_summarizer.core.pipeline import VideoSummaryPipeline
from video_summarizer.core.summarizer import HuggingFaceSummarizer
from video_summarizer.core.transcript import create_transcript_source
from video_summarizer.models.schemas import SummaryResult
from video_summarizer.utils.error_handling import VideoSummarizerError, format_error_chain
from video_summarizer.utils.logger import logging


def build_pipeline(api_token: str) -> VideoSummaryPipeline:
    """Wire the configured transcript source and summarizer together."""
    settings = summary_config(api_token)
    transcript_source = create_transcript_source(config, timeout=settings.timeout)
    summarizer = HuggingFaceSummarizer(settings)
    return VideoSummaryPipeline(transcript_source, summarizer)


def summarize_youtube_video(url: str, api_token: str) -> SummaryResult:
    """
    Fetch and summarize the transcript of a YouTube video.

    Args:
        url: YouTube video URL
        api_token: Bearer token for the summarization endpoint

    Returns:
        SummaryResult object
    """
    return build_pipeline(api_token).process(url)


def print_summary(result: SummaryResult):
    """Print the final summary."""
    print("\nVideo Summary:")
    print("-" * 50)
    print(result.summary)


def main() -> int:
    """Prompt for a URL, summarize it and print the outcome."""
    logging.debug(f"Starting {config.APP_NAME} v{config.APP_VERSION}")
    try:
        pipeline = build_pipeline(load_api_token(config.CONFIG_PATH))
    except VideoSummarizerError as e:
        print(f"Error: {format_error_chain(e)}")
        return 1

    url = input("Enter YouTube video URL: ")

    try:
        result = pipeline.process(url)
    except VideoSummarizerError as e:
        logging.debug("Pipeline failed", exc_info=True)
        print(f"Error: {format_error_chain(e)}")
        return 1

    print_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
