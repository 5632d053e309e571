"""
YouTube Transcript Summarizer.

Fetches the transcript of a YouTube video, splits it into chunks and
summarizes each chunk through a hosted summarization model.
"""

from video_summarizer.config import config

__version__ = config.APP_VERSION
