"""
Core functionality for the YouTube transcript summarizer.

This package contains modules for extracting video identifiers, fetching
transcripts, chunking them and summarizing the chunks.
"""
