"""
Module for splitting transcript text into length-bounded chunks.
"""

from typing import List


def chunk_text(text: str, max_length: int) -> List[str]:
    """
    Split text into chunks of at most ``max_length`` characters on word boundaries.

    The running length counts every accumulated word plus its joining space,
    so a word fits when the counter plus the bare word stays within budget.
    A word that is longer than ``max_length`` on its own is never split and
    becomes a chunk by itself.

    Args:
        text: Text to split
        max_length: Character budget per chunk

    Returns:
        Chunks in document order (empty if the text has no words)
    """
    if max_length < 1:
        raise ValueError("max_length must be at least 1")

    chunks = []
    current_chunk = []
    current_length = 0

    for word in text.split():
        if current_length + len(word) > max_length and current_chunk:
            chunks.append(" ".join(current_chunk))
            current_chunk = []
            current_length = 0
        current_chunk.append(word)
        current_length += len(word) + 1

    if current_chunk:
        chunks.append(" ".join(current_chunk))

    return chunks
