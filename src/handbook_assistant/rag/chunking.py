"""Document chunking."""

from .base import BaseChunker
from .document import Chunk, Document

DEFAULT_CHUNK_SIZE = 800


def chunk_text(text: str, max_size: int = DEFAULT_CHUNK_SIZE) -> list[str]:
    """
    Split text into word-aligned chunks of at most ``max_size`` characters.

    Words are separated by runs of whitespace and re-joined with single
    spaces. A word longer than ``max_size`` is never truncated: it starts
    its own chunk, which is then oversized.

    Args:
        text: Raw document text
        max_size: Maximum chunk length in characters

    Returns:
        Chunks in document order
    """
    if max_size < 1:
        raise ValueError("max_size must be at least 1")

    chunks: list[str] = []
    current = ""
    for word in text.split():
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= max_size:
            current = f"{current} {word}"
        else:
            chunks.append(current)
            current = word
    if current:
        chunks.append(current)
    return chunks


class WordChunker(BaseChunker):
    """Greedy whitespace chunker with a fixed character bound and no overlap."""

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size < 1:
            raise ValueError("chunk_size must be at least 1")
        self.chunk_size = chunk_size

    def chunk(self, document: Document) -> list[Chunk]:
        chunks = []
        start = 0
        for index, content in enumerate(chunk_text(document.content, self.chunk_size)):
            end = start + len(content)
            chunks.append(Chunk(index=index, content=content, start_index=start, end_index=end))
            # offsets are into the single-space-joined text
            start = end + 1
        return chunks
