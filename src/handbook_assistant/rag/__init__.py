"""Lexical retrieval over the employee handbook."""

from .document import Document, Chunk, ScoredChunk
from .base import BaseChunker, BaseScorer, BaseRetriever
from .chunking import DEFAULT_CHUNK_SIZE, WordChunker, chunk_text
from .retriever import DEFAULT_TOP_K, KeywordRetriever, RegexScorer, extract_query_terms
from .loader import HandbookIndex, extract_text

__all__ = [
    "Document", "Chunk", "ScoredChunk",
    "BaseChunker", "BaseScorer", "BaseRetriever",
    "DEFAULT_CHUNK_SIZE", "WordChunker", "chunk_text",
    "DEFAULT_TOP_K", "KeywordRetriever", "RegexScorer", "extract_query_terms",
    "HandbookIndex", "extract_text",
]
