"""Lexical retriever over handbook chunks."""

import logging
import re
from typing import Optional, Sequence

from .base import BaseRetriever, BaseScorer
from .document import Chunk, ScoredChunk

logger = logging.getLogger(__name__)

MIN_TERM_LENGTH = 4
DEFAULT_TOP_K = 3
_PUNCTUATION = re.compile(r"""[.,?!;:()"']""")


def extract_query_terms(query: str) -> list[str]:
    """
    Normalize a user query into search terms.

    Tokens are lower-cased and split on whitespace; tokens shorter than
    four characters are dropped before punctuation is stripped. Duplicates
    collapse to their first occurrence.
    """
    terms: list[str] = []
    for token in query.lower().split():
        if len(token) < MIN_TERM_LENGTH:
            continue
        term = _PUNCTUATION.sub("", token)
        if term and term not in terms:
            terms.append(term)
    return terms


class RegexScorer(BaseScorer):
    """Counts case-insensitive substring occurrences of a term."""

    def score(self, term: str, chunk: str) -> int:
        return len(re.findall(re.escape(term), chunk, re.IGNORECASE))


class KeywordRetriever(BaseRetriever):
    """Term-frequency retriever: sums per-term scores, keeps the best chunks."""

    def __init__(self, scorer: Optional[BaseScorer] = None):
        self.scorer = scorer or RegexScorer()

    def score_chunks(self, terms: Sequence[str], chunks: Sequence[str]) -> list[ScoredChunk]:
        return [
            ScoredChunk(
                chunk=Chunk(index=index, content=text),
                score=sum(self.scorer.score(term, text) for term in terms),
            )
            for index, text in enumerate(chunks)
        ]

    def retrieve(self, query: str, chunks: Sequence[str], top_k: int = DEFAULT_TOP_K) -> list[str]:
        if top_k < 0:
            raise ValueError("top_k must not be negative")
        terms = extract_query_terms(query)
        if not terms:
            return []
        scored = [item for item in self.score_chunks(terms, chunks) if item.score > 0]
        # sorted() is stable, so equal scores keep document order
        scored = sorted(scored, key=lambda item: item.score, reverse=True)
        logger.debug(f"Query terms {terms}: {len(scored)} of {len(chunks)} chunks matched")
        return [item.chunk.content for item in scored[:top_k]]
