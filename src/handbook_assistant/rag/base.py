"""Base classes and abstract interfaces for retrieval components."""

from abc import ABC, abstractmethod
from typing import Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .document import Chunk, Document


class BaseChunker(ABC):
    """Abstract base class for document chunkers."""

    @abstractmethod
    def chunk(self, document: "Document") -> list["Chunk"]:
        pass


class BaseScorer(ABC):
    """Scores a single query term against a single chunk of text."""

    @abstractmethod
    def score(self, term: str, chunk: str) -> int:
        pass


class BaseRetriever(ABC):
    """Abstract base class for retrievers."""

    @abstractmethod
    def retrieve(self, query: str, chunks: Sequence[str], top_k: int = 3) -> list[str]:
        pass
