"""Document and Chunk data structures for handbook retrieval."""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """The extracted text of the reference document."""
    model_config = ConfigDict(frozen=True)

    content: str
    source: Optional[str] = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class Chunk(BaseModel):
    """A bounded-length segment of a document, in document order."""
    model_config = ConfigDict(frozen=True)

    index: int
    content: str
    start_index: int = 0
    end_index: int = 0

    def __len__(self) -> int:
        return len(self.content)


class ScoredChunk(BaseModel):
    """A chunk paired with its score for one query."""
    chunk: Chunk
    score: int
