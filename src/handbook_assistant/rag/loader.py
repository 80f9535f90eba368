"""Handbook text extraction and the process-wide chunk cache."""

import logging
import threading
from pathlib import Path
from typing import Optional

import pypdf
from pypdf.errors import PdfReadError

from handbook_assistant.exceptions import DocumentUnavailableError

from .chunking import DEFAULT_CHUNK_SIZE, WordChunker
from .document import Document

logger = logging.getLogger(__name__)


def extract_text(path: str | Path) -> str:
    """
    Extract the raw text of a handbook file.

    PDFs are read page by page with pypdf; anything else is read as UTF-8.

    Raises:
        DocumentUnavailableError: If the file is missing or unreadable
    """
    path = Path(path)
    if not path.is_file():
        raise DocumentUnavailableError(str(path))

    try:
        if path.suffix.lower() == ".pdf":
            reader = pypdf.PdfReader(path)
            return "\n".join(page.extract_text() or "" for page in reader.pages)
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError, PdfReadError) as e:
        raise DocumentUnavailableError(str(path), f"Document unreadable ({e})") from e


class HandbookIndex:
    """
    Lazily loads and chunks one handbook, at most once per instance.

    A load is cached for the life of the object, including a file that
    exists but cannot be parsed. A missing file is not cached, so dropping
    the handbook in place later enables retrieval without a restart.
    """

    def __init__(self, path: str | Path, chunk_size: int = DEFAULT_CHUNK_SIZE):
        self.path = Path(path)
        self.chunker = WordChunker(chunk_size)
        self._document: Optional[Document] = None
        self._chunks: Optional[tuple[str, ...]] = None
        self._lock = threading.Lock()

    def _load(self) -> None:
        if self._chunks is not None:
            return
        with self._lock:
            if self._chunks is not None:
                return
            try:
                text = extract_text(self.path)
            except DocumentUnavailableError as e:
                logger.warning(f"Handbook unavailable, retrieval disabled: {e.message}")
                if self.path.is_file():
                    self._chunks = ()
                return
            document = Document(content=text, source=str(self.path))
            chunks = tuple(chunk.content for chunk in self.chunker.chunk(document))
            self._document = document
            self._chunks = chunks
            logger.info(f"Loaded handbook {self.path.name}: {len(text)} chars, {len(chunks)} chunks")

    @property
    def document(self) -> Optional[Document]:
        self._load()
        return self._document

    @property
    def chunks(self) -> tuple[str, ...]:
        """Chunk texts in document order; empty when the handbook is unavailable."""
        self._load()
        return self._chunks or ()

    @property
    def available(self) -> bool:
        return bool(self.chunks)

    def reset(self) -> None:
        """Drop the cached document so the next access reloads it."""
        with self._lock:
            self._document = None
            self._chunks = None
