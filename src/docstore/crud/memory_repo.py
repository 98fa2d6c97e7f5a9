"""In-memory DocumentRepo: upsert with protected creation time, lookup, and filtered search"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone

from docstore.crud.filters import matches
from docstore.crud.repo import DocumentRepo
from docstore.models import Document, SearchRequest, as_utc


logger = logging.getLogger(__name__)


@dataclass
class DocumentStore(DocumentRepo):
    """Volatile store owning every Document it holds.

    Values are deep-copied on the way in and on the way out, so neither the
    caller's input nor a returned result can alter stored state. One lock
    covers the mapping and the id counter.
    """
    id_start: int = 1
    _docs: dict[str, Document] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    def __post_init__(self):
        if self.id_start < 1:
            raise ValueError(f"id_start must be >= 1, got {self.id_start}")
        self._counter = self.id_start

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        with self._lock:
            return doc_id in self._docs

    def _next_id(self) -> str:
        """Smallest free numeric id >= counter; advances the counter past it."""
        while str(self._counter) in self._docs:
            self._counter += 1
        new_id = str(self._counter)
        self._counter += 1
        return new_id

    def save(self, document: Document) -> Document:
        """Insert when id is absent or unknown, otherwise replace keeping the stored `created`.

        Returns a copy of the record as stored. Raises ValueError for None.
        """
        if document is None:
            raise ValueError("Cannot save None; expected a Document")

        doc = document.model_copy(deep=True)
        doc.created = as_utc(doc.created)     # model_copy skips validators
        with self._lock:
            if not doc.id:
                doc.id = self._next_id()
                if doc.created is None:
                    doc.created = datetime.now(timezone.utc)
                logger.debug("Inserted document %s (minted id)", doc.id)
            elif doc.id in self._docs:
                doc.created = self._docs[doc.id].created
                logger.debug("Updated document %s", doc.id)
            else:
                logger.debug("Inserted document %s (caller id)", doc.id)
            self._docs[doc.id] = doc
            return self._docs[doc.id].model_copy(deep=True)

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        """Return copies of all documents passing every filter; order is not guaranteed."""
        request = request or SearchRequest()
        with self._lock:
            return [d.model_copy(deep=True) for d in self._docs.values() if matches(d, request)]

    def find_by_id(self, doc_id: str) -> Document | None:
        """Return a copy of the stored document, or None if the id is unknown."""
        with self._lock:
            doc = self._docs.get(doc_id)
            return doc.model_copy(deep=True) if doc is not None else None
