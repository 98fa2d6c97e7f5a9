from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.models import Document, SearchRequest

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, document: Document) -> Document:
        """Upsert and return the document as stored."""
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest | None = None) -> list[Document]:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str) -> Document | None:
        raise NotImplementedError
