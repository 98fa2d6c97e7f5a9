"""Search predicates: one per SearchRequest field, combined conjunctively by matches()"""

from datetime import datetime
from typing import Optional

from docstore.models import Document, SearchRequest


def by_title_prefixes(doc: Document, prefixes: Optional[list[str]]) -> bool:
    """True if no prefixes are given, else the title starts with at least one of them."""
    if not prefixes:
        return True
    return doc.title is not None and any(doc.title.startswith(p) for p in prefixes)


def by_contains_contents(doc: Document, needles: Optional[list[str]]) -> bool:
    """True if no substrings are given, else the content contains at least one of them."""
    if not needles:
        return True
    return doc.content is not None and any(n in doc.content for n in needles)


def by_author_ids(doc: Document, author_ids: Optional[list[str]]) -> bool:
    """True if no ids are given, else the document has an author whose id is listed."""
    if not author_ids:
        return True
    return doc.author is not None and doc.author.id in author_ids


def by_created_from(doc: Document, created_from: Optional[datetime]) -> bool:
    """Inclusive lower bound; a document without `created` fails any given bound."""
    if created_from is None:
        return True
    return doc.created is not None and doc.created >= created_from


def by_created_to(doc: Document, created_to: Optional[datetime]) -> bool:
    """Inclusive upper bound; a document without `created` fails any given bound."""
    if created_to is None:
        return True
    return doc.created is not None and doc.created <= created_to


def matches(doc: Document, request: SearchRequest) -> bool:
    """Return True when doc passes every filter in the request."""
    return (
        by_title_prefixes(doc, request.title_prefixes)
        and by_contains_contents(doc, request.contains_contents)
        and by_author_ids(doc, request.author_ids)
        and by_created_from(doc, request.created_from)
        and by_created_to(doc, request.created_to)
    )
