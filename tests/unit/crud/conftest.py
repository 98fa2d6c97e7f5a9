"""Shared fixtures for crud unit tests"""

from datetime import datetime, timedelta, timezone

import pytest

from docstore.crud.memory_repo import DocumentStore
from docstore.models import Author, Document


@pytest.fixture(name="store")
def store_fixture():
    """A fresh, empty in-memory store."""
    return DocumentStore()


@pytest.fixture(name="t0")
def t0_fixture():
    return datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(name="seeded")
def seeded_fixture(store, t0):
    """Store holding three documents; returns (store, {label: saved_doc})."""
    docs = {
        "a": store.save(Document(title="Alpha notes", content="first draft", created=t0,
                                 author=Author(id="a1", name="Ann"))),
        "b": store.save(Document(title="Beta report", content="quarterly numbers", created=t0 + timedelta(seconds=10),
                                 author=Author(id="a2", name="Bob"))),
        "c": store.save(Document(title="Alpha report", content="final draft", created=t0 + timedelta(seconds=20))),
    }
    return store, docs
