"""Root test configuration: keep the developer's DOCSTORE_* environment out of tests"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Strip DOCSTORE_* env vars so settings come only from what a test sets."""
    for name in list(os.environ):
        if name.startswith("DOCSTORE_"):
            monkeypatch.delenv(name)
