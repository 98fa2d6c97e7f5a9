"""Seed files: read document records from YAML/JSON into a store, and serialize documents back out"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from docstore.crud.repo import DocumentRepo
from docstore.models import Document


logger = logging.getLogger(__name__)


def read_records(path: Path) -> list[dict[str, Any]]:
    """Parse a seed file into a list of record dicts.

    `.json` files are parsed as JSON, anything else as YAML. A top-level
    mapping with a `documents` key is accepted as well as a bare list.
    Raises ValueError if the file is missing, malformed, or not a list of mappings.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Cannot read seed file {path}: {e}") from e

    try:
        data = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid seed file {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("documents")
    if data is None:
        return []
    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise ValueError(f"Invalid seed file {path}: expected a list of document mappings")
    return data


def load_documents(repo: DocumentRepo, path: Path) -> list[Document]:
    """Save every record in the seed file through repo.save(); returns the stored documents."""
    records = read_records(path)
    saved = []
    for i, record in enumerate(records):
        try:
            doc = Document.model_validate(record)
        except ValidationError as e:
            raise ValueError(f"Invalid document #{i} in {path}: {e}") from e
        saved.append(repo.save(doc))
    logger.info("Loaded %d document(s) from %s", len(saved), path)
    return saved


def dump_document(doc: Document) -> dict[str, Any]:
    """JSON-ready dict with ISO-8601 timestamps."""
    return doc.model_dump(mode="json")


def dump_documents(docs: list[Document]) -> str:
    """Pretty JSON array of documents, ordered by id for stable output."""
    ordered = sorted(docs, key=lambda d: (len(d.id or ""), d.id or ""))
    return json.dumps([dump_document(d) for d in ordered], indent=2, ensure_ascii=False)
