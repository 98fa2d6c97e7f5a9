"""CLI command implementations"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.seed import dump_document, dump_documents, load_documents
from docstore.crud.memory_repo import DocumentStore
from docstore.models import SearchRequest


SeedOption = Annotated[Optional[str], typer.Option("--seed", help="YAML/JSON file of documents to load")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _parse_timestamp(value: str) -> datetime:
    """ISO-8601 timestamp; a trailing Z means UTC."""
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise typer.BadParameter(f"not an ISO-8601 timestamp: {value!r}") from e


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _store(seed: Optional[str]) -> DocumentStore:
    """Configure logging and build a store populated from the seed file."""
    settings = _settings(overrides={"seed_file": seed})
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    if not settings.seed_file:
        _fail("No seed file. Pass --seed or set DOCSTORE_SEED_FILE.")

    store = DocumentStore(id_start=settings.id_start)
    try:
        load_documents(store, Path(settings.seed_file))
    except ValueError as e:
        _fail("Seed load failed", e)
    return store


def get_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    seed: SeedOption = None,
    ):
    """Print one document as JSON."""
    store = _store(seed)
    doc = store.find_by_id(doc_id)
    if doc is None:
        _fail(f"No document with id '{doc_id}'.")
    typer.echo(json.dumps(dump_document(doc), indent=2, ensure_ascii=False))


def search_cmd(
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title prefix (repeatable, OR-ed)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content substring (repeatable, OR-ed)")] = None,
    author: Annotated[Optional[list[str]], typer.Option("--author", help="Author id (repeatable, OR-ed)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--from", parser=_parse_timestamp, help="Inclusive lower bound on created; ISO-8601, UTC if no offset")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--to", parser=_parse_timestamp, help="Inclusive upper bound on created; ISO-8601, UTC if no offset")] = None,
    seed: SeedOption = None,
    ):
    """Print documents matching every given filter as a JSON list."""
    store = _store(seed)
    request = SearchRequest(
        title_prefixes=title_prefix,
        contains_contents=contains,
        author_ids=author,
        created_from=created_from,
        created_to=created_to,
    )
    typer.echo(dump_documents(store.search(request)))


def stats_cmd(seed: SeedOption = None):
    """Summarize the loaded documents: count, distinct authors, and creation span."""
    store = _store(seed)
    docs = store.search()
    if not docs:
        typer.echo("No documents loaded.")
        raise typer.Exit(1)

    authors = {d.author.id for d in docs if d.author is not None and d.author.id is not None}
    created = sorted(d.created for d in docs if d.created is not None)
    typer.echo(f"Documents: {len(docs)}")
    typer.echo(f"Authors:   {len(authors)}")
    if created:
        typer.echo(f"Created:   {created[0].isoformat()} .. {created[-1].isoformat()}")
