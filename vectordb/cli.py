# Path: vectordb/cli.py
# Purpose: Operator CLI for importing, searching and inspecting a persisted vector store.
# Layer: vectordb.
# Details: Demonstrates how settings, embedder and store are wired together; exposed as the `vectordb` script.

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from tqdm import tqdm

from vectordb.config.settings import AppSettings
from vectordb.errors import VectorStoreError
from vectordb.logging_utils import configure_logging
from vectordb.models.domain import Document, SearchOptions
from vectordb.vector_store.factory import create_vector_store
from vectordb.vector_store.memory_store import InMemoryVectorStore


def _read_documents(path: Path) -> Iterator[Document]:
    """Yield documents from a JSON-lines file, skipping blank lines."""

    with path.open(encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                yield Document.from_dict(json.loads(line))
            except (ValueError, TypeError, AttributeError) as exc:
                raise ValueError(f"{path}:{line_number}: invalid document: {exc}") from exc


def _open_store(args: argparse.Namespace) -> InMemoryVectorStore:
    settings = AppSettings.from_env(
        dimensions=args.dimensions,
        similarity_metric=args.metric,
        max_vectors=args.max_vectors,
        storage_path=args.storage_path,
        persist_to_disk=True,
    )
    if args.embedder:
        embedder = settings.embedder.model_copy(update={"name": args.embedder})
        settings = settings.model_copy(update={"embedder": embedder})
    configure_logging(settings.log_level)
    return create_vector_store(settings)


def _cmd_import(args: argparse.Namespace) -> int:
    store = _open_store(args)
    documents = list(_read_documents(args.file))
    ids: List[str] = []
    with store.deferred_persistence():
        for document in tqdm(documents, desc="Importing documents", unit="doc"):
            ids.append(store.add_document(args.namespace, document))
    print(f"Imported {len(ids)} documents into {args.namespace}; {store.count(args.namespace)} stored")
    return 0


def _cmd_search(args: argparse.Namespace) -> int:
    store = _open_store(args)
    options = SearchOptions(namespace=args.namespace, limit=args.k, min_score=args.min_score)
    if args.vector is not None:
        options.vector = [float(value) for value in json.loads(args.vector)]
        results = store.search_by_vector(options)
    else:
        results = store.search_by_text(args.text, options)

    for result in results:
        print(f"id={result.document.id} score={result.score:.4f} content={result.document.content or ''}")
    return 0


def _cmd_namespaces(args: argparse.Namespace) -> int:
    store = _open_store(args)
    for name in store.list_namespaces():
        print(f"{name}\t{store.count(name)}")
    return 0


def _cmd_delete_collection(args: argparse.Namespace) -> int:
    store = _open_store(args)
    store.delete_collection(args.namespace)
    print(f"Deleted namespace {args.namespace}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vectordb", description="Inspect and populate a persisted vector store")
    parser.add_argument("--storage-path", type=Path, default=None, help="Directory holding vectordb.json")
    parser.add_argument("--dimensions", type=int, default=None, help="Vector dimensionality for a new store")
    parser.add_argument("--metric", choices=["cosine", "euclidean", "dot"], default=None, help="Similarity metric")
    parser.add_argument("--max-vectors", type=int, default=None, help="Per-namespace capacity")
    parser.add_argument("--embedder", choices=["hash", "sentence-transformers"], default=None, help="Text embedder")
    subparsers = parser.add_subparsers(dest="command", required=True)

    import_parser = subparsers.add_parser("import", help="Import documents from a JSON-lines file")
    import_parser.add_argument("file", type=Path, help="File with one JSON document per line")
    import_parser.add_argument("--namespace", default="default", help="Target namespace")
    import_parser.set_defaults(handler=_cmd_import)

    search_parser = subparsers.add_parser("search", help="Run a similarity search")
    query = search_parser.add_mutually_exclusive_group(required=True)
    query.add_argument("--text", type=str, help="Text query, embedded with the configured embedder")
    query.add_argument("--vector", type=str, help="Query vector as a JSON list of floats")
    search_parser.add_argument("--namespace", default="default", help="Namespace to search")
    search_parser.add_argument("--k", type=int, default=10, help="Number of results to return")
    search_parser.add_argument("--min-score", type=float, default=0.0, help="Minimum similarity score")
    search_parser.set_defaults(handler=_cmd_search)

    namespaces_parser = subparsers.add_parser("namespaces", help="List namespaces with document counts")
    namespaces_parser.set_defaults(handler=_cmd_namespaces)

    delete_parser = subparsers.add_parser("delete-collection", help="Delete a namespace and all its documents")
    delete_parser.add_argument("namespace", help="Namespace to delete")
    delete_parser.set_defaults(handler=_cmd_delete_collection)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return a process exit code."""

    args = build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except (VectorStoreError, ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
