
import logging
import sys
from pathlib import Path

from vsm_search.config.settings import settings
from vsm_search.container import configure_container, container
from vsm_search.core.errors import VectorSpaceError
from vsm_search.core.services.index_service import IndexService
from vsm_search.core.services.ingest_service import IngestService
from vsm_search.core.services.model_store import ModelStore
from vsm_search.core.services.search_service import SearchService

logger = logging.getLogger(__name__)

USAGE = """Usage: vsm-search <command> [args]
Commands:
  ingest [FILE ...]   index FILE(s), or every supported file in the docs folder
  search QUERY        rank indexed documents against QUERY
  stats               show corpus size and the rarest terms
  clear               drop the index"""


def excerpt(text: str, length: int) -> str:
    """Collapse whitespace and cut to length."""
    flat = " ".join(text.split())
    return flat if len(flat) <= length else f"{flat[:length]}..."


def cmd_ingest(args: list[str]) -> int:
    """Ingest command - extract documents and rebuild the index."""
    ingest_service = container.resolve(IngestService)
    paths = [Path(a) for a in args] if args else None
    model = ingest_service.run(paths)
    logger.info(f"Indexed {len(model)} documents, {len(model.terms)} unique terms")
    return 0


def cmd_search(args: list[str]) -> int:
    """Search command - print ranked results."""
    container.resolve(IndexService).restore()
    search_service = container.resolve(SearchService)
    response = search_service.search(" ".join(args))

    print(f"Query terms: {', '.join(response.query_terms) or '-'}")
    if not response.results:
        print("No matching documents found.")
        return 0

    print(f"Showing {len(response.results)} of {response.total_matches} matches\n")
    for i, result in enumerate(response.results, 1):
        print(f"{i}. {result.document.name}  [{result.document.type}]")
        print(f"   Score: {result.similarity:.4f}")
        print(f"   Matching terms: {', '.join(result.matching_terms)}")
        print(f"   {excerpt(result.document.content, settings.excerpt_length)}\n")
    return 0


def cmd_stats(args: list[str]) -> int:
    """Stats command - corpus overview."""
    container.resolve(IndexService).restore()
    store = container.resolve(ModelStore)
    if not store.has_model:
        print("No documents have been processed.")
        return 1

    model = store.get()

    print(f"Documents: {len(model)}")
    print(f"Unique terms: {len(model.terms)}")
    for entry in model.documents.values():
        print(f"  {entry.name}  ({entry.type}, {sum(entry.tf.values())} terms)")

    print("\nTop terms by IDF:")
    for term, idf in model.top_terms(settings.top_terms):
        print(f"  {term} ({idf:.2f})")
    return 0


def cmd_clear(args: list[str]) -> int:
    """Clear command - remove live and persisted model."""
    container.resolve(IndexService).clear()
    logger.info("Index cleared")
    return 0


COMMANDS = {
    "ingest": cmd_ingest,
    "search": cmd_search,
    "stats": cmd_stats,
    "clear": cmd_clear,
}


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    argv = sys.argv[1:] if argv is None else argv

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(message)s",
    )

    if not argv or argv[0] not in COMMANDS:
        if argv:
            print(f"Unknown command: {argv[0]}")
        print(USAGE)
        return 1

    if argv[0] == "search" and len(argv) < 2:
        print("Please enter a search query.")
        return 1

    configure_container(settings)

    try:
        return COMMANDS[argv[0]](argv[1:])
    except (VectorSpaceError, ValueError) as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
