"""Ingest service - document extraction and indexing."""

import hashlib
import logging
from pathlib import Path
from typing import Iterable, Optional

from ..errors import EmptyDocumentError, ExtractionError, UnsupportedFileTypeError
from ..models.document import Document
from ..models.index import VectorSpaceModel
from ..protocols.text_extractor import TextExtractorProtocol
from .index_service import IndexService

logger = logging.getLogger(__name__)


class IngestService:
    """Service for turning source files into an indexed corpus."""

    def __init__(
        self,
        index_service: IndexService,
        docs_path: str = "./docs",
        loader: Optional[TextExtractorProtocol] = None,
    ):
        """Initialize ingest service.

        Args:
            index_service: Service that builds and publishes the model.
            docs_path: Path to documents folder.
            loader: Text extractor. Defaults to the composite file loader.
        """
        self._index_service = index_service
        self._docs_path = Path(docs_path)
        self._loader = loader
        self._pending: dict[str, Document] = {}

    @property
    def loader(self) -> TextExtractorProtocol:
        """Lazy load document loader."""
        if self._loader is None:
            from vsm_search.infrastructure.document_loaders import CompositeLoader

            self._loader = CompositeLoader()
        return self._loader

    def _compute_hash(self, content: str) -> str:
        """Compute content hash."""
        return hashlib.md5(content.encode()).hexdigest()[:12]

    def _make_document(self, name: str, content: str, doc_type: str) -> Document:
        if not content or not content.strip():
            raise EmptyDocumentError(name)
        doc_id = f"{self._compute_hash(content)}-{name}"
        return Document(id=doc_id, name=name, content=content, type=doc_type)

    def extract(self, file_path: Path) -> Document:
        """Extract a single file into a document.

        Args:
            file_path: Source file.

        Returns:
            Document with the extracted text.

        Raises:
            UnsupportedFileTypeError: If no loader handles the file.
            ExtractionError: If the loader fails.
            EmptyDocumentError: If the extracted text is blank.
        """
        if not self.loader.supports(file_path):
            raise UnsupportedFileTypeError(file_path.name, self.loader.mime_type(file_path))

        content = self.loader.load(file_path)
        return self._make_document(
            file_path.name, content, self.loader.mime_type(file_path)
        )

    def collect(self, paths: Optional[Iterable[Path]] = None) -> dict[str, Document]:
        """Extract documents from explicit paths or the docs folder.

        Files found while scanning the folder that are unsupported, fail
        to extract or are blank are skipped; explicitly named files must
        extract cleanly.

        Args:
            paths: Files to extract. None scans ``docs_path``.

        Returns:
            Documents keyed by id, in path order.
        """
        documents: dict[str, Document] = {}

        if paths is None:
            if not self._docs_path.exists():
                logger.error(f"Docs path not found: {self._docs_path}")
                return documents

            for file_path in sorted(self._docs_path.iterdir()):
                if not file_path.is_file():
                    continue
                if not self.loader.supports(file_path):
                    logger.debug(f"Skip unsupported: {file_path.name}")
                    continue
                try:
                    doc = self.extract(file_path)
                except (ExtractionError, EmptyDocumentError) as e:
                    logger.error(f"Skip {file_path.name}: {e}")
                    continue
                documents[doc.id] = doc
        else:
            for file_path in paths:
                doc = self.extract(Path(file_path))
                documents[doc.id] = doc

        logger.info(f"Collected {len(documents)} documents")
        return documents

    def add_text(self, content: str, name: Optional[str] = None) -> Document:
        """Queue a pasted text document for the next run.

        Args:
            content: Document text.
            name: Display name without extension. Defaults to ``Document-<n>``.

        Returns:
            The queued document.
        """
        name = name.strip() if name else ""
        file_name = f"{name}.txt" if name else self._default_name()
        doc = self._make_document(file_name, content, "text/plain")
        self._pending[doc.id] = doc
        return doc

    def _default_name(self) -> str:
        """Next free ``Document-<n>.txt`` counting files and queued texts."""
        taken = {doc.name for doc in self._pending.values()}
        if self._docs_path.is_dir():
            taken.update(
                p.name for p in self._docs_path.iterdir() if self.loader.supports(p)
            )

        n = len(taken) + 1
        while f"Document-{n}.txt" in taken:
            n += 1
        return f"Document-{n}.txt"

    @property
    def pending(self) -> dict[str, Document]:
        return dict(self._pending)

    def run(self, paths: Optional[Iterable[Path]] = None) -> VectorSpaceModel:
        """Extract documents and rebuild the index.

        Queued text documents are indexed together with the files and the
        queue is cleared once the model is published.

        Args:
            paths: Files to index. None scans ``docs_path``.

        Returns:
            The published model.

        Raises:
            EmptyCorpusError: If there is nothing to index.
        """
        documents = self.collect(paths)
        documents.update(self._pending)

        model = self._index_service.build(documents)
        self._pending.clear()

        logger.info(
            f"Indexing complete: {len(model)} documents, {len(model.terms)} terms"
        )
        return model
