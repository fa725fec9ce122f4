import logging
import mimetypes
from pathlib import Path

from vsm_search.core.errors import ExtractionError, UnsupportedFileTypeError

from .docx_loader import DocxLoader, LegacyDocLoader
from .markup_loader import MarkupLoader
from .pdf_loader import PDFLoader
from .text_loader import CSVLoader, JSONLoader, TextLoader

logger = logging.getLogger(__name__)

_MIME_TYPES = {
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".md": "text/markdown",
    ".markdown": "text/markdown",
}


class CompositeLoader:

    def __init__(self):
        self._loaders = [
            PDFLoader(),
            DocxLoader(),
            LegacyDocLoader(),
            CSVLoader(),
            JSONLoader(),
            MarkupLoader(),
            TextLoader(),
        ]

    def supports(self, file_path: Path) -> bool:
        return any(loader.supports(file_path) for loader in self._loaders)

    def mime_type(self, file_path: Path) -> str:
        suffix = file_path.suffix.lower()
        if suffix in _MIME_TYPES:
            return _MIME_TYPES[suffix]
        mime, _ = mimetypes.guess_type(file_path.name)
        return mime or "text/plain"

    def load(self, file_path: Path) -> str:
        for loader in self._loaders:
            if loader.supports(file_path):
                try:
                    return loader.load(file_path)
                except Exception as e:
                    logger.error(f"Failed to load {file_path}: {e}")
                    raise ExtractionError(file_path.name, str(e)) from e

        raise UnsupportedFileTypeError(file_path.name, self.mime_type(file_path))
