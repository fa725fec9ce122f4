"""Error types raised by the indexing and retrieval core."""
from typing import Optional


class VectorSpaceError(Exception):
    """Base class for all vsm_search errors."""


class EmptyCorpusError(VectorSpaceError):
    """Raised when a model build is attempted with zero documents."""

    def __init__(self, message: str = "Cannot build a model from an empty corpus"):
        super().__init__(message)


class EmptyModelError(VectorSpaceError):
    """Raised when a search runs before any documents have been indexed."""

    def __init__(
        self,
        message: str = "No documents have been processed. Please process documents first.",
    ):
        super().__init__(message)


class ExtractionError(VectorSpaceError):
    """Text could not be extracted from a source file."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Error processing file \"{source}\": {reason}")


class UnsupportedFileTypeError(ExtractionError):
    def __init__(self, source: str, file_type: Optional[str] = None):
        self.file_type = file_type
        super().__init__(
            source,
            f"{file_type or 'unknown type'} is not supported. Please upload text, "
            "PDF, Word, CSV, JSON, HTML, or XML files.",
        )


class EmptyDocumentError(VectorSpaceError):
    """Extracted text is empty or whitespace only."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(
            f"Could not extract text from \"{source}\". The file may be empty or corrupted."
        )


class DeserializationError(VectorSpaceError):
    """Persisted model data is missing fields or malformed."""
