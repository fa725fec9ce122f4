"""Text extractor protocol for dependency injection."""
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class TextExtractorProtocol(Protocol):
    """Protocol for turning a source file into plain text."""

    def supports(self, file_path: Path) -> bool:
        """Check whether the file type can be extracted.

        Args:
            file_path: Path to the source file.

        Returns:
            True if ``load`` can handle this file.
        """
        ...

    def load(self, file_path: Path) -> str:
        """Extract plain text from a file.

        Args:
            file_path: Path to the source file.

        Returns:
            Best-effort plain-text rendering.

        Raises:
            ExtractionError: If the file cannot be read or parsed.
        """
        ...

    def mime_type(self, file_path: Path) -> str:
        """Get the MIME type recorded for the file."""
        ...
