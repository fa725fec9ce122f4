import re
from pathlib import Path

from docx import Document

_TAG_RE = re.compile(r"<[^>]*>")
_SPACE_RE = re.compile(r"\s+")


class DocxLoader:

    def supports(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".docx"

    def load(self, file_path: Path) -> str:
        doc = Document(str(file_path))
        paragraphs = [p.text.strip() for p in doc.paragraphs if p.text.strip()]
        return "\n\n".join(paragraphs)


class LegacyDocLoader:
    """Best-effort text for binary .doc files: decode and drop markup."""

    def supports(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".doc"

    def load(self, file_path: Path) -> str:
        text = file_path.read_bytes().decode("utf-8", errors="ignore")
        text = _TAG_RE.sub(" ", text)
        return _SPACE_RE.sub(" ", text).strip()
