from pathlib import Path

from pypdf import PdfReader


class PDFLoader:
    """Text layer of every page, one page per line block."""

    def supports(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".pdf"

    def load(self, file_path: Path) -> str:
        reader = PdfReader(file_path, strict=False)
        pages = (page.extract_text() or "" for page in reader.pages)
        return "\n".join(text.strip() for text in pages if text.strip())
