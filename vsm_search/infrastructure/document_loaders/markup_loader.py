import re
from pathlib import Path

from bs4 import BeautifulSoup

_SPACE_RE = re.compile(r"\s+")


class MarkupLoader:
    """HTML and XML with the tags stripped."""

    EXTENSIONS = {".html", ".htm", ".xml"}

    def supports(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self.EXTENSIONS

    def load(self, file_path: Path) -> str:
        soup = BeautifulSoup(file_path.read_text(encoding="utf-8"), "html.parser")
        for element in soup(["script", "style"]):
            element.decompose()
        return _SPACE_RE.sub(" ", soup.get_text(" ")).strip()
