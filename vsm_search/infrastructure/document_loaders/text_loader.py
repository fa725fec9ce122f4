import csv
import io
import json
from pathlib import Path


class TextLoader:

    EXTENSIONS = {".txt", ".md", ".markdown"}

    def supports(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self.EXTENSIONS

    def load(self, file_path: Path) -> str:
        return file_path.read_text(encoding="utf-8")


class CSVLoader:

    def supports(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".csv"

    def load(self, file_path: Path) -> str:
        reader = csv.reader(io.StringIO(file_path.read_text(encoding="utf-8")))
        return "\n".join(" ".join(row) for row in reader)


class JSONLoader:

    def supports(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".json"

    def load(self, file_path: Path) -> str:
        data = json.loads(file_path.read_text(encoding="utf-8"))
        return json.dumps(data, indent=2, ensure_ascii=False)
