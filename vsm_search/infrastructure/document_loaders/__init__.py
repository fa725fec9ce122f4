"""Document loader implementations."""
from .pdf_loader import PDFLoader
from .docx_loader import DocxLoader, LegacyDocLoader
from .text_loader import CSVLoader, JSONLoader, TextLoader
from .markup_loader import MarkupLoader
from .composite_loader import CompositeLoader

__all__ = [
    "PDFLoader",
    "DocxLoader",
    "LegacyDocLoader",
    "TextLoader",
    "CSVLoader",
    "JSONLoader",
    "MarkupLoader",
    "CompositeLoader",
]
