"""Protocol interfaces for dependency injection."""
from .text_extractor import TextExtractorProtocol
from .model_repository import ModelRepositoryProtocol

__all__ = [
    "TextExtractorProtocol",
    "ModelRepositoryProtocol",
]
