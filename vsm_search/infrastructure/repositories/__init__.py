"""Model persistence implementations."""
from .json_model_repository import JsonFileModelRepository

__all__ = ["JsonFileModelRepository"]
