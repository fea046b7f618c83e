"""
Shared building blocks
Provides the Singleton metaclass and the pydantic base models
"""

from design_patterns.core.patterns.singleton import Singleton
from design_patterns.core.patterns.base_model import (
    BaseModel,
    ImmutableModel,
    Field,
)

__all__ = [
    "Singleton",
    "BaseModel",
    "ImmutableModel",
    "Field",
]
