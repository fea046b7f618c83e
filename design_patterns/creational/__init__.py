"""
Creational patterns
"""

from design_patterns.creational.singleton_holder import (
    SingletonHolder,
    get_singleton_holder,
)
from design_patterns.creational.prototype import Prototype, Person

__all__ = [
    # Singleton
    "SingletonHolder",
    "get_singleton_holder",

    # Prototype
    "Prototype",
    "Person",
]
