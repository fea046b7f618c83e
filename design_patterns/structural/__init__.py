"""
Structural patterns
"""

from design_patterns.structural.adapter import Adaptee, Target, Adapter
from design_patterns.structural.decorator import (
    Vehicle,
    Car,
    VehicleDecorator,
    SpecialOffer,
    format_price,
)

__all__ = [
    # Adapter
    "Adaptee",
    "Target",
    "Adapter",

    # Decorator
    "Vehicle",
    "Car",
    "VehicleDecorator",
    "SpecialOffer",
    "format_price",
]
