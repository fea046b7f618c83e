"""
Decorator example

Priced, typed vehicles and wrappers that alter the price while keeping
the wrapped vehicle's interface. Wrappers compose to any depth.
"""
from abc import ABC
from typing import Protocol, runtime_checkable

from design_patterns.core.patterns.base_model import ImmutableModel, Field
from design_patterns.utils.logger import get_logger, log_with_context

logger = get_logger(__name__)


@runtime_checkable
class Vehicle(Protocol):
    """Anything with a type and a price"""

    @property
    def type(self) -> str: ...

    @property
    def price(self) -> float: ...


class Car(ImmutableModel):
    """Plain vehicle"""

    type: str = Field(default="Tesla", description="Vehicle type")
    price: float = Field(default=1000, description="List price")


class VehicleDecorator(ABC):
    """
    Base wrapper: forwards type and price to the wrapped vehicle

    Subclasses override whatever they change.
    """

    def __init__(self, vehicle: Vehicle):
        self._vehicle = vehicle

    @property
    def vehicle(self) -> Vehicle:
        return self._vehicle

    @property
    def type(self) -> str:
        return self._vehicle.type

    @property
    def price(self) -> float:
        return self._vehicle.price


class SpecialOffer(VehicleDecorator):
    """
    Discount wrapper

    The price is recomputed on every read from the wrapped vehicle's
    price. Discounts outside 0-100 are accepted as is.
    """

    def __init__(self, vehicle: Vehicle, offer: str = "", discount_percentage: int = 0):
        super().__init__(vehicle)
        self.offer = offer
        self.discount_percentage = discount_percentage

    @property
    def price(self) -> float:
        base = super().price
        discounted = round(base * (100 - self.discount_percentage) / 100, 2)
        log_with_context(
            logger,
            'debug',
            "Computed offer price",
            base=base,
            discount=self.discount_percentage,
            price=discounted,
        )
        return discounted

    def describe(self) -> str:
        return f"{self.offer} on {self.type} cars, new price is: ${format_price(self.price)}"


def format_price(price: float) -> str:
    """
    Render a price with at most two decimals and no trailing zeros

    Examples:
        700.0 -> "700", 699.5 -> "699.5", 12.3 -> "12.3"
    """
    text = f"{price:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
