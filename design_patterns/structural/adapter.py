"""
Adapter example

Exposes an existing component with an incompatible method name through
the interface clients expect.
"""
from abc import ABC, abstractmethod


class Adaptee:
    """Existing component with its own method name"""

    def get_request(self) -> str:
        return "Request from the client"


class Target(ABC):
    """
    Client interface: how clients talk to the service
    """

    @abstractmethod
    def request(self) -> str:
        pass


class Adapter(Target):
    """
    Wraps an Adaptee and serves it through ``Target.request``
    """

    def __init__(self, adaptee: Adaptee):
        self._adaptee = adaptee

    def request(self) -> str:
        return f"This is the '{self._adaptee.get_request()}'"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(adaptee={self._adaptee.__class__.__name__})"
