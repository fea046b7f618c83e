"""
Singleton Pattern Implementation
Thread-safe singleton metaclass shared by every process-wide object
(settings, singleton holder)
"""
import threading
from typing import Dict, Any


class Singleton(type):
    """
    Thread-safe Singleton metaclass

    Usage:
        class Registry(metaclass=Singleton):
            def __init__(self):
                self.items = []

        assert Registry() is Registry()
    """

    _instances: Dict[type, Any] = {}
    _lock: threading.Lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        """
        Return the shared instance, creating it on first call only
        """
        if cls not in cls._instances:
            with cls._lock:
                # Double-checked locking
                if cls not in cls._instances:
                    cls._instances[cls] = super().__call__(*args, **kwargs)

        return cls._instances[cls]

    @classmethod
    def has_instance(mcs, klass: type) -> bool:
        """Whether ``klass`` has already been instantiated (used by metaclasses that
        treat a repeat construction differently from the first one)"""
        return klass in mcs._instances

    @classmethod
    def clear_instances(mcs):
        """Forget all singleton instances (tests only)"""
        with mcs._lock:
            mcs._instances.clear()
