"""
Singleton example

One shared, lazily created holder of a mutable name.
"""
import json
from typing import Any, Dict, Union

from design_patterns.core.patterns.base_model import BaseModel, Field
from design_patterns.core.patterns.singleton import Singleton
from design_patterns.utils.logger import get_logger

logger = get_logger(__name__)


class SingletonHolderMeta(Singleton, type(BaseModel)):
    """
    Metaclass combining Singleton and the pydantic model metaclass

    A repeat construction with field values assigns them to the shared
    instance instead of dropping them.
    """

    def __call__(cls, **data):
        existed = Singleton.has_instance(cls)
        holder = super().__call__(**data)
        if existed:
            for field, value in data.items():
                setattr(holder, field, value)
        return holder


class SingletonHolder(BaseModel, metaclass=SingletonHolderMeta):
    """
    Process-wide named-value record

    Every call to ``SingletonHolder()`` or ``SingletonHolder.instance()``
    returns the same object, so a name assigned through one reference is
    visible through all of them. Copying and validation return that
    object too.
    """

    name: str = Field(default="", description="Shared mutable name")

    def __init__(self, **data):
        super().__init__(**data)
        logger.debug("Created singleton holder")

    @classmethod
    def instance(cls) -> "SingletonHolder":
        """Return the shared holder, creating it on first access"""
        return cls()

    @classmethod
    def model_validate(cls, obj: Union["SingletonHolder", Dict[str, Any]], **kwargs) -> "SingletonHolder":
        if isinstance(obj, cls):
            return obj
        return cls(**dict(obj))

    @classmethod
    def model_validate_json(cls, json_data: Union[str, bytes], **kwargs) -> "SingletonHolder":
        return cls(**json.loads(json_data))

    def model_copy(self, *, update: Dict[str, Any] = None, deep: bool = False) -> "SingletonHolder":
        for field, value in (update or {}).items():
            setattr(self, field, value)
        return self

    def __copy__(self) -> "SingletonHolder":
        return self

    def __deepcopy__(self, memo=None) -> "SingletonHolder":
        return self


def get_singleton_holder() -> SingletonHolder:
    return SingletonHolder.instance()
