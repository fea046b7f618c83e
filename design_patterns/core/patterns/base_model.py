"""
Enhanced BaseModel with validation
Extends Pydantic BaseModel with conversion helpers
"""
from pydantic import (
    BaseModel as PydanticBaseModel,
    ConfigDict,
    Field,
)
from typing import Dict, Any


class BaseModel(PydanticBaseModel):
    """
    Enhanced BaseModel with common functionality

    Features:
    - Dictionary conversion
    - Validation on assignment
    """

    model_config = ConfigDict(
        validate_assignment=True,
        use_enum_values=True,
        populate_by_name=True,
        extra="forbid",
    )

    def to_dict(self, exclude_none: bool = True) -> Dict[str, Any]:
        """
        Convert model to dictionary

        Args:
            exclude_none: Exclude None values

        Returns:
            Dictionary representation
        """
        return self.model_dump(
            exclude_none=exclude_none,
            mode="python",
        )

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{k}={repr(v)}"
            for k, v in self.to_dict(exclude_none=True).items()
        )
        return f"{self.__class__.__name__}({fields})"


class ImmutableModel(BaseModel):
    """
    Immutable BaseModel

    Cannot be modified after creation
    """

    model_config = ConfigDict(
        frozen=True,
        validate_assignment=True,
        use_enum_values=True,
        populate_by_name=True,
        extra="forbid",
    )
