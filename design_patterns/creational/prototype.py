"""
Prototype example

New records are produced by copying an existing one instead of
constructing them from scratch.
"""
from design_patterns.core.patterns.base_model import BaseModel, Field
from design_patterns.utils.logger import get_logger, log_with_context

logger = get_logger(__name__)


class Prototype(BaseModel):
    """
    Base class for cloneable records
    """

    def clone(self, deep: bool = False):
        """
        Copy this record

        Args:
            deep: Also copy nested mutable values. Records whose fields
                are all primitive behave the same either way.

        Returns:
            New, independent record with the same field values
        """
        copy = self.model_copy(deep=deep)
        log_with_context(
            logger,
            'debug',
            f"Cloned {self.__class__.__name__}",
            deep=deep,
        )
        return copy


class Person(Prototype):
    """Person record (prototype subject)"""

    name: str = Field(default="", description="Person name")
    age: int = Field(default=0, description="Age in years")
