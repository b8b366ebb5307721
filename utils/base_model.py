# utils/base_model.py
from typing import TypeVar, Any, Tuple, cast
from pydantic import BaseModel

from domain.geometry.constants import EPSILON

T = TypeVar('T', bound='ImmutableModel')


class ImmutableModel(BaseModel):
    """
    Base class for the numeric value types (tuples, colors).

    - Immutability: instances are frozen after creation
    - Copyability: modified copies via with_changes()
    - Tolerant comparison: field-by-field comparison within EPSILON
    """
    model_config = {
        "frozen": True,
    }

    def components(self) -> Tuple[float, ...]:
        """Field values in declaration order."""
        return tuple(getattr(self, name) for name in type(self).model_fields)

    def is_close_to(self, other: "ImmutableModel", tolerance: float = None) -> bool:
        """
        Check whether every field differs from its counterpart by less than the tolerance.

        Each field is compared only against the same field of the other instance.

        Args:
            other: Instance of the same model to compare with
            tolerance: Per-field tolerance. If None, uses the default EPSILON value.

        Returns:
            True if all corresponding fields are within the tolerance
        """
        if tolerance is None:
            tolerance = EPSILON
        if type(other) is not type(self):
            return False
        return all(
            abs(mine - theirs) < tolerance
            for mine, theirs in zip(self.components(), other.components())
        )

    def with_changes(self: T, **changes: Any) -> T:
        """
        Create a new instance with specified changes.

        Raises:
            ValueError: If an invalid field name is provided
        """
        current_data = self.model_dump()

        for key, value in changes.items():
            if key not in current_data:
                raise ValueError(f"Invalid field: {key}")
            current_data[key] = value

        return cast(T, self.__class__.model_validate(current_data))
