# geokernel/utils/base_model.py
from typing import TypeVar, Any, cast
from pydantic import BaseModel

T = TypeVar('T', bound=BaseModel)


class ImmutableModel(BaseModel):
    """
    Base class for all geometric value types.

    Every entity of the kernel is frozen after construction: transforms and
    factories always hand back new instances. Derived copies are made with
    with_changes(), which runs the full validation again.
    """
    model_config = {
        "frozen": True,
    }

    def with_changes(self, **changes: Any) -> T:
        """
        Create a new instance with specified changes.

        Args:
            **changes: Keyword arguments with field values to change

        Returns:
            New, validated instance with updated values

        Raises:
            ValueError: If an invalid field name is provided
        """
        current_data = dict(self)

        for key, value in changes.items():
            if key not in current_data:
                raise ValueError(f"Invalid field: {key}")
            current_data[key] = value

        cls = self.__class__
        return cast(T, cls.model_validate(current_data))
