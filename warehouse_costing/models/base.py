"""Shared base model, input error and ordered aggregation helper.

Every entity in the costing hierarchy is an immutable pydantic model built
once and then only read. Constraint violations surface as a single error
type, InvalidInputError, regardless of how deep in the graph they occur.
"""

from functools import reduce
from operator import add
from typing import Any, Dict, Iterable, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError


Number = TypeVar("Number", int, float)

M = TypeVar("M", bound="CostingModel")


class InvalidInputError(ValueError):
    """Raised when an entity is constructed from values that cannot be costed."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with context."""
        msg = f"Invalid Input: {self.message}"
        if self.context:
            msg += "\n\nContext:"
            for key, value in self.context.items():
                msg += f"\n  {key}: {value}"
        return msg

    @classmethod
    def from_validation_error(
        cls, model_name: str, exc: PydanticValidationError
    ) -> "InvalidInputError":
        """Build an InvalidInputError from a pydantic validation failure.

        Args:
            model_name: Name of the model that failed to build
            exc: Underlying pydantic error

        Returns:
            InvalidInputError listing every offending field
        """
        problems = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
            problems.append(f"{location}: {error.get('msg')}")

        first = problems[0] if problems else str(exc)
        return cls(
            f"cannot build {model_name} ({first})",
            context={
                "model": model_name,
                "error_count": len(problems),
                "errors": "; ".join(problems),
            },
        )


class CostingModel(BaseModel):
    """
    Base class for all entities of the costing hierarchy.

    Instances are frozen after construction and reject infinite or NaN
    numbers. Any pydantic validation failure, whether raised through the
    constructor or through model_validate, is re-raised as InvalidInputError;
    a failure inside a nested model propagates as that model's own error.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    def __init__(self, **data: Any):
        """Initialize model, translating validation failures."""
        try:
            super().__init__(**data)
        except PydanticValidationError as exc:
            inner = nested_input_error(exc)
            if inner is not None:
                raise inner
            raise InvalidInputError.from_validation_error(type(self).__name__, exc) from exc

    @classmethod
    def model_validate(cls, obj: Any, *args: Any, **kwargs: Any):
        """Validate a dict (or compatible object) into this model."""
        try:
            return super().model_validate(obj, *args, **kwargs)
        except PydanticValidationError as exc:
            inner = nested_input_error(exc)
            if inner is not None:
                raise inner
            raise InvalidInputError.from_validation_error(cls.__name__, exc) from exc


def nested_input_error(exc: PydanticValidationError) -> Optional[InvalidInputError]:
    """
    Find an InvalidInputError already raised by a nested model.

    Pydantic calls the constructor of every nested model built from a dict,
    and wraps whatever it raises as a value error of the enclosing model.

    Args:
        exc: Validation failure of the enclosing model

    Returns:
        The first wrapped InvalidInputError, or None if the failure is the
        enclosing model's own
    """
    for error in exc.errors():
        wrapped = (error.get("ctx") or {}).get("error")
        if isinstance(wrapped, InvalidInputError):
            return wrapped
    return None


def ordered_sum(values: Iterable[Number], start: Union[int, float] = 0.0) -> Union[int, float]:
    """
    Left fold of values with +, in iteration order.

    The builtin sum() uses compensated summation for floats on recent
    interpreters; costs here must add up exactly the way a report reader
    would add them, one after the other, so totals are bit-reproducible.

    Args:
        values: Numbers to add, in the order they should be accumulated
        start: Initial accumulator (0.0 for costs, 0 for minutes)

    Returns:
        start + v1 + v2 + ... evaluated left to right
    """
    return reduce(add, values, start)
