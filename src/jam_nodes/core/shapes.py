"""
Shapes - Structural Input/Output Descriptions

A Shape validates a candidate value and returns either the validated value
or a list of violations. Nodes depend on the Shape interface, not on a
particular validation library.

Shapes compose with ``&``:

    merged = ModelShape(SearchInput) & ModelShape(RetryConfig)
    result = merged.validate({"keywords": "crm", "max_retries": 2})
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError


@dataclass(frozen=True)
class Violation:
    """A single constraint a value failed to satisfy."""
    path: str
    kind: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.kind} - {self.message}"


@dataclass
class ShapeResult:
    """Outcome of validating a value against a Shape."""
    valid: bool
    value: Optional[Dict[str, Any]] = None
    violations: List[Violation] = field(default_factory=list)

    def value_or(self, candidate: Any) -> Any:
        """Validated value, or ``candidate`` when the shape returned none."""
        return candidate if self.value is None else self.value


def format_violations(violations: List[Violation]) -> str:
    """
    Format violations for human-readable messages.

    Args:
        violations: Violations from a ShapeResult

    Returns:
        "path: kind - message; ..." string
    """
    return "; ".join(str(v) for v in violations)


def violations_from_error(error: ValidationError) -> List[Violation]:
    """Convert a pydantic ValidationError into violations."""
    violations = []
    for err in error.errors():
        path = ".".join(str(loc) for loc in err.get("loc", ())) or "<root>"
        violations.append(
            Violation(
                path=path,
                kind=err.get("type", "unknown"),
                message=err.get("msg", ""),
            )
        )
    return violations


class Shape(ABC):
    """Abstract structural description of a node's input or output."""

    @abstractmethod
    def validate(self, value: Any) -> ShapeResult:
        """
        Validate a candidate value.

        Args:
            value: Candidate value (normally a mapping)

        Returns:
            ShapeResult with the validated value or the violations
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the shape."""
        pass

    def accepts(self, value: Any) -> bool:
        """Membership test: does ``value`` conform to this shape?"""
        return self.validate(value).valid

    def intersect(self, other: "Shape") -> "Shape":
        """Shape requiring conformance to both ``self`` and ``other``."""
        return IntersectionShape(self, other)

    def __and__(self, other: "Shape") -> "Shape":
        if not isinstance(other, Shape):
            return NotImplemented
        return self.intersect(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"


class ModelShape(Shape):
    """Shape backed by a pydantic model class."""

    def __init__(self, model: Type[BaseModel]):
        if not (isinstance(model, type) and issubclass(model, BaseModel)):
            raise TypeError(f"ModelShape requires a pydantic model class, got {model!r}")
        self.model = model

    @property
    def name(self) -> str:
        return self.model.__name__

    def validate(self, value: Any) -> ShapeResult:
        if isinstance(value, BaseModel):
            value = value.model_dump()
        if not isinstance(value, Mapping):
            return ShapeResult(
                valid=False,
                violations=[
                    Violation(
                        path="<root>",
                        kind="type_error",
                        message=f"Expected a mapping, got {type(value).__name__}",
                    )
                ],
            )
        try:
            parsed = self.model.model_validate(dict(value))
        except ValidationError as e:
            return ShapeResult(valid=False, violations=violations_from_error(e))
        return ShapeResult(valid=True, value=parsed.model_dump())


class IntersectionShape(Shape):
    """
    Structural AND of two shapes.

    The validated value merges both sides' validated dicts; the right side
    wins on key conflicts. A side that validates without returning a value
    contributes the candidate itself. Violations from both sides are
    reported together.
    """

    def __init__(self, left: Shape, right: Shape):
        self.left = left
        self.right = right

    @property
    def name(self) -> str:
        return f"{self.left.name} & {self.right.name}"

    def validate(self, value: Any) -> ShapeResult:
        left = self.left.validate(value)
        right = self.right.validate(value)
        if left.valid and right.valid:
            merged: Dict[str, Any] = {}
            for side in (left, right):
                side_value = side.value_or(value)
                if isinstance(side_value, Mapping):
                    merged.update(side_value)
            return ShapeResult(valid=True, value=merged)
        return ShapeResult(valid=False, violations=left.violations + right.violations)


def as_shape(shape: Any) -> Shape:
    """Coerce a Shape or pydantic model class into a Shape."""
    if isinstance(shape, Shape):
        return shape
    if isinstance(shape, type) and issubclass(shape, BaseModel):
        return ModelShape(shape)
    raise TypeError(f"Expected a Shape or pydantic model class, got {shape!r}")
