"""
Conditional Node

Evaluates a condition against workflow variables and selects the next
branch. Deterministic: no side effects, no suspension.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field

from ..core.types import (
    NodeCategory,
    NodeExecutionContext,
    NodeExecutionResult,
    define_node,
)

_MISSING = object()


class ConditionType(str, Enum):
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    CONTAINS = "contains"
    EXISTS = "exists"
    NOT_EXISTS = "not_exists"


class Condition(BaseModel):
    """A single predicate over a (dot-path) variable."""
    type: ConditionType
    variable: str = Field(min_length=1)
    value: Any = None


class ConditionalInput(BaseModel):
    condition: Condition
    true_node_id: str
    false_node_id: str
    variables: Dict[str, Any] = Field(default_factory=dict)


class ConditionalOutput(BaseModel):
    condition_met: bool
    next_node_id: str


def resolve_variable(path: str, *scopes: Dict[str, Any]) -> Tuple[bool, Any]:
    """
    Resolve a dot path such as ``lead.score`` against the given scopes.

    The first scope containing the full path wins.

    Returns:
        (found, value)
    """
    for scope in scopes:
        current: Any = scope
        for part in path.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                current = _MISSING
                break
        if current is not _MISSING:
            return True, current
    return False, None


def evaluate_condition(
    condition: Condition,
    variables: Dict[str, Any],
    fallback: Optional[Dict[str, Any]] = None,
) -> bool:
    """
    Evaluate a condition.

    Ordered comparisons between incomparable values are "not met" rather
    than errors.
    """
    found, actual = resolve_variable(condition.variable, variables, fallback or {})
    kind = condition.type
    expected = condition.value

    if kind == ConditionType.EXISTS:
        return found and actual is not None
    if kind == ConditionType.NOT_EXISTS:
        return not found or actual is None
    if kind == ConditionType.EQUALS:
        return found and actual == expected
    if kind == ConditionType.NOT_EQUALS:
        return not found or actual != expected
    if not found:
        return False
    if kind == ConditionType.CONTAINS:
        try:
            return expected in actual
        except TypeError:
            return False
    try:
        if kind == ConditionType.GREATER_THAN:
            return actual > expected
        return actual < expected
    except TypeError:
        return False


async def _execute(input: Dict[str, Any], context: NodeExecutionContext) -> NodeExecutionResult:
    try:
        parsed = ConditionalInput.model_validate(input)
    except ValueError as e:
        return NodeExecutionResult.fail(f"Invalid condition: {e}")

    met = evaluate_condition(parsed.condition, parsed.variables, context.variables)
    return NodeExecutionResult.ok({
        "condition_met": met,
        "next_node_id": parsed.true_node_id if met else parsed.false_node_id,
    })


conditional_node = define_node(
    type="conditional",
    name="Conditional",
    description="Branch to one of two nodes based on a condition",
    category=NodeCategory.LOGIC,
    input_shape=ConditionalInput,
    output_shape=ConditionalOutput,
    executor=_execute,
    capabilities={"supports_rerun": True},
)
