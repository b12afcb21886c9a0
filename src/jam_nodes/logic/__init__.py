"""Control-flow nodes and node decorators."""

from .retry import (
    RetryConfig,
    RetryMetadata,
    compute_backoff_delay,
    create_retry_node,
    wrap_with_retry,
)
from .conditional import (
    Condition,
    ConditionType,
    ConditionalInput,
    ConditionalOutput,
    conditional_node,
    evaluate_condition,
    resolve_variable,
)
from .delay import DelayInput, DelayOutput, create_delay_node, delay_node
from .end import EndInput, EndOutput, end_node

__all__ = [
    # Retry
    "RetryConfig",
    "RetryMetadata",
    "compute_backoff_delay",
    "create_retry_node",
    "wrap_with_retry",
    # Conditional
    "Condition",
    "ConditionType",
    "ConditionalInput",
    "ConditionalOutput",
    "conditional_node",
    "evaluate_condition",
    "resolve_variable",
    # Delay
    "DelayInput",
    "DelayOutput",
    "create_delay_node",
    "delay_node",
    # End
    "EndInput",
    "EndOutput",
    "end_node",
]
