"""
Node Invocation

Helper a host uses to run a NodeDefinition with:
- Input validation against the node's input shape
- Raised-error to failure-result conversion
- Output validation against the node's output shape
- Timing/metrics
- Logging
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .config import get_settings
from .metrics import MetricsCollector
from .shapes import format_violations
from .types import (
    NodeDefinition,
    NodeExecutionContext,
    NodeExecutionError,
    NodeExecutionResult,
)

logger = logging.getLogger(__name__)


@dataclass
class NodeTimer:
    """Context manager for timing node execution."""
    node_type: str
    _start: float = field(default=0.0, init=False)
    duration_ms: float = field(default=0.0, init=False)

    def __enter__(self):
        self._start = time.monotonic()
        logger.debug(f"[{self.node_type}] Starting")
        return self

    def __exit__(self, *args):
        self.duration_ms = (time.monotonic() - self._start) * 1000
        logger.info(f"[{self.node_type}] Complete ({self.duration_ms:.1f}ms)")


def error_message(error: BaseException) -> str:
    """Message of an exception, falling back to its string conversion."""
    if error.args and isinstance(error.args[0], str) and error.args[0]:
        return error.args[0]
    return str(error) or type(error).__name__


async def execute_node(
    node: NodeDefinition,
    input: Dict[str, Any],
    context: NodeExecutionContext,
    *,
    validate_input: Optional[bool] = None,
    validate_output: Optional[bool] = None,
    metrics: Optional[MetricsCollector] = None,
    strict: bool = False,
) -> NodeExecutionResult:
    """
    Validate, invoke and check a node.

    Args:
        node: Node to run
        input: Raw input mapping
        context: Execution context, passed through unchanged
        validate_input: Validate input first (defaults to settings)
        validate_output: Validate successful output (defaults to settings)
        metrics: Optional collector to record the execution into
        strict: Raise NodeExecutionError on invalid input instead of
            returning a failure result

    Returns:
        NodeExecutionResult. Executor errors never propagate as exceptions.

    Raises:
        NodeExecutionError: In strict mode, when the input is invalid
    """
    settings = get_settings()
    if validate_input is None:
        validate_input = settings.validate_input
    if validate_output is None:
        validate_output = settings.validate_output

    with NodeTimer(node.type) as timer:
        result = await _run(
            node, input, context, validate_input, validate_output, strict
        )

    if metrics is not None:
        details = {"error": result.error} if result.error else None
        metrics.record(
            node.type,
            timer.duration_ms,
            "success" if result.success else "error",
            details,
        )
    return result


async def _run(
    node: NodeDefinition,
    input: Dict[str, Any],
    context: NodeExecutionContext,
    validate_input: bool,
    validate_output: bool,
    strict: bool,
) -> NodeExecutionResult:
    if validate_input:
        checked = node.input_shape.validate(input)
        if not checked.valid:
            reason = format_violations(checked.violations)
            logger.warning(f"[{node.type}] Invalid input: {reason}")
            if strict:
                raise NodeExecutionError(node.type, f"Invalid input: {reason}")
            return NodeExecutionResult.fail(f"Invalid input: {reason}")
        input = checked.value_or(input)

    try:
        result = await node.executor(input, context)
    except Exception as e:
        logger.exception(f"[{node.type}] Error: {e}")
        return NodeExecutionResult.fail(error_message(e))

    if not isinstance(result, NodeExecutionResult):
        logger.error(f"[{node.type}] Executor returned {type(result).__name__}")
        return NodeExecutionResult.fail(
            f"Executor returned {type(result).__name__}, expected NodeExecutionResult"
        )

    if not result.success:
        logger.warning(f"[{node.type}] Failed: {result.error}")
        return result

    if validate_output and result.output is not None:
        checked = node.output_shape.validate(result.output)
        if not checked.valid:
            reason = format_violations(checked.violations)
            logger.error(f"[{node.type}] Invalid output: {reason}")
            return NodeExecutionResult.fail(f"Invalid output: {reason}")
        return NodeExecutionResult.ok(checked.value_or(result.output))

    return result
