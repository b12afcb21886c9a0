"""
Retry Node Factory

Higher-order factory that wraps any NodeDefinition with exponential
backoff retry logic. The wrapped node needs no retry awareness.

    retrying = create_retry_node(search_contacts_node)
    result = await retrying.executor(
        {"keywords": "crm", "max_retries": 2, "initial_delay_ms": 500},
        context,
    )
    result.output["retries_attempted"]

Delay before retry k (k >= 1):
    min(initial_delay_ms * backoff_multiplier ** (k - 1), max_delay_ms)
"""

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Dict, Optional

from pydantic import BaseModel, Field

from ..core.execution import error_message
from ..core.shapes import ModelShape
from ..core.types import (
    NodeDefinition,
    NodeExecutionContext,
    NodeExecutionResult,
    define_node,
)

logger = logging.getLogger(__name__)

RETRY_TYPE_SUFFIX = "_with_retry"
RETRY_NAME_SUFFIX = " (Retry)"
RETRY_DESCRIPTION_PREFIX = "Retries execution on failure. "

# Coroutine function taking seconds, e.g. asyncio.sleep
SleepFunc = Callable[[float], Awaitable[Any]]


class RetryConfig(BaseModel):
    """Retry configuration merged into a wrapped node's input."""
    max_retries: int = Field(default=3, ge=1, le=10)
    initial_delay_ms: float = Field(default=1000, ge=0)
    max_delay_ms: float = Field(default=30000, ge=0)
    backoff_multiplier: float = Field(default=2, ge=1)


class RetryMetadata(BaseModel):
    """Metadata merged into a wrapped node's output on success."""
    retries_attempted: int = Field(ge=0)
    total_duration_ms: float = Field(ge=0)


_DEFAULTS = RetryConfig()


def compute_backoff_delay(
    attempt: int,
    initial_delay_ms: float = _DEFAULTS.initial_delay_ms,
    backoff_multiplier: float = _DEFAULTS.backoff_multiplier,
    max_delay_ms: float = _DEFAULTS.max_delay_ms,
) -> float:
    """
    Delay in milliseconds after the zero-based ``attempt`` failed.

    Args:
        attempt: Zero-based index of the attempt that just failed
        initial_delay_ms: Delay before the first retry
        backoff_multiplier: Growth factor per retry
        max_delay_ms: Upper bound on any single delay

    Returns:
        Delay in milliseconds
    """
    return min(initial_delay_ms * backoff_multiplier ** attempt, max_delay_ms)


def _setting(input: Dict[str, Any], key: str) -> Any:
    value = input.get(key)
    return getattr(_DEFAULTS, key) if value is None else value


def create_retry_node(
    node: NodeDefinition,
    *,
    sleep: Optional[SleepFunc] = None,
) -> NodeDefinition:
    """
    Wrap a node definition with exponential backoff retry logic.

    The returned node accepts the wrapped node's input plus RetryConfig,
    and on success returns the wrapped output plus RetryMetadata. Failures,
    raised or returned, are absorbed until attempts run out; exhaustion is
    reported as a failure result, never raised.

    Args:
        node: The node definition to wrap (left untouched)
        sleep: Coroutine function used for backoff waits, in seconds

    Returns:
        A new NodeDefinition with merged shapes
    """
    wait = sleep or asyncio.sleep

    async def executor(
        input: Dict[str, Any],
        context: NodeExecutionContext,
    ) -> NodeExecutionResult:
        max_retries = _setting(input, "max_retries")
        initial_delay_ms = _setting(input, "initial_delay_ms")
        max_delay_ms = _setting(input, "max_delay_ms")
        backoff_multiplier = _setting(input, "backoff_multiplier")

        attempt = 0
        start = time.monotonic()
        last_error: Optional[str] = None

        while attempt <= max_retries:
            try:
                result = await node.executor(input, context)
                if result.success and result.output is not None:
                    if attempt:
                        logger.info(f"[{node.type}] Succeeded after {attempt} retries")
                    return NodeExecutionResult.ok({
                        **result.output,
                        "retries_attempted": attempt,
                        "total_duration_ms": (time.monotonic() - start) * 1000,
                    })
                last_error = result.error
            except Exception as e:
                last_error = error_message(e)

            logger.warning(
                f"[{node.type}] Attempt {attempt + 1}/{max_retries + 1} failed: {last_error}"
            )

            if attempt >= max_retries:
                break

            delay = compute_backoff_delay(
                attempt, initial_delay_ms, backoff_multiplier, max_delay_ms
            )
            await wait(delay / 1000)
            attempt += 1

        logger.error(f"[{node.type}] Retries exhausted: {last_error}")
        return NodeExecutionResult.fail(
            f"Failed after {attempt} attempts. Last error: {last_error}"
        )

    return define_node(
        type=f"{node.type}{RETRY_TYPE_SUFFIX}",
        name=f"{node.name}{RETRY_NAME_SUFFIX}",
        description=f"{RETRY_DESCRIPTION_PREFIX}{node.description}",
        category=node.category,
        input_shape=node.input_shape & ModelShape(RetryConfig),
        output_shape=node.output_shape & ModelShape(RetryMetadata),
        executor=executor,
        capabilities=node.capabilities,
        estimated_duration=node.estimated_duration,
    )


# Name used by pipeline code that treats retry as one decorator among many
wrap_with_retry = create_retry_node
