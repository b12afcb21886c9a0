"""
Delay Node

Pauses a pipeline for a fixed duration.
"""

import asyncio
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from ..core.types import (
    NodeCategory,
    NodeDefinition,
    NodeExecutionContext,
    NodeExecutionResult,
    define_node,
)
from .retry import SleepFunc

MAX_DELAY_MS = 24 * 60 * 60 * 1000


class DelayInput(BaseModel):
    duration_ms: float = Field(ge=0, le=MAX_DELAY_MS)


class DelayOutput(BaseModel):
    waited_ms: float


def create_delay_node(sleep: Optional[SleepFunc] = None) -> NodeDefinition:
    """
    Build a delay node.

    Args:
        sleep: Coroutine function used for the wait, in seconds
    """
    wait = sleep or asyncio.sleep

    async def executor(input: Dict[str, Any], context: NodeExecutionContext) -> NodeExecutionResult:
        duration_ms = input.get("duration_ms")
        if duration_ms is None or duration_ms < 0:
            return NodeExecutionResult.fail(f"Invalid delay duration: {duration_ms}")
        await wait(duration_ms / 1000)
        return NodeExecutionResult.ok({"waited_ms": duration_ms})

    return define_node(
        type="delay",
        name="Delay",
        description="Wait for a fixed duration before continuing",
        category=NodeCategory.LOGIC,
        input_shape=DelayInput,
        output_shape=DelayOutput,
        executor=executor,
        capabilities={"supports_cancel": True},
    )


delay_node = create_delay_node()
