"""End Node - terminates a pipeline."""

from typing import Any, Dict, Optional

from pydantic import BaseModel

from ..core.types import (
    NodeCategory,
    NodeExecutionContext,
    NodeExecutionResult,
    define_node,
)


class EndInput(BaseModel):
    message: Optional[str] = None


class EndOutput(BaseModel):
    completed: bool
    message: Optional[str] = None


async def _execute(input: Dict[str, Any], context: NodeExecutionContext) -> NodeExecutionResult:
    return NodeExecutionResult.ok({
        "completed": True,
        "message": input.get("message") or "Workflow completed",
    })


end_node = define_node(
    type="end",
    name="End",
    description="Marks the end of a workflow",
    category=NodeCategory.LOGIC,
    input_shape=EndInput,
    output_shape=EndOutput,
    executor=_execute,
)
