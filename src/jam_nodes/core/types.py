"""
Node Definition Contract

Defines the uniform shape every unit of work presents so nodes compose
without knowledge of each other's internals:

    node = define_node(
        type="search_contacts",
        name="Search Contacts",
        description="Search for contacts",
        category=NodeCategory.INTEGRATION,
        input_shape=SearchContactsInput,
        output_shape=SearchContactsOutput,
        executor=search_contacts,
    )
    result = await node.executor({"keywords": "crm"}, context)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from .services import NodeServices
from .shapes import Shape, as_shape


class NodeCategory(str, Enum):
    """Classification tag. Advisory only."""
    ACTION = "action"
    INTEGRATION = "integration"
    LOGIC = "logic"
    CONTROL_FLOW = "control_flow"


class NodeCapabilities(BaseModel):
    """Optional behaviours a node supports. Purely descriptive."""
    model_config = ConfigDict(frozen=True)

    supports_enrichment: bool = False
    supports_bulk_actions: bool = False
    supports_approval: bool = False
    supports_rerun: bool = False
    supports_cancel: bool = False


class NodeExecutionResult(BaseModel):
    """
    Discriminated success/failure result of an executor.

    Use ``NodeExecutionResult.ok(output)`` or ``NodeExecutionResult.fail(error)``.
    """
    success: bool
    output: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _check_variant(self) -> "NodeExecutionResult":
        if self.success and self.error is not None:
            raise ValueError("A successful result cannot carry an error")
        if not self.success and self.error is None:
            raise ValueError("A failed result must carry an error")
        if not self.success and self.output is not None:
            raise ValueError("A failed result cannot carry output")
        return self

    @classmethod
    def ok(cls, output: Optional[Dict[str, Any]] = None) -> "NodeExecutionResult":
        return cls(success=True, output=output)

    @classmethod
    def fail(cls, error: str) -> "NodeExecutionResult":
        return cls(success=False, error=error)


@dataclass
class NodeExecutionContext:
    """
    Ambient per-invocation data passed to every executor.

    The core never inspects it; wrappers pass it through unchanged.
    """
    user_id: str
    workflow_execution_id: Optional[str] = None
    variables: Dict[str, Any] = field(default_factory=dict)
    services: NodeServices = field(default_factory=NodeServices)


# async (input, context) -> NodeExecutionResult
NodeExecutor = Callable[[Dict[str, Any], NodeExecutionContext], Awaitable[NodeExecutionResult]]


class NodeDefinitionError(ValueError):
    """Raised when a node definition is structurally incomplete or clashes."""


class NodeExecutionError(Exception):
    """Raised when a node cannot be invoked at all."""

    def __init__(self, node_type: str, reason: str):
        self.node_type = node_type
        self.reason = reason
        super().__init__(f"[{node_type}] {reason}")


@dataclass(frozen=True)
class NodeDefinition:
    """
    A named, typed, described unit of work.

    Immutable: decorators such as ``create_retry_node`` return a new
    NodeDefinition and never modify the one they wrap.
    """
    type: str
    name: str
    description: str
    category: NodeCategory
    input_shape: Shape
    output_shape: Shape
    executor: NodeExecutor
    capabilities: NodeCapabilities = field(default_factory=NodeCapabilities)
    estimated_duration: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Display metadata (no executor)."""
        return {
            "type": self.type,
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "input_shape": self.input_shape.name,
            "output_shape": self.output_shape.name,
            "capabilities": self.capabilities.model_dump(),
            "estimated_duration": self.estimated_duration,
        }


def define_node(
    type: str,
    name: str,
    description: str,
    category: Any,
    input_shape: Any,
    output_shape: Any,
    executor: NodeExecutor,
    capabilities: Any = None,
    estimated_duration: Optional[float] = None,
) -> NodeDefinition:
    """
    Construct a NodeDefinition.

    Only structural completeness is checked; shapes are opaque here.

    Args:
        type: Stable identifier
        name: Display name
        description: Display description
        category: NodeCategory or its string value
        input_shape: Shape or pydantic model class
        output_shape: Shape or pydantic model class
        executor: async (input, context) -> NodeExecutionResult
        capabilities: NodeCapabilities or dict of flags
        estimated_duration: Advisory duration in seconds

    Returns:
        NodeDefinition

    Raises:
        NodeDefinitionError: If a required field is missing or malformed
    """
    if not type:
        raise NodeDefinitionError("Node type is required")
    if not name:
        raise NodeDefinitionError(f"[{type}] Node name is required")
    if input_shape is None or output_shape is None:
        raise NodeDefinitionError(f"[{type}] Input and output shapes are required")
    if not callable(executor):
        raise NodeDefinitionError(f"[{type}] Executor must be callable")

    try:
        category = NodeCategory(category)
        input_shape = as_shape(input_shape)
        output_shape = as_shape(output_shape)
    except (TypeError, ValueError) as e:
        raise NodeDefinitionError(f"[{type}] {e}") from e

    if capabilities is None:
        capabilities = NodeCapabilities()
    elif isinstance(capabilities, dict):
        capabilities = NodeCapabilities(**capabilities)

    return NodeDefinition(
        type=type,
        name=name,
        description=description or "",
        category=category,
        input_shape=input_shape,
        output_shape=output_shape,
        executor=executor,
        capabilities=capabilities,
        estimated_duration=estimated_duration,
    )
