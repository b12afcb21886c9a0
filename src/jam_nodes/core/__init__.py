"""Node definition contract and shared infrastructure."""

from .types import (
    NodeCategory,
    NodeCapabilities,
    NodeExecutionResult,
    NodeExecutionContext,
    NodeExecutor,
    NodeDefinition,
    NodeDefinitionError,
    NodeExecutionError,
    define_node,
)
from .shapes import (
    Shape,
    ShapeResult,
    Violation,
    ModelShape,
    IntersectionShape,
    as_shape,
    format_violations,
)
from .services import (
    NodeServices,
    ServiceNotConfiguredError,
    OpenAIClient,
    ApolloClient,
    DataForSeoClient,
    TwitterClient,
    ForumScoutClient,
    NotificationService,
)
from .execution import execute_node, error_message, NodeTimer
from .metrics import MetricsCollector
from .registry import NodeRegistry, default_registry
from .config import Settings, load_settings, get_settings
from .logger import get_logger

__all__ = [
    # Contract
    "NodeCategory",
    "NodeCapabilities",
    "NodeExecutionResult",
    "NodeExecutionContext",
    "NodeExecutor",
    "NodeDefinition",
    "NodeDefinitionError",
    "NodeExecutionError",
    "define_node",
    # Shapes
    "Shape",
    "ShapeResult",
    "Violation",
    "ModelShape",
    "IntersectionShape",
    "as_shape",
    "format_violations",
    # Services
    "NodeServices",
    "ServiceNotConfiguredError",
    "OpenAIClient",
    "ApolloClient",
    "DataForSeoClient",
    "TwitterClient",
    "ForumScoutClient",
    "NotificationService",
    # Invocation
    "execute_node",
    "error_message",
    "NodeTimer",
    "MetricsCollector",
    "NodeRegistry",
    "default_registry",
    # Config & logging
    "Settings",
    "load_settings",
    "get_settings",
    "get_logger",
]
