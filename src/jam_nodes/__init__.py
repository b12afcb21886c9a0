"""jam-nodes: composable workflow nodes with a uniform execution contract."""

from .core import (
    NodeCategory,
    NodeCapabilities,
    NodeExecutionResult,
    NodeExecutionContext,
    NodeDefinition,
    NodeDefinitionError,
    NodeServices,
    NodeRegistry,
    ModelShape,
    Shape,
    define_node,
    default_registry,
    execute_node,
)
from .logic import (
    RetryConfig,
    RetryMetadata,
    create_retry_node,
    wrap_with_retry,
    conditional_node,
    delay_node,
    end_node,
)
from .integrations import (
    linkedin_monitor_node,
    search_contacts_node,
    seo_keyword_research_node,
    sora_video_node,
    twitter_monitor_node,
)

__version__ = "0.1.0"

__all__ = [
    # Contract
    "NodeCategory",
    "NodeCapabilities",
    "NodeExecutionResult",
    "NodeExecutionContext",
    "NodeDefinition",
    "NodeDefinitionError",
    "NodeServices",
    "NodeRegistry",
    "ModelShape",
    "Shape",
    "define_node",
    "default_registry",
    "execute_node",
    # Logic
    "RetryConfig",
    "RetryMetadata",
    "create_retry_node",
    "wrap_with_retry",
    "conditional_node",
    "delay_node",
    "end_node",
    # Integrations
    "search_contacts_node",
    "seo_keyword_research_node",
    "twitter_monitor_node",
    "linkedin_monitor_node",
    "sora_video_node",
]
