"""
Node Registry

Indexes NodeDefinitions by ``type`` so a pipeline engine can discover them.
"""

import logging
from typing import Dict, Iterator, List, Optional

from .types import NodeCategory, NodeDefinition, NodeDefinitionError

logger = logging.getLogger(__name__)


class NodeRegistry:
    """
    Registry of node definitions keyed by type.

    Example:
        registry = NodeRegistry()
        registry.register(end_node)
        registry.register(create_retry_node(search_contacts_node))
        node = registry.get("search_contacts_with_retry")
    """

    def __init__(self, nodes: Optional[List[NodeDefinition]] = None):
        self._nodes: Dict[str, NodeDefinition] = {}
        for node in nodes or []:
            self.register(node)

    def register(self, node: NodeDefinition) -> NodeDefinition:
        """
        Add a node.

        Raises:
            NodeDefinitionError: If a node with the same type is registered
        """
        if node.type in self._nodes:
            raise NodeDefinitionError(f"Duplicate node type: {node.type}")
        self._nodes[node.type] = node
        logger.debug(f"[registry] Registered {node.type}")
        return node

    def get(self, node_type: str) -> NodeDefinition:
        """
        Look up a node by type.

        Raises:
            KeyError: If no such node is registered
        """
        try:
            return self._nodes[node_type]
        except KeyError:
            raise KeyError(
                f"Unknown node type: {node_type}. "
                f"Available: {sorted(self._nodes)}"
            ) from None

    def has(self, node_type: str) -> bool:
        return node_type in self._nodes

    def types(self) -> List[str]:
        return list(self._nodes)

    def list(self, category: Optional[NodeCategory] = None) -> List[NodeDefinition]:
        """All nodes, optionally filtered by category."""
        if category is None:
            return list(self._nodes.values())
        category = NodeCategory(category)
        return [n for n in self._nodes.values() if n.category == category]

    def __contains__(self, node_type: object) -> bool:
        return node_type in self._nodes

    def __iter__(self) -> Iterator[NodeDefinition]:
        return iter(list(self._nodes.values()))

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"NodeRegistry(nodes={len(self._nodes)})"


def default_registry() -> NodeRegistry:
    """Registry holding every built-in node."""
    from ..integrations import (
        linkedin_monitor_node,
        search_contacts_node,
        seo_keyword_research_node,
        sora_video_node,
        twitter_monitor_node,
    )
    from ..logic import conditional_node, delay_node, end_node

    return NodeRegistry([
        conditional_node,
        delay_node,
        end_node,
        search_contacts_node,
        seo_keyword_research_node,
        twitter_monitor_node,
        linkedin_monitor_node,
        sora_video_node,
    ])
