"""
Metrics Collection Utilities

Tracks node executions per node type.
"""

import time
from collections import defaultdict
from typing import Any, Dict, Optional


class MetricsCollector:
    """
    Collect execution metrics from nodes.

    Example:
        metrics = MetricsCollector("campaign-run")
        await execute_node(node, payload, context, metrics=metrics)
        print(metrics.get_summary())
    """

    def __init__(self, name: str = "nodes"):
        """
        Initialize metrics collector.

        Args:
            name: Identifier for this collector (e.g., pipeline run name)
        """
        self.name = name
        self.metrics = defaultdict(list)

    def record(
        self,
        node_type: str,
        duration_ms: float,
        status: str,
        details: Optional[Dict] = None,
    ) -> None:
        """
        Record a node execution.

        Args:
            node_type: Node identifier
            duration_ms: Execution time in milliseconds
            status: "success" or "error"
            details: Optional additional details
        """
        self.metrics[node_type].append({
            "timestamp": time.time(),
            "duration_ms": duration_ms,
            "status": status,
            "details": details or {},
        })

    def get_summary(self) -> Dict[str, Any]:
        """
        Get summary of all metrics.

        Returns:
            Dict with per-node-type statistics
        """
        summary = {}
        for node_type, executions in self.metrics.items():
            durations = [e["duration_ms"] for e in executions]
            successes = [e for e in executions if e["status"] == "success"]
            summary[node_type] = {
                "count": len(executions),
                "avg_ms": sum(durations) / len(durations) if durations else 0,
                "min_ms": min(durations) if durations else 0,
                "max_ms": max(durations) if durations else 0,
                "success_rate": len(successes) / len(executions) if executions else 0,
            }
        return summary

    def reset(self) -> None:
        """Drop all recorded executions."""
        self.metrics = defaultdict(list)
