from .linkedin_monitor import (
    LinkedInMonitorInput,
    LinkedInMonitorOutput,
    LinkedInPost,
    extract_handle,
    extract_hashtags,
    linkedin_monitor_node,
)
from .twitter_monitor import (
    TwitterMonitorInput,
    TwitterMonitorOutput,
    TwitterPost,
    build_search_query,
    twitter_monitor_node,
)

__all__ = [
    "LinkedInMonitorInput",
    "LinkedInMonitorOutput",
    "LinkedInPost",
    "extract_handle",
    "extract_hashtags",
    "linkedin_monitor_node",
    "TwitterMonitorInput",
    "TwitterMonitorOutput",
    "TwitterPost",
    "build_search_query",
    "twitter_monitor_node",
]
