"""
Adapter nodes over external services.

Each adapter reaches its service through ``context.services`` and returns a
failure result when the service is missing.
"""

# Apollo
from .apollo import (
    Contact,
    SearchContactsInput,
    SearchContactsOutput,
    search_contacts_node,
)

# DataForSEO
from .dataforseo import (
    ResearchedKeyword,
    SeoKeywordResearchInput,
    SeoKeywordResearchOutput,
    seo_keyword_research_node,
)

# OpenAI
from .openai import (
    GeneratedVideo,
    SoraVideoInput,
    SoraVideoOutput,
    sora_video_node,
)

# Social
from .social import (
    LinkedInMonitorInput,
    LinkedInMonitorOutput,
    LinkedInPost,
    TwitterMonitorInput,
    TwitterMonitorOutput,
    TwitterPost,
    linkedin_monitor_node,
    twitter_monitor_node,
)

__all__ = [
    "Contact",
    "SearchContactsInput",
    "SearchContactsOutput",
    "search_contacts_node",
    "ResearchedKeyword",
    "SeoKeywordResearchInput",
    "SeoKeywordResearchOutput",
    "seo_keyword_research_node",
    "GeneratedVideo",
    "SoraVideoInput",
    "SoraVideoOutput",
    "sora_video_node",
    "LinkedInMonitorInput",
    "LinkedInMonitorOutput",
    "LinkedInPost",
    "TwitterMonitorInput",
    "TwitterMonitorOutput",
    "TwitterPost",
    "linkedin_monitor_node",
    "twitter_monitor_node",
]
