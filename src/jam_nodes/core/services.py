"""
External Service Abstractions

Interfaces for the optional services a host application can hand to nodes
through ``context.services``. Nodes depend on these interfaces, never on
concrete API clients (Dependency Inversion Principle).

Every service is optional: different deployments enable different subsets,
so nodes must check for presence before use.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional


class ServiceNotConfiguredError(LookupError):
    """Raised when a node requires a service the host did not provide."""

    def __init__(self, service_name: str, display_name: Optional[str] = None):
        self.service_name = service_name
        self.display_name = display_name or service_name
        super().__init__(
            f"{self.display_name} service not configured. "
            f"Please provide context.services.{service_name}."
        )


# ============================================================================
# AI services
# ============================================================================

class OpenAIClient(ABC):
    """Media generation through OpenAI models."""

    @abstractmethod
    async def generate_video(
        self,
        prompt: str,
        model: str = "sora-2",
        seconds: int = 4,
        size: str = "1280x720",
    ) -> Dict[str, Any]:
        """
        Generate a video and wait for it to finish.

        Returns:
            Dict with ``url`` and ``duration_seconds``
        """
        pass


# ============================================================================
# Data services
# ============================================================================

class ApolloClient(ABC):
    """
    Contact search and enrichment.

    Contacts are plain dicts with at least ``id`` and ``name``; enrichment
    may add ``email``, ``title``, ``company``, ``linkedin_url``, ``location``.
    """

    @abstractmethod
    async def search_contacts(self, criteria: Dict[str, Any]) -> List[Dict[str, Any]]:
        pass

    @abstractmethod
    async def enrich_contact(self, contact_id: str) -> Dict[str, Any]:
        pass


class DataForSeoClient(ABC):
    """
    SEO keyword data.

    Each returned keyword dict carries ``keyword``, ``search_volume``,
    ``keyword_difficulty``, ``cpc`` and ``search_intent``.
    """

    @abstractmethod
    async def get_related_keywords(
        self,
        keywords: List[str],
        location_code: int = 2840,
        language_code: str = "en",
        limit: int = 30,
    ) -> List[Dict[str, Any]]:
        pass


class TwitterClient(ABC):
    """
    Tweet search.

    Each returned tweet dict carries ``id``, ``url``, ``text``,
    ``author_name``, ``author_handle``, ``author_followers``, ``likes``,
    ``replies``, ``retweets``, ``created_at`` and optionally ``views``.
    """

    @abstractmethod
    async def search_tweets(
        self,
        query: str,
        max_results: int = 50,
        since_days: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        pass


class ForumScoutClient(ABC):
    """
    Social listening over LinkedIn.

    Each returned post dict carries ``id``, ``url``, ``text``,
    ``author_name``, ``created_at`` and optionally ``author_url``,
    ``author_headline``, ``likes``, ``comments``, ``shares``, ``hashtags``.
    """

    @abstractmethod
    async def search_linkedin(
        self,
        keywords: List[str],
        max_results: int = 50,
        time_filter: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        pass


# ============================================================================
# Platform services
# ============================================================================

class NotificationService(ABC):
    """Sends user-facing notifications."""

    @abstractmethod
    async def send(
        self,
        user_id: str,
        title: str,
        message: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> None:
        pass


# Human-readable names used in "not configured" errors
SERVICE_DISPLAY_NAMES = {
    "openai": "OpenAI",
    "apollo": "Apollo",
    "dataforseo": "DataForSEO",
    "twitter": "Twitter",
    "forum_scout": "ForumScout",
    "notifications": "Notification",
}


@dataclass
class NodeServices:
    """
    Optional-capability map of external services.

    Example:
        services = NodeServices(apollo=MyApolloClient())
        if services.has("notifications"):
            ...
        apollo = services.require("apollo")
    """
    openai: Optional[OpenAIClient] = None
    apollo: Optional[ApolloClient] = None
    dataforseo: Optional[DataForSeoClient] = None
    twitter: Optional[TwitterClient] = None
    forum_scout: Optional[ForumScoutClient] = None
    notifications: Optional[NotificationService] = None

    def has(self, name: str) -> bool:
        """Whether the named service is present."""
        return getattr(self, name, None) is not None

    def require(self, name: str) -> Any:
        """
        Get the named service.

        Raises:
            ServiceNotConfiguredError: If the service is absent
        """
        service = getattr(self, name, None)
        if service is None:
            raise ServiceNotConfiguredError(name, SERVICE_DISPLAY_NAMES.get(name))
        return service

    def available(self) -> List[str]:
        """Names of the services that are present."""
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]
