"""
LinkedIn Monitor Node

Searches LinkedIn for posts matching keywords through ForumScout.
Requires ``context.services.forum_scout``.
"""

import logging
import re
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel

from ...core.execution import error_message
from ...core.services import ServiceNotConfiguredError
from ...core.types import (
    NodeCategory,
    NodeExecutionContext,
    NodeExecutionResult,
    define_node,
)

logger = logging.getLogger(__name__)

HASHTAG_PATTERN = re.compile(r"#(\w+)")


class LinkedInMonitorInput(BaseModel):
    keywords: List[str]
    time_filter: Optional[str] = None
    max_results: int = 50


class LinkedInEngagement(BaseModel):
    likes: int
    comments: int
    shares: int


class LinkedInPost(BaseModel):
    id: str
    platform: Literal["linkedin"]
    url: str
    text: str
    author_name: str
    author_handle: str
    author_url: str
    author_followers: int
    author_headline: Optional[str] = None
    engagement: LinkedInEngagement
    hashtags: List[str]
    posted_at: str


class LinkedInMonitorOutput(BaseModel):
    posts: List[LinkedInPost]
    total_found: int


def extract_hashtags(text: str) -> List[str]:
    """Hashtags in ``text``, without the leading ``#``."""
    return HASHTAG_PATTERN.findall(text or "")


def extract_handle(url: Optional[str]) -> str:
    """
    Profile handle from a LinkedIn URL.

    Looks for the segment after ``/in/`` or ``/company/``, falling back to
    the last path segment. Query strings are dropped.
    """
    if not url:
        return "unknown"
    parts = url.split("/")
    for marker in ("in", "company"):
        if marker in parts:
            index = parts.index(marker)
            if index + 1 < len(parts) and parts[index + 1]:
                return parts[index + 1].split("?")[0]
    return parts[-1].split("?")[0] or "unknown"


def _to_post(post: Dict[str, Any]) -> Dict[str, Any]:
    hashtags = post.get("hashtags")
    return {
        "id": post["id"],
        "platform": "linkedin",
        "url": post["url"],
        "text": post["text"],
        "author_name": post["author_name"],
        "author_handle": extract_handle(post.get("author_url")),
        "author_url": post.get("author_url") or "",
        # ForumScout has no follower count; likes stand in for reach
        "author_followers": post.get("likes") or 0,
        "author_headline": post.get("author_headline"),
        "engagement": {
            "likes": post.get("likes") or 0,
            "comments": post.get("comments") or 0,
            "shares": post.get("shares") or 0,
        },
        "hashtags": hashtags if hashtags is not None else extract_hashtags(post["text"]),
        "posted_at": post["created_at"],
    }


async def _execute(input: Dict[str, Any], context: NodeExecutionContext) -> NodeExecutionResult:
    try:
        keywords = [k.strip() for k in input.get("keywords") or [] if k.strip()]
        if not keywords:
            return NodeExecutionResult.fail("No valid keywords provided")

        forum_scout = context.services.require("forum_scout")

        results = await forum_scout.search_linkedin(
            keywords,
            max_results=input.get("max_results") or 50,
            time_filter=input.get("time_filter"),
        )
        posts = [_to_post(p) for p in results]

        if context.services.has("notifications") and posts:
            await context.services.notifications.send(
                user_id=context.user_id,
                title="LinkedIn Monitor Complete",
                message=f"Found {len(posts)} LinkedIn posts",
                data={"posts": posts[:5]},
            )

        return NodeExecutionResult.ok({"posts": posts, "total_found": len(posts)})

    except ServiceNotConfiguredError as e:
        return NodeExecutionResult.fail(str(e))
    except Exception as e:
        logger.exception(f"[linkedin_monitor] Error: {e}")
        return NodeExecutionResult.fail(error_message(e))


linkedin_monitor_node = define_node(
    type="linkedin_monitor",
    name="LinkedIn Monitor",
    description="Search LinkedIn for posts matching keywords using ForumScout",
    category=NodeCategory.INTEGRATION,
    input_shape=LinkedInMonitorInput,
    output_shape=LinkedInMonitorOutput,
    executor=_execute,
    capabilities={"supports_rerun": True},
    estimated_duration=60,
)
