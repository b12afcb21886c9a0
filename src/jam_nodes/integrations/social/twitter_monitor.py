"""
Twitter Monitor Node

Searches Twitter/X for posts matching keywords and returns them in the
unified social post format. Requires ``context.services.twitter``.
"""

import logging
from datetime import datetime, timedelta, timezone
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


class TwitterMonitorInput(BaseModel):
    keywords: List[str]
    exclude_retweets: bool = True
    min_likes: Optional[int] = None
    max_results: int = 50
    lang: Optional[str] = None  # e.g. "en"
    since_days: Optional[int] = None


class TwitterEngagement(BaseModel):
    likes: int
    comments: int
    shares: int
    views: int


class TwitterPost(BaseModel):
    id: str
    platform: Literal["twitter"]
    url: str
    text: str
    author_name: str
    author_handle: str
    author_url: str
    author_followers: int
    engagement: TwitterEngagement
    posted_at: str


class TwitterMonitorOutput(BaseModel):
    posts: List[TwitterPost]
    total_found: int
    has_more: bool
    cursor: Optional[str] = None


def build_search_query(
    keywords: List[str],
    exclude_retweets: bool = False,
    min_likes: Optional[int] = None,
    since: Optional[str] = None,
    lang: Optional[str] = None,
) -> str:
    """
    Build a Twitter search query.

    Keywords are OR-ed together; multi-word keywords are quoted.

    Example:
        >>> build_search_query(["ai agents", "llm"], exclude_retweets=True)
        '("ai agents" OR llm) -is:retweet'
    """
    terms = " OR ".join(f'"{k}"' if " " in k else k for k in keywords)
    query = f"({terms})"
    if exclude_retweets:
        query += " -is:retweet"
    if min_likes:
        query += f" min_faves:{min_likes}"
    if since:
        query += f" since:{since}"
    if lang:
        query += f" lang:{lang}"
    return query


def _to_post(tweet: Dict[str, Any]) -> Dict[str, Any]:
    handle = tweet["author_handle"]
    return {
        "id": tweet["id"],
        "platform": "twitter",
        "url": tweet["url"],
        "text": tweet["text"],
        "author_name": tweet["author_name"],
        "author_handle": handle,
        "author_url": f"https://twitter.com/{handle}",
        "author_followers": tweet.get("author_followers") or 0,
        "engagement": {
            "likes": tweet.get("likes") or 0,
            "comments": tweet.get("replies") or 0,
            "shares": tweet.get("retweets") or 0,
            "views": tweet.get("views") or 0,
        },
        "posted_at": tweet["created_at"],
    }


async def _execute(input: Dict[str, Any], context: NodeExecutionContext) -> NodeExecutionResult:
    try:
        keywords = input.get("keywords") or []
        if not keywords:
            return NodeExecutionResult.fail("No keywords provided for Twitter search")

        twitter = context.services.require("twitter")

        since_days = input.get("since_days")
        since = None
        if since_days:
            since = (datetime.now(timezone.utc) - timedelta(days=since_days)).date().isoformat()

        query = build_search_query(
            keywords,
            exclude_retweets=input.get("exclude_retweets", True),
            min_likes=input.get("min_likes"),
            since=since,
            lang=input.get("lang"),
        )
        logger.info(f"[twitter_monitor] Searching: {query}")

        tweets = await twitter.search_tweets(
            query,
            max_results=input.get("max_results") or 50,
            since_days=since_days,
        )
        posts = [_to_post(t) for t in tweets]

        if context.services.has("notifications") and posts:
            await context.services.notifications.send(
                user_id=context.user_id,
                title="Twitter Monitor Complete",
                message=f"Found {len(posts)} tweets",
                data={"posts": posts[:5]},
            )

        # Pagination is left to the service
        return NodeExecutionResult.ok({
            "posts": posts,
            "total_found": len(posts),
            "has_more": False,
        })

    except ServiceNotConfiguredError as e:
        return NodeExecutionResult.fail(str(e))
    except Exception as e:
        logger.exception(f"[twitter_monitor] Error: {e}")
        return NodeExecutionResult.fail(error_message(e))


twitter_monitor_node = define_node(
    type="twitter_monitor",
    name="Twitter Monitor",
    description="Search Twitter/X for posts matching keywords",
    category=NodeCategory.INTEGRATION,
    input_shape=TwitterMonitorInput,
    output_shape=TwitterMonitorOutput,
    executor=_execute,
    capabilities={"supports_rerun": True},
    estimated_duration=15,
)
