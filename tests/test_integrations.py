"""Tests for adapter nodes with mock services."""

import pytest

from jam_nodes.core import (
    ApolloClient,
    DataForSeoClient,
    ForumScoutClient,
    NodeExecutionContext,
    NodeServices,
    NotificationService,
    OpenAIClient,
    TwitterClient,
    execute_node,
)
from jam_nodes.integrations import (
    linkedin_monitor_node,
    search_contacts_node,
    seo_keyword_research_node,
    sora_video_node,
    twitter_monitor_node,
)
from jam_nodes.integrations.social import (
    build_search_query,
    extract_handle,
    extract_hashtags,
)
from jam_nodes.logic import create_retry_node


# ============================================================================
# Mock Services
# ============================================================================

class MockApollo(ApolloClient):
    """Mock Apollo client."""

    def __init__(self, found=None, enriched=None, fail_search=False):
        self.found = found or []
        self.enriched = enriched or {}
        self.fail_search = fail_search
        self.criteria = None

    async def search_contacts(self, criteria):
        self.criteria = criteria
        if self.fail_search:
            raise ConnectionError("Apollo unavailable")
        return self.found

    async def enrich_contact(self, contact_id):
        data = self.enriched[contact_id]
        if isinstance(data, Exception):
            raise data
        return data


class MockDataForSeo(DataForSeoClient):
    """Mock DataForSEO client keyed by seed keyword."""

    def __init__(self, results):
        self.results = results
        self.calls = []

    async def get_related_keywords(self, keywords, location_code=2840, language_code="en", limit=30):
        self.calls.append((keywords, location_code, language_code, limit))
        data = self.results[keywords[0]]
        if isinstance(data, Exception):
            raise data
        return data


class MockNotifications(NotificationService):
    def __init__(self):
        self.sent = []

    async def send(self, user_id, title, message, data=None):
        self.sent.append({"user_id": user_id, "title": title, "message": message, "data": data})


class MockTwitter(TwitterClient):
    def __init__(self, tweets=None, error=None):
        self.tweets = tweets or []
        self.error = error
        self.calls = []

    async def search_tweets(self, query, max_results=50, since_days=None):
        self.calls.append((query, max_results, since_days))
        if self.error:
            raise self.error
        return self.tweets


class MockForumScout(ForumScoutClient):
    def __init__(self, posts=None):
        self.posts = posts or []
        self.calls = []

    async def search_linkedin(self, keywords, max_results=50, time_filter=None):
        self.calls.append((keywords, max_results, time_filter))
        return self.posts


class MockOpenAI(OpenAIClient):
    def __init__(self, error=None):
        self.error = error
        self.requests = []

    async def generate_video(self, prompt, model="sora-2", seconds=4, size="1280x720"):
        self.requests.append({"prompt": prompt, "model": model, "seconds": seconds, "size": size})
        if self.error:
            raise self.error
        return {"url": "https://cdn.example.com/v.mp4", "duration_seconds": seconds}


def make_context(**services):
    return NodeExecutionContext(user_id="user-1", services=NodeServices(**services))


def keyword(name, volume, intent="informational"):
    return {
        "keyword": name,
        "search_volume": volume,
        "keyword_difficulty": 40,
        "cpc": 1.25,
        "search_intent": intent,
    }


# ============================================================================
# Search Contacts
# ============================================================================

class TestSearchContactsNode:
    """Tests for search_contacts_node."""

    @pytest.mark.asyncio
    async def test_missing_service(self):
        result = await search_contacts_node.executor({"keywords": "crm"}, make_context())
        assert result.success is False
        assert result.error == (
            "Apollo service not configured. Please provide context.services.apollo."
        )

    @pytest.mark.asyncio
    async def test_enriches_and_filters(self):
        apollo = MockApollo(
            found=[{"id": "1"}, {"id": "2"}, {"id": "3"}, {"name": "no id"}],
            enriched={
                "1": {"id": "1", "name": "Ada Lovelace", "email": "ada@example.com", "title": "CTO"},
                "2": {"id": "2", "name": "No Email"},
                "3": RuntimeError("enrichment failed"),
            },
        )
        result = await search_contacts_node.executor(
            {"person_titles": ["CTO"], "limit": 500}, make_context(apollo=apollo)
        )

        assert result.success
        assert result.output["total_found"] == 4
        assert result.output["contacts"] == [{
            "id": "1",
            "name": "Ada Lovelace",
            "first_name": None,
            "last_name": None,
            "email": "ada@example.com",
            "title": "CTO",
            "company": "Unknown",
            "linkedin_url": None,
            "location": None,
        }]
        assert apollo.criteria == {"person_titles": ["CTO"], "limit": 100}
        assert search_contacts_node.output_shape.accepts(result.output)

    @pytest.mark.asyncio
    async def test_no_results(self):
        result = await search_contacts_node.executor({}, make_context(apollo=MockApollo()))
        assert result.output == {"contacts": [], "total_found": 0}

    @pytest.mark.asyncio
    async def test_search_error_is_failure(self):
        result = await search_contacts_node.executor(
            {}, make_context(apollo=MockApollo(fail_search=True))
        )
        assert result.success is False
        assert result.error == "Apollo unavailable"

    @pytest.mark.asyncio
    async def test_notification_sent_when_available(self):
        apollo = MockApollo(
            found=[{"id": "1"}],
            enriched={"1": {"id": "1", "name": "Ada", "email": "ada@example.com", "company": "Acme"}},
        )
        notifications = MockNotifications()
        await search_contacts_node.executor(
            {}, make_context(apollo=apollo, notifications=notifications)
        )
        assert notifications.sent[0]["user_id"] == "user-1"
        assert notifications.sent[0]["data"] == {"total_found": 1, "with_email": 1}

    @pytest.mark.asyncio
    async def test_no_notification_without_contacts(self):
        apollo = MockApollo(found=[{"id": "1"}], enriched={"1": {"id": "1", "name": "No Email"}})
        notifications = MockNotifications()
        result = await search_contacts_node.executor(
            {}, make_context(apollo=apollo, notifications=notifications)
        )
        assert result.output["contacts"] == []
        assert notifications.sent == []

    @pytest.mark.asyncio
    async def test_retry_wrapped_search_recovers(self):
        class FlakyApollo(MockApollo):
            def __init__(self):
                super().__init__(found=[{"id": "1"}], enriched={
                    "1": {"id": "1", "name": "Ada", "email": "ada@example.com"},
                })
                self.searches = 0

            async def search_contacts(self, criteria):
                self.searches += 1
                if self.searches == 1:
                    raise TimeoutError("timed out")
                return await super().search_contacts(criteria)

        async def no_wait(seconds):
            pass

        node = create_retry_node(search_contacts_node, sleep=no_wait)
        result = await execute_node(
            node, {"keywords": "crm", "max_retries": 2}, make_context(apollo=FlakyApollo())
        )

        assert result.success
        assert result.output["retries_attempted"] == 1
        assert result.output["contacts"][0]["email"] == "ada@example.com"


# ============================================================================
# SEO Keyword Research
# ============================================================================

class TestSeoKeywordResearchNode:
    """Tests for seo_keyword_research_node."""

    @pytest.mark.asyncio
    async def test_missing_service(self):
        result = await seo_keyword_research_node.executor(
            {"seed_keywords": ["crm"]}, make_context()
        )
        assert result.success is False
        assert "DataForSEO service not configured" in result.error

    @pytest.mark.asyncio
    async def test_dedupes_sorts_and_skips_failures(self):
        dataforseo = MockDataForSeo({
            "crm": [keyword("CRM software", 500, "commercial"), keyword("crm", 900)],
            "sales": [keyword("crm software", 100), keyword("sales pipeline", 700)],
            "broken": RuntimeError("quota exceeded"),
        })
        result = await seo_keyword_research_node.executor(
            {"seed_keywords": ["crm", "  ", "broken", "sales"]},
            make_context(dataforseo=dataforseo),
        )

        assert result.success
        names = [k["keyword"] for k in result.output["keywords"]]
        assert names == ["crm", "sales pipeline", "CRM software"]
        assert result.output["total_researched"] == 3
        assert result.output["keywords"][0]["cpc"] == "1.25"
        assert len(dataforseo.calls) == 3
        assert dataforseo.calls[0] == (["crm"], 2840, "en", 30)
        assert seo_keyword_research_node.output_shape.accepts(result.output)

    @pytest.mark.asyncio
    async def test_custom_location_and_limit(self):
        dataforseo = MockDataForSeo({"crm": []})
        await execute_node(
            seo_keyword_research_node,
            {"seed_keywords": ["crm"], "location_code": 2826, "language_code": "de", "limit": 5},
            make_context(dataforseo=dataforseo),
        )
        assert dataforseo.calls == [(["crm"], 2826, "de", 5)]


# ============================================================================
# Twitter Monitor
# ============================================================================

def tweet(id="t1", **overrides):
    data = {
        "id": id,
        "url": f"https://twitter.com/ada/status/{id}",
        "text": "Shipping retries today",
        "author_name": "Ada",
        "author_handle": "ada",
        "author_followers": 1200,
        "likes": 10,
        "replies": 2,
        "retweets": 3,
        "created_at": "2026-01-05T10:00:00Z",
    }
    data.update(overrides)
    return data


class TestBuildSearchQuery:
    def test_keywords_only(self):
        assert build_search_query(["python", "async io"]) == '(python OR "async io")'

    def test_all_filters(self):
        query = build_search_query(
            ["llm"], exclude_retweets=True, min_likes=5, since="2026-01-01", lang="en"
        )
        assert query == "(llm) -is:retweet min_faves:5 since:2026-01-01 lang:en"


class TestTwitterMonitorNode:
    """Tests for twitter_monitor_node."""

    @pytest.mark.asyncio
    async def test_no_keywords(self):
        result = await twitter_monitor_node.executor({"keywords": []}, make_context())
        assert result.error == "No keywords provided for Twitter search"

    @pytest.mark.asyncio
    async def test_missing_service(self):
        result = await twitter_monitor_node.executor({"keywords": ["llm"]}, make_context())
        assert result.error == (
            "Twitter service not configured. Please provide context.services.twitter."
        )

    @pytest.mark.asyncio
    async def test_posts_in_unified_format(self):
        twitter = MockTwitter([tweet(), tweet("t2", views=99)])
        result = await execute_node(
            twitter_monitor_node,
            {"keywords": ["llm"], "max_results": 10},
            make_context(twitter=twitter),
        )

        assert result.success
        assert result.output["total_found"] == 2
        assert result.output["has_more"] is False
        first = result.output["posts"][0]
        assert first["platform"] == "twitter"
        assert first["author_url"] == "https://twitter.com/ada"
        assert first["engagement"] == {"likes": 10, "comments": 2, "shares": 3, "views": 0}
        assert result.output["posts"][1]["engagement"]["views"] == 99
        assert twitter.calls == [("(llm) -is:retweet", 10, None)]

    @pytest.mark.asyncio
    async def test_since_days_adds_date_filter(self):
        twitter = MockTwitter()
        await twitter_monitor_node.executor(
            {"keywords": ["llm"], "since_days": 7, "exclude_retweets": False},
            make_context(twitter=twitter),
        )
        query, _, since_days = twitter.calls[0]
        assert " since:" in query
        assert "-is:retweet" not in query
        assert since_days == 7

    @pytest.mark.asyncio
    async def test_notification_only_with_results(self):
        notifications = MockNotifications()
        await twitter_monitor_node.executor(
            {"keywords": ["llm"]},
            make_context(twitter=MockTwitter(), notifications=notifications),
        )
        assert notifications.sent == []

        tweets = [tweet(f"t{i}") for i in range(7)]
        await twitter_monitor_node.executor(
            {"keywords": ["llm"]},
            make_context(twitter=MockTwitter(tweets), notifications=notifications),
        )
        assert notifications.sent[0]["title"] == "Twitter Monitor Complete"
        assert notifications.sent[0]["message"] == "Found 7 tweets"
        assert len(notifications.sent[0]["data"]["posts"]) == 5

    @pytest.mark.asyncio
    async def test_service_error_is_failure(self):
        result = await twitter_monitor_node.executor(
            {"keywords": ["llm"]},
            make_context(twitter=MockTwitter(error=ConnectionError("rate limited"))),
        )
        assert result.success is False
        assert result.error == "rate limited"


# ============================================================================
# LinkedIn Monitor
# ============================================================================

class TestLinkedInHelpers:
    @pytest.mark.parametrize("url,expected", [
        ("https://www.linkedin.com/in/ada-lovelace?trk=feed", "ada-lovelace"),
        ("https://www.linkedin.com/company/acme/", "acme"),
        ("https://example.com/profiles/ada", "ada"),
        (None, "unknown"),
        ("", "unknown"),
    ])
    def test_extract_handle(self, url, expected):
        assert extract_handle(url) == expected

    def test_extract_hashtags(self):
        assert extract_hashtags("Hiring #python and #AsyncIO devs") == ["python", "AsyncIO"]
        assert extract_hashtags("no tags") == []


class TestLinkedInMonitorNode:
    """Tests for linkedin_monitor_node."""

    @pytest.mark.asyncio
    async def test_blank_keywords(self):
        result = await linkedin_monitor_node.executor(
            {"keywords": ["  ", ""]}, make_context(forum_scout=MockForumScout())
        )
        assert result.error == "No valid keywords provided"

    @pytest.mark.asyncio
    async def test_missing_service(self):
        result = await linkedin_monitor_node.executor({"keywords": ["hiring"]}, make_context())
        assert result.error == (
            "ForumScout service not configured. Please provide context.services.forum_scout."
        )

    @pytest.mark.asyncio
    async def test_posts_in_unified_format(self):
        forum_scout = MockForumScout([
            {
                "id": "p1",
                "url": "https://www.linkedin.com/posts/p1",
                "text": "We are #hiring",
                "author_name": "Ada",
                "author_url": "https://www.linkedin.com/in/ada",
                "likes": 12,
                "created_at": "2026-01-05",
            },
            {
                "id": "p2",
                "url": "https://www.linkedin.com/posts/p2",
                "text": "#ignored",
                "author_name": "Acme",
                "hashtags": ["remote"],
                "comments": 4,
                "created_at": "2026-01-06",
            },
        ])
        notifications = MockNotifications()
        result = await execute_node(
            linkedin_monitor_node,
            {"keywords": [" hiring ", "remote"], "time_filter": "past-week"},
            make_context(forum_scout=forum_scout, notifications=notifications),
        )

        assert result.success
        assert forum_scout.calls == [(["hiring", "remote"], 50, "past-week")]
        first, second = result.output["posts"]
        assert first["author_handle"] == "ada"
        assert first["author_followers"] == 12
        assert first["hashtags"] == ["hiring"]
        assert second["author_handle"] == "unknown"
        assert second["author_url"] == ""
        assert second["hashtags"] == ["remote"]
        assert second["engagement"] == {"likes": 0, "comments": 4, "shares": 0}
        assert result.output["total_found"] == 2
        assert notifications.sent[0]["message"] == "Found 2 LinkedIn posts"

    @pytest.mark.asyncio
    async def test_no_notification_without_posts(self):
        notifications = MockNotifications()
        result = await linkedin_monitor_node.executor(
            {"keywords": ["hiring"]},
            make_context(forum_scout=MockForumScout(), notifications=notifications),
        )
        assert result.output == {"posts": [], "total_found": 0}
        assert notifications.sent == []


# ============================================================================
# Sora Video
# ============================================================================

class TestSoraVideoNode:
    """Tests for sora_video_node."""

    @pytest.mark.asyncio
    async def test_missing_service(self):
        result = await sora_video_node.executor({"prompt": "waves"}, make_context())
        assert result.error == (
            "OpenAI service not configured. Please provide context.services.openai."
        )

    @pytest.mark.asyncio
    async def test_defaults_applied(self):
        openai = MockOpenAI()
        result = await execute_node(
            sora_video_node, {"prompt": "waves at sunset"}, make_context(openai=openai)
        )

        assert result.success
        assert openai.requests == [
            {"prompt": "waves at sunset", "model": "sora-2", "seconds": 4, "size": "1280x720"}
        ]
        assert result.output["video"] == {
            "url": "https://cdn.example.com/v.mp4",
            "duration_seconds": 4,
            "size": "1280x720",
            "model": "sora-2",
        }
        assert result.output["processing_time_seconds"] == 0

    @pytest.mark.asyncio
    async def test_unsupported_duration_rejected(self):
        result = await execute_node(
            sora_video_node, {"prompt": "waves", "seconds": 5}, make_context(openai=MockOpenAI())
        )
        assert result.success is False
        assert result.error.startswith("Invalid input: ")

    @pytest.mark.asyncio
    async def test_generation_error_is_failure(self):
        result = await sora_video_node.executor(
            {"prompt": "waves"},
            make_context(openai=MockOpenAI(error=RuntimeError("content policy"))),
        )
        assert result.success is False
        assert result.error == "content policy"
