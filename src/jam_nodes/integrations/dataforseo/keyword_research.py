"""
SEO Keyword Research Node

Enriches seed keywords with search volume, difficulty, CPC and intent
from DataForSEO. Requires ``context.services.dataforseo``.
"""

import logging
from typing import Any, Dict, List, Literal

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

SearchIntent = Literal["informational", "commercial", "navigational", "transactional"]


class SeoKeywordResearchInput(BaseModel):
    seed_keywords: List[str]
    location_code: int = 2840  # US
    language_code: str = "en"
    limit: int = 30  # per seed


class ResearchedKeyword(BaseModel):
    keyword: str
    search_volume: int
    keyword_difficulty: float
    cpc: str
    search_intent: SearchIntent


class SeoKeywordResearchOutput(BaseModel):
    keywords: List[ResearchedKeyword]
    total_researched: int


async def _execute(input: Dict[str, Any], context: NodeExecutionContext) -> NodeExecutionResult:
    try:
        dataforseo = context.services.require("dataforseo")

        researched = []
        seen = set()

        for seed in input.get("seed_keywords") or []:
            if not seed.strip():
                continue
            try:
                results = await dataforseo.get_related_keywords(
                    [seed],
                    location_code=input.get("location_code") or 2840,
                    language_code=input.get("language_code") or "en",
                    limit=input.get("limit") or 30,
                )
            except Exception as e:
                # Other seeds may still succeed
                logger.warning(f"[seo_keyword_research] Error researching {seed!r}: {e}")
                continue

            for kw in results:
                key = kw["keyword"].lower()
                if key in seen:
                    continue
                seen.add(key)
                researched.append({
                    "keyword": kw["keyword"],
                    "search_volume": kw["search_volume"],
                    "keyword_difficulty": kw["keyword_difficulty"],
                    "cpc": str(kw["cpc"]),
                    "search_intent": kw["search_intent"],
                })

        researched.sort(key=lambda k: k["search_volume"], reverse=True)

        return NodeExecutionResult.ok({
            "keywords": researched,
            "total_researched": len(researched),
        })

    except ServiceNotConfiguredError as e:
        return NodeExecutionResult.fail(str(e))
    except Exception as e:
        logger.exception(f"[seo_keyword_research] Error: {e}")
        return NodeExecutionResult.fail(error_message(e))


seo_keyword_research_node = define_node(
    type="seo_keyword_research",
    name="Keyword Research",
    description="Research keywords to get search volume, difficulty, and intent data",
    category=NodeCategory.INTEGRATION,
    input_shape=SeoKeywordResearchInput,
    output_shape=SeoKeywordResearchOutput,
    executor=_execute,
    capabilities={"supports_rerun": True},
    estimated_duration=10,
)
