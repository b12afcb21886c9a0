from .keyword_research import (
    ResearchedKeyword,
    SeoKeywordResearchInput,
    SeoKeywordResearchOutput,
    seo_keyword_research_node,
)

__all__ = [
    "ResearchedKeyword",
    "SeoKeywordResearchInput",
    "SeoKeywordResearchOutput",
    "seo_keyword_research_node",
]
