import logging
import re
from dataclasses import dataclass

from pitch_craft.pipeline.catalog import (
    COMPETITOR_COUNT,
    COMPETITOR_SUGGESTIONS,
    DEFAULT_INDUSTRY,
    INDUSTRY_KEYWORDS,
)
from pitch_craft.pipeline.records import StartupData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndustryMatch:
    industry: str
    keyword: str | None = None
    embedded: bool = False

    def as_meta(self) -> dict:
        return {
            "industry": self.industry,
            "keyword": self.keyword,
            "embedded": self.embedded,
        }


def match_industry(data: StartupData) -> IndustryMatch:
    """Find the first industry whose keywords appear anywhere in the input.

    Matching is a case-insensitive substring test over the name and every
    bullet, so short keywords such as "ai" also match inside longer words.
    ``embedded`` marks a hit where the keyword never occurs as a whole word.
    """
    haystack = " ".join(data.all_text()).lower()
    for industry, keywords in INDUSTRY_KEYWORDS.items():
        matched = next((keyword for keyword in keywords if keyword in haystack), None)
        if matched is not None:
            embedded = re.search(rf"\b{re.escape(matched)}\b", haystack) is None
            logger.info("industry.detected tag=%s keyword=%s embedded=%s", industry, matched, embedded)
            return IndustryMatch(industry=industry, keyword=matched, embedded=embedded)
    logger.info("industry.default tag=%s", DEFAULT_INDUSTRY)
    return IndustryMatch(industry=DEFAULT_INDUSTRY)


def detect_industry(data: StartupData) -> str:
    return match_industry(data).industry


def select_competitors(industry: str) -> list[str]:
    suggestions = COMPETITOR_SUGGESTIONS.get(industry) or COMPETITOR_SUGGESTIONS[DEFAULT_INDUSTRY]
    return list(suggestions[:COMPETITOR_COUNT])
