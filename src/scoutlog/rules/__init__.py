"""Classification and aggregation rules.

Re-exports the keyword rule tables, the success classifier and the
metric aggregator so downstream code can import everything from
:mod:`scoutlog.rules`.
"""

from scoutlog.rules.classify import (
    NEGATIVE_KEYWORDS,
    POSITIVE_KEYWORDS,
    KeywordRule,
    classify_success,
    classify_text,
)
from scoutlog.rules.metrics import (
    CATEGORY_RULES,
    JSON_PROFILE,
    XML_PROFILE,
    AggregationProfile,
    Category,
    Observation,
    StatsAccumulator,
    aggregate,
    categorize,
)

__all__ = [
    "CATEGORY_RULES",
    "JSON_PROFILE",
    "NEGATIVE_KEYWORDS",
    "POSITIVE_KEYWORDS",
    "XML_PROFILE",
    "AggregationProfile",
    "Category",
    "KeywordRule",
    "Observation",
    "StatsAccumulator",
    "aggregate",
    "categorize",
    "classify_success",
    "classify_text",
]
