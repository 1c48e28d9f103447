"""Keyword rules and the success classifier.

Success is decided in a strict priority order:

1. ``isFailure is True`` -> unsuccessful, overriding everything else.
2. ``isSuccess is True`` -> successful.
3. Keyword inspection of the lowercase action text. Negative keywords
   are checked first and are authoritative, so ``"inaccurate"`` never
   satisfies the positive ``"accurate"`` and ``"unsuccessful"`` never
   satisfies ``"successful"``.
4. No keyword at all -> unsuccessful.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scoutlog.ingest.schemas import RecordFlags


@dataclass(frozen=True, slots=True)
class KeywordRule:
    """A substring rule over one or more lowercase action texts.

    Attributes:
        keywords: The rule fires when any text contains one of these.
        excludes: The rule never fires when any text contains one of
            these, whatever the keywords say.
    """

    keywords: tuple[str, ...]
    excludes: tuple[str, ...] = ()

    def matches(self, texts: Iterable[str]) -> bool:
        """Apply the rule to lowercase *texts*.

        Args:
            texts: Lowercase action strings (a single event or the
                union of a timestamp group).

        Returns:
            ``True`` if a keyword is present and no exclusion is.
        """
        texts = tuple(texts)
        if any(ex in t for t in texts for ex in self.excludes):
            return False
        return any(kw in t for t in texts for kw in self.keywords)


NEGATIVE_KEYWORDS: tuple[str, ...] = (
    "inaccurate",
    "incomplete",
    "unsuccessful",
    "lost",
    "mistake",
    "miss",
    "error",
)

POSITIVE_KEYWORDS: tuple[str, ...] = (
    "accurate",
    "complete",
    "won",
    "goal",
    "successful",
    "recovery",
)

FAILURE_RULE = KeywordRule(keywords=NEGATIVE_KEYWORDS)
SUCCESS_RULE = KeywordRule(keywords=POSITIVE_KEYWORDS)


def classify_text(action: str) -> bool:
    """Classify an action label by keywords alone.

    Args:
        action: Action label in any case.

    Returns:
        ``True`` if the label reads as a successful action.
    """
    lower = (action.lower(),)
    if FAILURE_RULE.matches(lower):
        return False
    return SUCCESS_RULE.matches(lower)


def classify_success(action: str, flags: RecordFlags) -> bool:
    """Decide whether a single record succeeded.

    Args:
        action: Resolved action label.
        flags: Explicit boolean hints carried by the record.

    Returns:
        ``True`` if the record is classified as successful.
    """
    if flags.is_failure is True:
        return False
    if flags.is_success is True:
        return True
    return classify_text(action)
