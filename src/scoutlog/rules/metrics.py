"""Metric aggregation over normalized observations.

Each observation (one event on the JSON path, one timestamp group on
the XML path) is tested against every category rule independently, so
a single observation can increment several counters. Derived fields
are computed once in :meth:`StatsAccumulator.finalize`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from scoutlog.ingest.schemas import NO_FLAGS, PlayerStats, RecordFlags
from scoutlog.rules.classify import KeywordRule

if TYPE_CHECKING:
    from collections.abc import Iterable


class Category(str, Enum):
    """Statistical categories an observation can fall into."""

    PASS = "pass"
    SHOT = "shot"
    GOAL = "goal"
    ON_TARGET = "on_target"
    DUEL = "duel"
    ASSIST = "assist"
    KEY_PASS = "key_pass"
    TACKLE = "tackle"
    INTERCEPTION = "interception"
    CHANCE_CREATED = "chance_created"
    BIG_CHANCE = "big_chance"
    ERROR = "error"
    DRIBBLE = "dribble"


CATEGORY_RULES: dict[Category, KeywordRule] = {
    Category.PASS: KeywordRule(("pass", "cross", "long ball")),
    Category.SHOT: KeywordRule(
        ("shot", "goal"),
        excludes=("own goal", "goal kick", "shot assist"),
    ),
    Category.GOAL: KeywordRule(("goal",), excludes=("own goal", "goal kick")),
    Category.ON_TARGET: KeywordRule(("target",), excludes=("off target",)),
    Category.DUEL: KeywordRule(
        ("duel", "challenge", "dribble", "drible", "take on", "tackle")
    ),
    Category.ASSIST: KeywordRule(("assist",), excludes=("shot assist",)),
    Category.KEY_PASS: KeywordRule(("key pass", "decisivo", "shot assist")),
    Category.TACKLE: KeywordRule(("tackle", "desarme")),
    Category.INTERCEPTION: KeywordRule(("interception", "recovery")),
    Category.CHANCE_CREATED: KeywordRule(("chance created", "chance criada")),
    Category.BIG_CHANCE: KeywordRule(("big chance", "chance clara", "high value")),
    Category.ERROR: KeywordRule(("mistake", "error", "lost ball", "perda de posse")),
    Category.DRIBBLE: KeywordRule(("dribble", "drible", "take on")),
}


@dataclass(frozen=True, slots=True)
class Observation:
    """The unit folded into the statistics.

    Attributes:
        texts: Lowercase action strings (one, or a group's union).
        success: Whether the observation is classified successful.
        flags: Explicit boolean hints (only present on single records).
    """

    texts: tuple[str, ...]
    success: bool
    flags: RecordFlags = NO_FLAGS


@dataclass(frozen=True, slots=True)
class AggregationProfile:
    """Per-path aggregation differences.

    Attributes:
        count_extras: Count ``errors``/``dribbles``/``dribbles_won``.
        independent_chances: Use the big-chance counter for ``chances``
            instead of deriving ``goals + shots``.
    """

    count_extras: bool
    independent_chances: bool


JSON_PROFILE = AggregationProfile(count_extras=True, independent_chances=False)
XML_PROFILE = AggregationProfile(count_extras=False, independent_chances=True)


def categorize(observation: Observation) -> frozenset[Category]:
    """Return every category *observation* belongs to.

    Explicit flags take part here: a boolean ``isPass`` replaces the
    pass keywords, and ``isShot is True`` adds the shot category.
    """
    texts = observation.texts
    found = {cat for cat, rule in CATEGORY_RULES.items() if rule.matches(texts)}

    is_pass = observation.flags.is_pass
    if is_pass is True:
        found.add(Category.PASS)
    elif is_pass is False:
        found.discard(Category.PASS)

    if observation.flags.is_shot is True:
        found.add(Category.SHOT)

    return frozenset(found)


class StatsAccumulator:
    """Running counters for one parse invocation.

    Example::

        acc = StatsAccumulator(JSON_PROFILE)
        for obs in observations:
            acc.add(obs)
        stats = acc.finalize(rating=6.0)
    """

    __slots__ = (
        "_assists",
        "_big_chances",
        "_chances_created",
        "_dribbles",
        "_dribbles_won",
        "_duels",
        "_duels_won",
        "_errors",
        "_goals",
        "_interceptions",
        "_key_passes",
        "_passes",
        "_passes_accurate",
        "_profile",
        "_shots",
        "_shots_on_target",
        "_tackles",
    )

    def __init__(self, profile: AggregationProfile) -> None:
        self._profile = profile
        self._passes = 0
        self._passes_accurate = 0
        self._shots = 0
        self._shots_on_target = 0
        self._goals = 0
        self._duels = 0
        self._duels_won = 0
        self._assists = 0
        self._key_passes = 0
        self._tackles = 0
        self._interceptions = 0
        self._chances_created = 0
        self._big_chances = 0
        self._errors = 0
        self._dribbles = 0
        self._dribbles_won = 0

    def add(self, observation: Observation) -> None:
        """Fold one observation into the counters."""
        cats = categorize(observation)
        success = observation.success

        if Category.PASS in cats:
            self._passes += 1
            if success:
                self._passes_accurate += 1

        if Category.SHOT in cats:
            mistake = any("mistake" in t for t in observation.texts)
            if not mistake or Category.GOAL in cats:
                self._shots += 1
            if success or Category.ON_TARGET in cats:
                self._shots_on_target += 1

        if success and Category.GOAL in cats:
            self._goals += 1

        if Category.DUEL in cats:
            self._duels += 1
            if success:
                self._duels_won += 1

        if Category.ASSIST in cats:
            self._assists += 1
        if Category.KEY_PASS in cats:
            self._key_passes += 1
        if Category.TACKLE in cats:
            self._tackles += 1
        if Category.INTERCEPTION in cats:
            self._interceptions += 1
        if Category.CHANCE_CREATED in cats:
            self._chances_created += 1
        if Category.BIG_CHANCE in cats:
            self._big_chances += 1

        if self._profile.count_extras:
            if Category.ERROR in cats:
                self._errors += 1
            if Category.DRIBBLE in cats:
                self._dribbles += 1
                if success:
                    self._dribbles_won += 1

    def finalize(self, rating: float = 6.0) -> PlayerStats:
        """Compute derived fields and return the stats record.

        Args:
            rating: Placeholder rating.

        Returns:
            A new :class:`PlayerStats`.
        """
        accuracy = (
            self._passes_accurate / self._passes * 100.0 if self._passes > 0 else 0.0
        )
        if self._profile.independent_chances:
            chances = self._big_chances
        else:
            chances = self._goals + self._shots

        extras = self._profile.count_extras
        return PlayerStats(
            passes=self._passes,
            passes_accurate=self._passes_accurate,
            pass_accuracy=accuracy,
            shots=self._shots,
            shots_on_target=self._shots_on_target,
            duels=self._duels,
            duels_won=self._duels_won,
            interceptions=self._interceptions,
            tackles=self._tackles,
            goals=self._goals,
            assists=self._assists,
            key_passes=self._key_passes,
            chances=chances,
            chances_created=self._chances_created,
            errors=self._errors if extras else None,
            dribbles=self._dribbles if extras else None,
            dribbles_won=self._dribbles_won if extras else None,
            rating=rating,
        )


def aggregate(
    observations: Iterable[Observation],
    profile: AggregationProfile,
    rating: float = 6.0,
) -> PlayerStats:
    """Fold *observations* into a fresh :class:`PlayerStats`.

    Args:
        observations: Observations in any order.
        profile: Path-specific aggregation profile.
        rating: Placeholder rating.

    Returns:
        The aggregated statistics.
    """
    acc = StatsAccumulator(profile)
    for observation in observations:
        acc.add(observation)
    return acc.finalize(rating)
