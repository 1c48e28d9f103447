"""Tests for the metric aggregator.

Covers per-category increments, multi-category observations, flag
handling, goal exclusions, shot and on-target rules, profile-specific
fields, and the derived pass accuracy and chances.
"""

from __future__ import annotations

import pytest

from scoutlog.ingest.schemas import RecordFlags
from scoutlog.rules.metrics import (
    JSON_PROFILE,
    XML_PROFILE,
    Category,
    Observation,
    aggregate,
    categorize,
)

# ------------------------------------------------------------------
# Helper
# ------------------------------------------------------------------


def _obs(
    *texts: str,
    success: bool = False,
    flags: RecordFlags | None = None,
) -> Observation:
    """Build an :class:`Observation` from lowercase texts."""
    return Observation(texts=texts, success=success, flags=flags or RecordFlags())


class TestCategorize:
    """Keyword categories, one observation possibly in several."""

    @pytest.mark.parametrize(
        ("text", "category"),
        [
            ("pass", Category.PASS),
            ("cross", Category.PASS),
            ("long ball", Category.PASS),
            ("shot", Category.SHOT),
            ("goal", Category.SHOT),
            ("duel", Category.DUEL),
            ("air challenge", Category.DUEL),
            ("take on", Category.DUEL),
            ("assist", Category.ASSIST),
            ("passe decisivo", Category.KEY_PASS),
            ("shot assist", Category.KEY_PASS),
            ("desarme", Category.TACKLE),
            ("ball recovery", Category.INTERCEPTION),
            ("chance criada", Category.CHANCE_CREATED),
            ("chance clara", Category.BIG_CHANCE),
            ("high value shot", Category.BIG_CHANCE),
            ("perda de posse", Category.ERROR),
            ("drible", Category.DRIBBLE),
        ],
    )
    def test_keyword(self, text: str, category: Category) -> None:
        assert category in categorize(_obs(text))

    def test_tackle_is_duel_and_tackle(self) -> None:
        cats = categorize(_obs("tackle"))
        assert {Category.DUEL, Category.TACKLE} <= cats

    @pytest.mark.parametrize("text", ["own goal", "goal kick", "shot assist"])
    def test_shot_exclusions(self, text: str) -> None:
        assert Category.SHOT not in categorize(_obs(text))

    def test_shot_assist_is_not_assist(self) -> None:
        assert Category.ASSIST not in categorize(_obs("shot assist"))

    def test_is_pass_flag_overrides_keywords(self) -> None:
        assert Category.PASS in categorize(_obs("header", flags=RecordFlags(is_pass=True)))
        assert Category.PASS not in categorize(
            _obs("pass", flags=RecordFlags(is_pass=False))
        )

    def test_is_shot_flag_adds_shot(self) -> None:
        assert Category.SHOT in categorize(_obs("header", flags=RecordFlags(is_shot=True)))
        assert Category.SHOT in categorize(_obs("shot", flags=RecordFlags(is_shot=False)))

    def test_unclassified(self) -> None:
        assert categorize(_obs("substitution")) == frozenset()


class TestAggregatePasses:
    """Pass counters and derived accuracy."""

    def test_accuracy(self) -> None:
        stats = aggregate(
            [_obs("pass", success=True), _obs("pass"), _obs("cross", success=True)],
            JSON_PROFILE,
        )
        assert stats.passes == 3
        assert stats.passes_accurate == 2
        assert stats.pass_accuracy == pytest.approx(2 / 3 * 100)

    def test_zero_passes_zero_accuracy(self) -> None:
        stats = aggregate([_obs("shot")], JSON_PROFILE)
        assert stats.passes == 0
        assert stats.pass_accuracy == 0.0


class TestAggregateShotsAndGoals:
    """Shot, on-target and goal rules."""

    def test_successful_goal(self) -> None:
        stats = aggregate([_obs("goal", success=True)], JSON_PROFILE)
        assert (stats.shots, stats.shots_on_target, stats.goals) == (1, 1, 1)

    def test_unsuccessful_goal_text_is_not_a_goal(self) -> None:
        stats = aggregate([_obs("goal attempt")], JSON_PROFILE)
        assert stats.goals == 0
        assert stats.shots == 1

    @pytest.mark.parametrize("text", ["own goal", "goal kick", "own goal scored"])
    def test_goal_exclusions(self, text: str) -> None:
        stats = aggregate([_obs(text, success=True)], JSON_PROFILE)
        assert stats.goals == 0

    def test_group_goal_exclusion_in_other_member(self) -> None:
        stats = aggregate([_obs("goal", "own goal", success=True)], XML_PROFILE)
        assert stats.goals == 0

    def test_target_tag_counts_on_target(self) -> None:
        stats = aggregate([_obs("shot on target")], JSON_PROFILE)
        assert (stats.shots, stats.shots_on_target) == (1, 1)

    def test_off_target_is_not_on_target(self) -> None:
        stats = aggregate([_obs("shot off target")], JSON_PROFILE)
        assert (stats.shots, stats.shots_on_target) == (1, 0)

    def test_non_goal_mistake_is_not_a_shot(self) -> None:
        stats = aggregate([_obs("shot mistake")], JSON_PROFILE)
        assert stats.shots == 0

    def test_goal_mistake_is_still_a_shot(self) -> None:
        stats = aggregate([_obs("goal mistake")], JSON_PROFILE)
        assert stats.shots == 1
        assert stats.goals == 0


class TestAggregateOtherCategories:
    """Duels, defensive actions and chance counters."""

    def test_duels(self) -> None:
        stats = aggregate(
            [_obs("duel", success=True), _obs("challenge"), _obs("tackle", success=True)],
            JSON_PROFILE,
        )
        assert (stats.duels, stats.duels_won, stats.tackles) == (3, 2, 1)

    def test_single_observation_many_categories(self) -> None:
        stats = aggregate([_obs("pass", "key pass", "assist")], XML_PROFILE)
        assert (stats.passes, stats.key_passes, stats.assists) == (1, 1, 1)

    def test_interceptions_and_chances_created(self) -> None:
        stats = aggregate(
            [_obs("interception"), _obs("recovery"), _obs("chance created")],
            JSON_PROFILE,
        )
        assert stats.interceptions == 2
        assert stats.chances_created == 1


class TestProfiles:
    """JSON and XML profiles differ in extras and chances."""

    def test_json_counts_extras(self) -> None:
        stats = aggregate(
            [
                _obs("lost ball"),
                _obs("dribble", success=True),
                _obs("take on"),
            ],
            JSON_PROFILE,
        )
        assert (stats.errors, stats.dribbles, stats.dribbles_won) == (1, 2, 1)

    def test_xml_omits_extras(self) -> None:
        stats = aggregate([_obs("lost ball"), _obs("dribble")], XML_PROFILE)
        assert stats.errors is None
        assert stats.dribbles is None
        assert stats.dribbles_won is None

    def test_json_chances_derived(self) -> None:
        stats = aggregate(
            [_obs("goal", success=True), _obs("shot"), _obs("big chance")],
            JSON_PROFILE,
        )
        assert stats.chances == stats.goals + stats.shots == 3

    def test_xml_chances_independent(self) -> None:
        stats = aggregate(
            [_obs("goal", success=True), _obs("big chance"), _obs("chance clara")],
            XML_PROFILE,
        )
        assert stats.chances == 2

    def test_rating_is_placeholder(self) -> None:
        assert aggregate([], JSON_PROFILE).rating == 6.0
        assert aggregate([], JSON_PROFILE, rating=5.5).rating == 5.5
