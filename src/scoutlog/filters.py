"""Event-type filters used by the dashboard views.

Filtering is a case-insensitive substring match on the event ``type``,
so it works on the free-text labels the exporters produce.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from scoutlog.ingest.schemas import NormalizedEvent


class EventFilter(str, Enum):
    """Named event-type filters."""

    ALL = "all"
    GOALS = "goals"
    ASSISTS = "assists"
    PASSES = "passes"
    SHOTS = "shots"
    KEY_PASSES = "keyPasses"
    DUELS = "duels"
    INTERCEPTIONS = "interceptions"
    TACKLES = "tackles"
    CHANCES_CREATED = "chancesCreated"


FILTER_KEYWORDS: dict[EventFilter, tuple[str, ...]] = {
    EventFilter.GOALS: ("goal",),
    EventFilter.ASSISTS: ("assist",),
    EventFilter.PASSES: ("pass",),
    EventFilter.SHOTS: ("shot",),
    EventFilter.KEY_PASSES: ("key", "decisivo"),
    EventFilter.DUELS: ("duel",),
    EventFilter.INTERCEPTIONS: ("interception",),
    EventFilter.TACKLES: ("tackle",),
    EventFilter.CHANCES_CREATED: ("chance", "criada"),
}


def filter_events(
    events: Iterable[NormalizedEvent],
    event_filter: EventFilter = EventFilter.ALL,
) -> tuple[NormalizedEvent, ...]:
    """Keep events whose type matches *event_filter*.

    Args:
        events: Events in display order.
        event_filter: Filter to apply; ``ALL`` keeps everything.

    Returns:
        Matching events, order preserved.
    """
    if event_filter is EventFilter.ALL:
        return tuple(events)
    keywords = FILTER_KEYWORDS[event_filter]
    return tuple(e for e in events if any(k in e.type.lower() for k in keywords))
