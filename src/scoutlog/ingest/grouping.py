"""Temporal grouping of co-occurring tag rows.

Video-tagging exports often split one on-pitch action into several rows
sharing a start time (``"Pass"``, ``"Accurate"``, ``"Key Pass"``). This
module merges candidates with an identical timestamp string into one
:class:`EventGroup`, preserving first-occurrence order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from scoutlog.ingest.schemas import NormalizedEvent
from scoutlog.rules.metrics import Observation

if TYPE_CHECKING:
    from collections.abc import Iterable

    from scoutlog.ingest.normalize import Candidate


@dataclass(frozen=True, slots=True)
class EventGroup:
    """All candidates sharing one timestamp.

    Attributes:
        timestamp: The shared raw time label.
        actions: Member action labels in arrival order.
        success: ``True`` if any member was classified successful.
        x: Normalized x of the first member that supplied coordinates,
            else the default.
        y: Normalized y, chosen with *x*.
        supplied: Whether any member supplied coordinates.
    """

    timestamp: str
    actions: tuple[str, ...]
    success: bool
    x: float
    y: float
    supplied: bool

    @property
    def representative(self) -> str:
        """The first action label, used as the event type."""
        return self.actions[0]

    @property
    def lowered(self) -> tuple[str, ...]:
        """Lowercase member actions, the union used for categorization."""
        return tuple(a.lower() for a in self.actions)

    def to_event(self) -> NormalizedEvent:
        """Return the group as a single :class:`NormalizedEvent`."""
        return NormalizedEvent(
            type=self.representative,
            x=self.x,
            y=self.y,
            success=self.success,
            timestamp=self.timestamp,
        )

    def to_observation(self) -> Observation:
        """Return the group as one metric :class:`Observation`."""
        return Observation(texts=self.lowered, success=self.success)


def group_by_timestamp(candidates: Iterable[Candidate]) -> list[EventGroup]:
    """Merge candidates that share an exact timestamp string.

    Args:
        candidates: Normalized candidates in source order.

    Returns:
        One :class:`EventGroup` per distinct timestamp, in order of
        first occurrence.
    """
    buckets: dict[str, list[Candidate]] = {}
    for candidate in candidates:
        buckets.setdefault(candidate.timestamp, []).append(candidate)

    groups: list[EventGroup] = []
    for timestamp, members in buckets.items():
        located = next((m for m in members if m.supplied), members[0])
        groups.append(
            EventGroup(
                timestamp=timestamp,
                actions=tuple(m.action for m in members),
                success=any(m.success for m in members),
                x=located.x,
                y=located.y,
                supplied=located.supplied,
            )
        )
    return groups
