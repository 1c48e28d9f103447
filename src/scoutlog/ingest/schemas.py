"""Internal data schemas for the scout-file parsing engine.

Defines the decoded record variants produced by the format detector and
the canonical output structures handed back to the application. Every
schema is a frozen, slotted dataclass.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Union


class SchemaVariant(str, Enum):
    """Known shapes of a scout file.

    ``UNKNOWN`` is a regular arm of the union: it produces an empty
    result rather than an error.
    """

    CODED_INSTANCES = "coded_instances"
    EVENT_OBJECTS = "event_objects"
    FLAGGED_EVENT_OBJECTS = "flagged_event_objects"
    XML_INSTANCES = "xml_instances"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class Label:
    """A ``{group, text}`` pair attached to a coded instance.

    Attributes:
        group: Label group (e.g. ``"Action"``, ``"pos_x"``), or ``None``.
        text: Label text, or ``None`` when absent.
    """

    group: str | None
    text: str | None


@dataclass(frozen=True, slots=True)
class RecordFlags:
    """Explicit boolean hints some exporters attach to a record.

    Only genuine booleans are kept; any other value is stored as
    ``None`` and ignored downstream.

    Attributes:
        is_pass: Record is (or is not) a pass.
        is_shot: Record is a shot.
        is_success: Record is flagged successful.
        is_failure: Record is flagged unsuccessful; overrides everything.
    """

    is_pass: bool | None = None
    is_shot: bool | None = None
    is_success: bool | None = None
    is_failure: bool | None = None

    @classmethod
    def from_mapping(cls, raw: dict[str, Any]) -> RecordFlags:
        """Read the ``isPass``/``isShot``/``isSuccess``/``isFailure`` keys."""

        def _flag(key: str) -> bool | None:
            value = raw.get(key)
            return value if isinstance(value, bool) else None

        return cls(
            is_pass=_flag("isPass"),
            is_shot=_flag("isShot"),
            is_success=_flag("isSuccess"),
            is_failure=_flag("isFailure"),
        )


NO_FLAGS = RecordFlags()


@dataclass(frozen=True, slots=True)
class CodedInstance:
    """A tagged time interval exported by video-tagging software.

    Attributes:
        code: Raw code string of the instance.
        start: Raw start time label, kept as text.
        labels: Structured ``{group, text}`` labels in source order.
        flags: Explicit boolean hints, if the exporter wrote any.
    """

    code: str
    start: str
    labels: tuple[Label, ...]
    flags: RecordFlags = NO_FLAGS


@dataclass(frozen=True, slots=True)
class TaggedEvent:
    """An event object with a ``type`` and a positional ``tags`` array.

    Attributes:
        type: Action label of the event.
        start: Raw start time label, kept as text.
        tags: Raw tags; positions 3 and 4 carry x and y when present.
        flags: Explicit boolean hints, if the exporter wrote any.
    """

    type: str
    start: str
    tags: tuple[Any, ...]
    flags: RecordFlags = NO_FLAGS


ParsedRecord = Union[CodedInstance, TaggedEvent]


@dataclass(frozen=True, slots=True)
class NormalizedEvent:
    """One meaningful on-pitch action.

    Attributes:
        type: Human-readable action label (free text).
        x: Pitch x-coordinate in the 0-100 range.
        y: Pitch y-coordinate in the 0-100 range.
        success: Whether the action is classified as successful.
        timestamp: Raw source time label.
    """

    type: str
    x: float
    y: float
    success: bool
    timestamp: str

    def to_dict(self) -> dict[str, Any]:
        """Return the event in the application's JSON shape."""
        return {
            "type": self.type,
            "x": self.x,
            "y": self.y,
            "success": self.success,
            "timestamp": self.timestamp,
        }


_STATS_KEYS: dict[str, str] = {
    "passes": "passes",
    "passes_accurate": "passesAccurate",
    "pass_accuracy": "passAccuracy",
    "shots": "shots",
    "shots_on_target": "shotsOnTarget",
    "duels": "duels",
    "duels_won": "duelsWon",
    "interceptions": "interceptions",
    "tackles": "tackles",
    "goals": "goals",
    "assists": "assists",
    "key_passes": "keyPasses",
    "chances": "chances",
    "chances_created": "chancesCreated",
    "errors": "errors",
    "dribbles": "dribbles",
    "dribbles_won": "dribblesWon",
    "rating": "rating",
}


@dataclass(frozen=True, slots=True)
class PlayerStats:
    """Aggregate performance statistics for one scout file.

    ``errors``, ``dribbles`` and ``dribbles_won`` are only counted on
    the JSON path and are ``None`` for XML files.

    Attributes:
        passes: Number of passes, crosses and long balls.
        passes_accurate: Passes classified successful.
        pass_accuracy: ``passes_accurate / passes * 100``, or ``0``.
        shots: Number of shots.
        shots_on_target: Shots classified successful or tagged on target.
        duels: Number of duels, challenges, dribbles and tackles.
        duels_won: Duels classified successful.
        interceptions: Interceptions and recoveries.
        tackles: Tackles.
        goals: Successful goals, excluding own goals and goal kicks.
        assists: Assists.
        key_passes: Key passes and shot assists.
        chances: Big chances, or ``goals + shots`` where the format has
            no independent big-chance signal.
        chances_created: Chances created.
        errors: Mistakes and lost balls (JSON path only).
        dribbles: Dribble attempts (JSON path only).
        dribbles_won: Successful dribbles (JSON path only).
        rating: Placeholder rating, filled in later by the report
            generator.
    """

    passes: int
    passes_accurate: int
    pass_accuracy: float
    shots: int
    shots_on_target: int
    duels: int
    duels_won: int
    interceptions: int
    tackles: int
    goals: int
    assists: int
    key_passes: int
    chances: int
    chances_created: int
    errors: int | None
    dribbles: int | None
    dribbles_won: int | None
    rating: float

    @classmethod
    def empty(cls, rating: float = 6.0, *, with_extras: bool = True) -> PlayerStats:
        """Return an all-zero record carrying only the placeholder rating.

        Args:
            rating: Placeholder rating.
            with_extras: Whether the JSON-only fields are zero (``True``)
                or absent (``None``).
        """
        extra = 0 if with_extras else None
        return cls(
            passes=0,
            passes_accurate=0,
            pass_accuracy=0.0,
            shots=0,
            shots_on_target=0,
            duels=0,
            duels_won=0,
            interceptions=0,
            tackles=0,
            goals=0,
            assists=0,
            key_passes=0,
            chances=0,
            chances_created=0,
            errors=extra,
            dribbles=extra,
            dribbles_won=extra,
            rating=rating,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the stats keyed by the application's camelCase names.

        JSON-only fields that are ``None`` are omitted.
        """
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            result[_STATS_KEYS[f.name]] = value
        return result


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Everything derived from one scout file.

    Attributes:
        events: Normalized events in source (or first-occurrence) order.
        stats: Aggregate statistics.
        variant: Schema variant the detector recognized.
        detected_player_name: Player name taken from a
            ``"Name - Action"`` code prefix (XML path only), or ``None``.
    """

    events: tuple[NormalizedEvent, ...]
    stats: PlayerStats
    variant: SchemaVariant
    detected_player_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the result in the application's JSON shape."""
        result: dict[str, Any] = {
            "events": [e.to_dict() for e in self.events],
            "stats": self.stats.to_dict(),
        }
        if self.detected_player_name:
            result["detectedPlayerName"] = self.detected_player_name
        return result
