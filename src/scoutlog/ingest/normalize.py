"""Event normalization for decoded scout records.

Resolves the action label and pitch position of each record, drops
period and match boundary markers, rescales metre coordinates to the
0-100 range, and classifies success. Missing or unparseable fields fall
back to defaults; nothing here raises for data-quality reasons.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from scoutlog.ingest.schemas import CodedInstance, NormalizedEvent, RecordFlags
from scoutlog.rules.classify import classify_success
from scoutlog.rules.metrics import Observation

if TYPE_CHECKING:
    from collections.abc import Iterable

    from scoutlog.config import ParserConfig, PitchConfig
    from scoutlog.ingest.schemas import ParsedRecord

logger = logging.getLogger(__name__)

ACTION_GROUP = "Action"
POS_X_GROUP = "pos_x"
POS_Y_GROUP = "pos_y"
MISSING_TEXT = "None"

_TAG_X_INDEX = 3
_TAG_Y_INDEX = 4

_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True, slots=True)
class RawPosition:
    """A record's position before normalization.

    Attributes:
        x: Raw x-coordinate, or the default when not supplied.
        y: Raw y-coordinate, or the default when not supplied.
        supplied: Whether the record provided at least one coordinate.
    """

    x: float
    y: float
    supplied: bool


@dataclass(frozen=True, slots=True)
class Candidate:
    """A record that survived boundary filtering.

    Attributes:
        action: Resolved action label, original case.
        x: Normalized x-coordinate.
        y: Normalized y-coordinate.
        supplied: Whether the source record carried coordinates.
        success: Classified success of this single record.
        timestamp: Raw time label.
        flags: Explicit boolean hints of the source record.
    """

    action: str
    x: float
    y: float
    supplied: bool
    success: bool
    timestamp: str
    flags: RecordFlags

    def to_event(self) -> NormalizedEvent:
        """Return this candidate as a :class:`NormalizedEvent`."""
        return NormalizedEvent(
            type=self.action,
            x=self.x,
            y=self.y,
            success=self.success,
            timestamp=self.timestamp,
        )

    def to_observation(self) -> Observation:
        """Return this candidate as one metric :class:`Observation`."""
        return Observation(
            texts=(self.action.lower(),),
            success=self.success,
            flags=self.flags,
        )


def parse_coordinate(value: object) -> float | None:
    """Convert a raw coordinate to a float.

    Text is read up to the end of its leading number, so ``"30,5"`` and
    ``"30m"`` both give ``30.0``.

    Args:
        value: Number or numeric text.

    Returns:
        The coordinate, or ``None`` for ``"None"``, empty text, text
        without a leading number, booleans, and numbers that are not
        finite floats.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            logger.debug("Integer coordinate out of float range")
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text or text == MISSING_TEXT:
            return None
        match = _LEADING_NUMBER.match(text)
        if match is None:
            logger.debug("Unparseable coordinate text %r", value)
            return None
        number = float(match.group())
    else:
        return None
    return number if math.isfinite(number) else None


def normalize_coordinates(
    x: float,
    y: float,
    pitch: PitchConfig,
) -> tuple[float, float]:
    """Rescale metre coordinates to the 0-100 range.

    Each axis is treated independently: a value above
    ``pitch.scale_threshold`` is assumed to be in metres and divided by
    the pitch length (x) or width (y); anything else passes through.

    Args:
        x: Raw x-coordinate.
        y: Raw y-coordinate.
        pitch: Pitch geometry.

    Returns:
        ``(x_norm, y_norm)``.
    """
    x_norm = x / pitch.length * 100.0 if x > pitch.scale_threshold else x
    y_norm = y / pitch.width * 100.0 if y > pitch.scale_threshold else y
    return (x_norm, y_norm)


def resolve_action(record: ParsedRecord) -> str:
    """Return the action label of *record*.

    Coded instances use the text of their ``Action`` label, falling back
    to the raw code. Event objects use their ``type``. The fallback is
    returned verbatim, even when empty.
    """
    if isinstance(record, CodedInstance):
        for label in record.labels:
            if label.group == ACTION_GROUP and label.text:
                return label.text
        return record.code
    return record.type


def resolve_position(record: ParsedRecord, pitch: PitchConfig) -> RawPosition:
    """Return the raw position of *record*, defaulting each missing axis.

    Args:
        record: Decoded record.
        pitch: Pitch geometry supplying the default position.

    Returns:
        A :class:`RawPosition`; unspecified axes hold the default.
    """
    x: float | None = None
    y: float | None = None

    if isinstance(record, CodedInstance):
        for label in record.labels:
            if label.group == POS_X_GROUP:
                parsed = parse_coordinate(label.text)
                if parsed is not None:
                    x = parsed
            elif label.group == POS_Y_GROUP:
                parsed = parse_coordinate(label.text)
                if parsed is not None:
                    y = parsed
    elif len(record.tags) > _TAG_Y_INDEX:
        x = parse_coordinate(record.tags[_TAG_X_INDEX])
        y = parse_coordinate(record.tags[_TAG_Y_INDEX])

    return RawPosition(
        x=pitch.default_x if x is None else x,
        y=pitch.default_y if y is None else y,
        supplied=x is not None or y is not None,
    )


def is_boundary_marker(action: str, markers: tuple[str, ...]) -> bool:
    """Return True if *action* marks a period or match boundary."""
    lower = action.lower()
    return any(marker in lower for marker in markers)


def normalize_record(
    record: ParsedRecord,
    config: ParserConfig,
) -> Candidate | None:
    """Turn one decoded record into a candidate event.

    Args:
        record: Decoded record.
        config: Parser configuration.

    Returns:
        A :class:`Candidate`, or ``None`` for boundary markers.
    """
    action = resolve_action(record)
    if is_boundary_marker(action, config.boundary_markers):
        logger.debug("Skipping boundary marker %r", action)
        return None

    position = resolve_position(record, config.pitch)
    x, y = normalize_coordinates(position.x, position.y, config.pitch)

    return Candidate(
        action=action,
        x=x,
        y=y,
        supplied=position.supplied,
        success=classify_success(action, record.flags),
        timestamp=record.start,
        flags=record.flags,
    )


def normalize_records(
    records: Iterable[ParsedRecord],
    config: ParserConfig,
) -> list[Candidate]:
    """Normalize every record, dropping boundary markers.

    Args:
        records: Decoded records in source order.
        config: Parser configuration.

    Returns:
        Candidates in source order.
    """
    candidates: list[Candidate] = []
    for record in records:
        candidate = normalize_record(record, config)
        if candidate is not None:
            candidates.append(candidate)
    return candidates
