"""Configuration dataclasses for the scout-file parsing engine.

All configuration containers are frozen (immutable) and slotted. Each
dataclass provides sensible defaults so that a zero-argument
``ParserConfig()`` is always valid.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PitchConfig:
    """Pitch geometry used for coordinate normalization.

    Attributes:
        length: Pitch length in metres for the rescaled x-axis.
        width: Pitch width in metres for the rescaled y-axis.
        scale_threshold: Raw values strictly above this are treated as
            metre coordinates and rescaled to the 0-100 range.
        default_x: x-coordinate used when a record has no position.
        default_y: y-coordinate used when a record has no position.
    """

    length: float = 105.0
    width: float = 68.0
    scale_threshold: float = 100.0
    default_x: float = 50.0
    default_y: float = 50.0


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Master configuration for a single parse invocation.

    Attributes:
        pitch: Pitch geometry and default position.
        boundary_markers: Lowercase substrings marking period or match
            boundaries; actions containing any of them are dropped.
        default_rating: Placeholder rating written into every stats
            record.
        player_name_separator: Separator between the player name and
            the action in ``"Player Name - Action"`` codes.

    Raises:
        ValueError: If any configuration invariant is violated.
    """

    pitch: PitchConfig = field(default_factory=PitchConfig)
    boundary_markers: tuple[str, ...] = ("start", "end", "half")
    default_rating: float = 6.0
    player_name_separator: str = " - "

    def __post_init__(self) -> None:
        """Validate configuration invariants after initialization."""
        if self.pitch.length <= 0.0 or self.pitch.width <= 0.0:
            msg = (
                f"pitch dimensions must be positive, "
                f"got {self.pitch.length} x {self.pitch.width}"
            )
            raise ValueError(msg)

        if self.pitch.scale_threshold <= 0.0:
            msg = (
                f"pitch.scale_threshold must be positive, "
                f"got {self.pitch.scale_threshold}"
            )
            raise ValueError(msg)

        for name in ("default_x", "default_y"):
            value = getattr(self.pitch, name)
            if not 0.0 <= value <= 100.0:
                msg = f"pitch.{name} must be in [0, 100], got {value}"
                raise ValueError(msg)

        for marker in self.boundary_markers:
            if not marker or marker != marker.lower():
                msg = (
                    f"boundary_markers must be non-empty lowercase strings, "
                    f"got {marker!r}"
                )
                raise ValueError(msg)

        if not self.player_name_separator:
            msg = "player_name_separator must not be empty"
            raise ValueError(msg)
