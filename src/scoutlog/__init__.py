"""Scout-file parsing and statistics engine.

Turns per-match event logs exported by video-tagging tools (JSON or
XML) into a normalized list of spatial events and a fixed set of player
statistics.
"""

from scoutlog.config import ParserConfig, PitchConfig
from scoutlog.exceptions import ScoutLogError
from scoutlog.ingest.schemas import NormalizedEvent, ParseResult, PlayerStats
from scoutlog.parser import parse_scout_document, parse_scout_json, parse_scout_xml

__version__ = "0.1.0"

__all__ = [
    "NormalizedEvent",
    "ParseResult",
    "ParserConfig",
    "PitchConfig",
    "PlayerStats",
    "ScoutLogError",
    "__version__",
    "parse_scout_document",
    "parse_scout_json",
    "parse_scout_xml",
]
