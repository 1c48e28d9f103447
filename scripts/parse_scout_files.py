"""Parse every scout file in the inbox and write the results.

Parses all ``*.json`` and ``*.xml`` files found in ``data/scout_files``,
writes one stats row per file to Parquet and the full results (events
and stats in the application's JSON shape) to a single JSON file, then
logs a summary table.

Usage::

    python scripts/parse_scout_files.py [INBOX_DIR]
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import orjson

# ---------------------------------------------------------------------------
# Ensure the src package is importable when running as a standalone script.
# ---------------------------------------------------------------------------
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_PROJECT_ROOT / "src"))

from scoutlog.batch import parse_scout_files, stats_frame  # noqa: E402
from scoutlog.ingest.schemas import ParseResult  # noqa: E402
from scoutlog.io import SUPPORTED_SUFFIXES  # noqa: E402

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)

INBOX_DIR = _PROJECT_ROOT / "data" / "scout_files"
OUTPUT_DIR = _PROJECT_ROOT / "data" / "output"
STATS_FILE = OUTPUT_DIR / "scout_stats.parquet"
RESULTS_FILE = OUTPUT_DIR / "scout_results.json"


# ------------------------------------------------------------------
# Summary log
# ------------------------------------------------------------------

_HEADER = (
    f"{'File':<40} {'Variant':<22} {'Events':>7} {'Passes':>7} "
    f"{'Acc %':>6} {'Shots':>6} {'Goals':>6}"
)
_SEPARATOR = "-" * len(_HEADER)


def _print_summary(results: dict[str, ParseResult]) -> None:
    """Print a formatted per-file summary table.

    Args:
        results: Parse results keyed by file name.
    """
    logger.info("")
    logger.info("=" * len(_HEADER))
    logger.info("SCOUT FILE SUMMARY")
    logger.info("=" * len(_HEADER))
    logger.info(_HEADER)
    logger.info(_SEPARATOR)

    total_events = 0
    for name, result in results.items():
        stats = result.stats
        logger.info(
            "%-40s %-22s %7d %7d %6.1f %6d %6d",
            name[:40],
            result.variant.value,
            len(result.events),
            stats.passes,
            stats.pass_accuracy,
            stats.shots,
            stats.goals,
        )
        total_events += len(result.events)

    logger.info(_SEPARATOR)
    logger.info("%-40s %-22s %7d", "TOTAL", "", total_events)
    logger.info("=" * len(_HEADER))
    logger.info("Stats written to: %s", STATS_FILE)
    logger.info("Results written to: %s", RESULTS_FILE)


# ------------------------------------------------------------------
# Entry point
# ------------------------------------------------------------------


def main() -> None:
    """Parse the inbox and write Parquet and JSON outputs."""
    inbox = Path(sys.argv[1]) if len(sys.argv) > 1 else INBOX_DIR
    paths = sorted(
        p for p in inbox.iterdir() if p.is_file() and p.suffix.lower() in SUPPORTED_SUFFIXES
    )
    if not paths:
        logger.error("No scout files found in %s", inbox)
        sys.exit(1)

    logger.info("Found %d scout files in %s", len(paths), inbox)
    results = parse_scout_files(paths)

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    stats_frame(results).write_parquet(STATS_FILE)
    RESULTS_FILE.write_bytes(
        orjson.dumps(
            {name: r.to_dict() for name, r in results.items()},
            option=orjson.OPT_INDENT_2,
        )
    )

    _print_summary(results)


if __name__ == "__main__":
    main()
