"""
Demo script: parse every source listed in a flatparse manifest.

Usage:
    uv run python scripts/run_parse.py                      # uses ./flatparse.yaml
    uv run python scripts/run_parse.py path/to/manifest.yaml

Each source is parsed with the grammar chosen by its suffix (or its
explicit ``format``) and a one-line summary is logged. Syntax errors are
logged with their line and column and the script exits non-zero.
"""

from __future__ import annotations

import logging
import sys

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_parse")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    import flatparse
    from flatparse import Table

    manifest_path = sys.argv[1] if len(sys.argv) > 1 else "flatparse.yaml"

    try:
        results = flatparse.load_all(manifest_path)
    except flatparse.ParseSyntaxError as exc:
        log.error("Syntax error: %s", exc.message)
        log.error("  line %d, column %d: %s", exc.line, exc.column, exc.line_text)
        return 1

    for name, result in results.items():
        if isinstance(result, Table):
            shape = "rectangular" if result.is_rectangular else "ragged"
            log.info(
                "  %-20s  table: %d rows x %d cols (%s)",
                name, len(result), result.width, shape,
            )
        else:
            named = result.names()[1:]
            log.info(
                "  %-20s  config: %d default key(s), sections=%s",
                name, len(result.default.values), named,
            )

    log.info("All sources parsed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
