"""Generate session transcripts for exercising the log viewer.

Writes a log in the session logger's format with a header banner,
alternating commands and received lines, and optionally some entries
concatenated without a line break. ``--lines 50000`` produces a file
above the default 5 MiB large-file threshold.

Usage:
    python scripts/generate_test_logs.py
    python scripts/generate_test_logs.py --lines 50000 --output ~/MUDTapper/Logs/Big_2024-01-01_000000.log
"""

from __future__ import annotations

import argparse
from datetime import datetime, timedelta
from pathlib import Path

_DEFAULT_OUTPUT = "tests/fixtures/Sample_2024-01-01_000000.log"
_PADDING = "The wind howls across the empty plains. "


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments for log generation."""
    parser = argparse.ArgumentParser(description="Generate a sample MUD session log")
    parser.add_argument(
        "--output",
        type=str,
        default=_DEFAULT_OUTPUT,
        help="Output log path (default: %(default)s)",
    )
    parser.add_argument(
        "--lines",
        type=int,
        default=200,
        help="Number of timestamped entries (default: %(default)s)",
    )
    parser.add_argument(
        "--concatenate-every",
        type=int,
        default=0,
        help="Drop the line break before every Nth entry; 0 disables (default: %(default)s)",
    )
    return parser.parse_args()


def build_log(lines: int, concatenate_every: int = 0) -> str:
    """Return the text of a session log with *lines* entries."""
    start = datetime(2024, 1, 1)
    out = [
        "=" * 37,
        "MUDTapper Session Log",
        "World: Sample",
        "Host: mud.example.org:4000",
        f"Started: {start.isoformat()}Z",
        "=" * 37,
        "",
    ]
    for i in range(lines):
        stamp = (start + timedelta(seconds=i)).strftime("%Y-%m-%d %H:%M:%S")
        body = f"> look {i}" if i % 10 == 0 else f"{_PADDING * 2}#{i}"
        entry = f"[{stamp}] {body}"
        if concatenate_every and i and i % concatenate_every == 0:
            out[-1] += entry
        else:
            out.append(entry)
    return "\n".join(out) + "\n"


def main() -> None:
    args = parse_args()
    output = Path(args.output).expanduser()
    output.parent.mkdir(parents=True, exist_ok=True)
    text = build_log(args.lines, args.concatenate_every)
    output.write_text(text, encoding="utf-8")
    print(f"Wrote {args.lines} entries ({len(text.encode()) / (1024 * 1024):.1f} MiB) to {output}")


if __name__ == "__main__":
    main()
