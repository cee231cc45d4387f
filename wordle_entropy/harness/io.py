"""
I/O utilities for self-play runs.

- write_csv:      one row per game, with guess/pattern/bits columns per turn.
- write_manifest: JSON manifest with config, word-list report and summary.
- timestamp_id:   UTC run id for file names.
- git_commit_or_unknown: short commit hash for reproducibility.

Patterns are prefixed with an apostrophe so spreadsheet apps don't read
strings like "-GYY-" as formulas.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_turns: int, N: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Columns:
      solver, N, answer, success, guesses, final_state, time_ms,
      then for each turn i: guess_i, patt_i, expected_bits_i, actual_bits_i
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "N", "answer", "success", "guesses", "final_state", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}", f"expected_bits_{i}", f"actual_bits_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "N": N,
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "final_state": r.get("final_state", ""),
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            bits = r.get("bits", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, patt = hist[i - 1]
                    expected, actual = bits[i - 1] if i <= len(bits) else ("", "")
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                    row[f"expected_bits_{i}"] = round(expected, 4) if expected != "" else ""
                    row[f"actual_bits_{i}"] = round(actual, 4) if actual != "" else ""
                else:
                    row[f"guess_{i}"] = row[f"patt_{i}"] = ""
                    row[f"expected_bits_{i}"] = row[f"actual_bits_{i}"] = ""
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """Write the run manifest as indented JSON; returns the path written."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """Compact UTC timestamp, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short git hash of the working tree, or 'unknown' outside a repo / without git."""
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip()
