# apps/cli/run.py
"""
CLI entry point for self-play experiments.

This script:
  1) Validates the word lists (prints counts + SHA, checks solutions ⊆ guesses).
  2) Loads the dictionaries and instantiates the requested strategy.
  3) Plays a batch of games with a live progress indicator and writes:
       - CSV:  per-game results + guess/pattern/bits columns
       - JSON: manifest with config, word-list report, summary, git commit
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordle_entropy.datasets import load_dictionaries_from_files, pretty_summary, validate_wordlists
from wordle_entropy.errors import WordleError
from wordle_entropy.harness import WORDLE_MAX_TURNS, run_case, summarize
from wordle_entropy.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest
from wordle_entropy.solvers import create_solver, get_solver_ids


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle-entropy: run self-play experiments")
    ap.add_argument("--solver", default="entropy",
                    help=f"strategy id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--guesses", default="data/guesses_5.txt",
                    help="path to the guess dictionary (every accepted word)")
    ap.add_argument("--solutions", default="data/solutions_5.txt",
                    help="path to the solution dictionary (possible answers)")
    ap.add_argument("--sample", type=int, help="play only this many answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="progress display (auto = bar on a terminal, else plain text)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    try:
        # 1) Validate word lists and print a one-liner summary
        rep = validate_wordlists(args.N, args.guesses, args.solutions)
        print(pretty_summary(rep))

        # 2) Load dictionaries (fails on the first malformed line)
        dictionaries = load_dictionaries_from_files(args.guesses, args.solutions, word_length=args.N)
        solver = create_solver(args.solver)
    except (WordleError, ValueError, OSError) as e:
        raise SystemExit(f"error: {e}")

    # 3) Choose cases (deterministic sample by seed)
    cases = list(dictionaries.solutions)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]
    total = len(cases)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    iterator = tqdm(cases, ncols=80, desc=args.solver, unit="game") if mode == "bar" else cases

    # 4) Play
    results = []
    start = time.time()
    last_print = 0.0
    for idx, ans in enumerate(iterator, 1):
        per_seed = args.seed + idx * 1013904223  # LCG-ish stride to avoid collisions
        r = run_case(solver, ans, dictionaries=dictionaries, max_turns=WORDLE_MAX_TURNS, seed=per_seed)
        r["solver_id"] = solver.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now
    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 5) Outputs
    summary = summarize(results)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS, N=args.N)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "summary": summary,
    }, str(manifest_path))

    print(f"{summary['wins']}/{summary['games']} solved, "
          f"mean {summary['mean_guesses']:.3f} guesses, distribution {summary['distribution']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
