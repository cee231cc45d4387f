"""
Self-play harness.

- run_case:  play one puzzle (one hidden answer) with a given strategy.
- run_batch: play many puzzles in sequence (optionally a sample prefix).

The hidden answer is only ever used through score(), exactly like a human
typing the game's colours into the session. Wordle's 6-turn limit is applied
here by giving the session max_turns; the core itself enforces no limit.
"""

from __future__ import annotations

import time
from typing import Dict, List, Optional

from wordle_entropy.datasets.loader import Dictionaries
from wordle_entropy.engine import is_solved_pattern, score
from wordle_entropy.session import Session

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with a non-Wordle turn budget."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        solver,
        answer: str,
        *,
        dictionaries: Dictionaries,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: Optional[int] = None,
) -> Dict:
    """
    Play one game until the strategy wins, runs out of turns, or the
    candidates run out (answer missing from the solution dictionary).

    Returns:
        dict with keys:
            answer, success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), bits (list[(expected, actual)]),
            final_state (str)
    """
    _assert_wordle_turns(max_turns)
    solver.reset(seed=seed)
    session = Session(dictionaries, max_turns=max_turns)

    think_ms = 0.0
    while session.state.can_guess:
        t0 = time.perf_counter_ns()
        guess = solver.next_guess(session)
        think_ms += (time.perf_counter_ns() - t0) / 1_000_000.0

        session.record_guess(guess, score(guess, answer))

    history = session.history
    return {
        "answer": answer,
        "success": bool(history) and is_solved_pattern(history[-1].pattern),
        "guesses": len(history),
        "time_ms": think_ms,
        "history": [(r.guess, r.pattern) for r in history],
        "bits": [(r.expected_bits, r.actual_bits) for r in history],
        "final_state": session.state.value,
    }


def run_batch(
        solver,
        answers: List[str],
        *,
        dictionaries: Dictionaries,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: Optional[int] = None,
        sample: Optional[int] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is given only the first K answers
    are played. Each case's seed is derived from the base seed (seed + index).
    """
    _assert_wordle_turns(max_turns)

    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, ans, dictionaries=dictionaries, max_turns=max_turns, seed=case_seed)
        r["solver_id"] = solver.id
        out.append(r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """Win rate, mean guesses over wins, and the guess-count distribution."""
    wins = [r for r in results if r["success"]]
    dist: Dict[int, int] = {}
    for r in wins:
        dist[r["guesses"]] = dist.get(r["guesses"], 0) + 1
    return {
        "games": len(results),
        "wins": len(wins),
        "win_rate": len(wins) / len(results) if results else 0.0,
        "mean_guesses": sum(r["guesses"] for r in wins) / len(wins) if wins else 0.0,
        "distribution": dict(sorted(dist.items())),
    }


__all__ = ["WORDLE_MAX_TURNS", "run_case", "run_batch", "summarize"]
