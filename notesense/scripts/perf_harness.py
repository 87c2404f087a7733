"""Time detection on keystroke-sized notes against a latency budget."""
from __future__ import annotations

import argparse
import statistics
import time
from typing import List, Tuple

from ..detector import detect

# Per-call budget for a note of a few hundred characters.
DETECT_BUDGET_S = 0.005

SAMPLE_NOTE = (
    "Felt strong on squats but left knee sore by the last set. Wrist a bit tight on "
    "presses, lower back stiff after deadlifts. Sharp pain in the right shoulder when "
    "overhead, elbows clicking. Calves cramping on the walk home, neck and traps tender."
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Measure notesense detection latency")
    parser.add_argument("--runs", type=int, default=200, help="Number of timed calls")
    parser.add_argument("--text", default=SAMPLE_NOTE, help="Note text to scan")
    parser.add_argument(
        "--keystrokes",
        action="store_true",
        help="Also time every prefix of the text; the slowest prefix must meet the budget too",
    )
    return parser.parse_args(argv)


def time_detect(text: str, runs: int) -> Tuple[float, int]:
    times: List[float] = []
    issues = 0
    for _ in range(max(runs, 1)):
        t0 = time.perf_counter()
        result = detect(text)
        times.append(time.perf_counter() - t0)
        issues = len(result.issues)
    return statistics.median(times), issues


def time_keystrokes(text: str) -> float:
    times: List[float] = []
    for end in range(1, len(text) + 1):
        t0 = time.perf_counter()
        detect(text[:end])
        times.append(time.perf_counter() - t0)
    return max(times) if times else 0.0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    median, issues = time_detect(args.text, args.runs)
    passed = median <= DETECT_BUDGET_S
    print(
        f"detect median: {median * 1e6:.0f} us over {len(args.text)} chars, {issues} issues "
        f"- {'PASS' if passed else 'FAIL'} (budget {DETECT_BUDGET_S * 1e6:.0f} us)"
    )
    if args.keystrokes:
        worst = time_keystrokes(args.text)
        keystrokes_passed = worst <= DETECT_BUDGET_S
        print(
            f"worst keystroke: {worst * 1e6:.0f} us "
            f"- {'PASS' if keystrokes_passed else 'FAIL'} (budget {DETECT_BUDGET_S * 1e6:.0f} us)"
        )
        passed = passed and keystrokes_passed
    return 0 if passed else 1


if __name__ == "__main__":  # pragma: no cover - manual execution
    raise SystemExit(main())
