# scripts/benchmark.py
from __future__ import annotations

import argparse
import json
import logging
import random
import time
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from handclass.engine import evaluate_hand
from handclass.helpers import count_combos, format_cards, make_deck

logger = logging.getLogger("handclass.benchmark")

WARMUP = 10

HANDS_5 = {
    "royal_flush": ["As", "Ks", "Qs", "Js", "Ts"],
    "straight_flush": ["9s", "8s", "7s", "6s", "5s"],
    "four_of_a_kind": ["As", "Ah", "Ad", "Ac", "Ks"],
    "full_house": ["As", "Ah", "Ad", "Kc", "Ks"],
    "flush": ["As", "Ks", "Qs", "Js", "9s"],
    "straight": ["As", "Ks", "Qs", "Js", "Th"],
    "wheel": ["As", "2s", "3h", "4s", "5s"],
    "three_of_a_kind": ["As", "Ah", "Ad", "Kc", "Qs"],
    "two_pair": ["As", "Ah", "Kd", "Kc", "Qs"],
    "pair": ["As", "Ah", "Kd", "Qc", "Js"],
    "high_card": ["As", "Kh", "Qd", "Jc", "9s"],
}

# 5, 6 and 7 card inputs built from the same starting hands
CARD_COUNTS = {
    5: ["As", "Ah", "Kd", "Qc", "Js"],
    6: ["As", "Ah", "Kd", "Qc", "Js", "9h"],
    7: ["As", "Ah", "Kd", "Qc", "Js", "9h", "8h"],
}


# -----------------------------
# Timing helpers
# -----------------------------
def time_call(fn: Callable[[], Any], iters: int) -> np.ndarray:
    for _ in range(min(WARMUP, iters)):
        fn()
    times = np.empty(iters, dtype=np.float64)
    for i in range(iters):
        t0 = time.perf_counter()
        fn()
        times[i] = (time.perf_counter() - t0) * 1000.0  # ms
    return times


def summarize(name: str, times_ms: np.ndarray) -> Dict[str, Any]:
    if times_ms.size == 0:
        # --iters 0 / --seven-card-hands 0
        return {
            "name": name,
            "iterations": 0,
            "total_ms": 0.0,
            "mean_ms": 0.0,
            "median_ms": 0.0,
            "p95_ms": 0.0,
            "min_ms": 0.0,
            "max_ms": 0.0,
            "ops_per_sec": 0.0,
        }
    mean = float(np.mean(times_ms))
    return {
        "name": name,
        "iterations": int(times_ms.size),
        "total_ms": float(np.sum(times_ms)),
        "mean_ms": mean,
        "median_ms": float(np.median(times_ms)),
        "p95_ms": float(np.percentile(times_ms, 95)),
        "min_ms": float(np.min(times_ms)),
        "max_ms": float(np.max(times_ms)),
        "ops_per_sec": (1000.0 / mean) if mean > 0 else float("inf"),
    }


def _print_row(row: Dict[str, Any]) -> None:
    print(
        f"{row['name']:<28} mean {row['mean_ms']:.4f}ms  "
        f"median {row['median_ms']:.4f}ms  p95 {row['p95_ms']:.4f}ms  "
        f"{row['ops_per_sec']:.0f} ops/sec"
    )


def _header(title: str) -> None:
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def random_hands(n: int, size: int, rng: random.Random) -> List[List[str]]:
    """n distinct random hands of `size` cards drawn from a fresh deck."""
    deck = make_deck()
    seen = set()
    hands: List[List[str]] = []
    while len(hands) < n:
        hand = rng.sample(deck, size)
        key = frozenset(hand)
        if key in seen:
            continue
        seen.add(key)
        hands.append(format_cards(hand))
    return hands


# -----------------------------
# Suites
# -----------------------------
def bench_hand_types(iters: int) -> List[Dict[str, Any]]:
    _header("Full evaluation by hand type (5 cards)")
    rows = []
    for name, cards in HANDS_5.items():
        row = summarize(name, time_call(lambda: evaluate_hand(cards), iters))
        _print_row(row)
        rows.append(row)
    return rows


def bench_card_counts(iters: int) -> List[Dict[str, Any]]:
    _header("Evaluation by card count")
    rows = []
    for n, cards in CARD_COUNTS.items():
        row = summarize(f"{n} cards ({count_combos(n)} combos)", time_call(lambda: evaluate_hand(cards), iters))
        _print_row(row)
        rows.append(row)
    return rows


def bench_strict_overhead(iters: int) -> List[Dict[str, Any]]:
    _header("Strict vs non-strict")
    rows = []
    for name in ("royal_flush", "full_house", "two_pair", "high_card"):
        cards = HANDS_5[name]
        strict = summarize(f"{name} strict", time_call(lambda: evaluate_hand(cards, strict=True), iters))
        loose = summarize(f"{name} non-strict", time_call(lambda: evaluate_hand(cards, strict=False), iters))
        overhead = (strict["mean_ms"] / loose["mean_ms"] - 1.0) * 100.0 if loose["mean_ms"] > 0 else 0.0
        print(f"{name:<28} strict {strict['mean_ms']:.4f}ms  non-strict {loose['mean_ms']:.4f}ms  overhead {overhead:+.1f}%")
        rows.extend([strict, loose])
    return rows


def bench_seven_card_batch(n_hands: int, rng: random.Random) -> Dict[str, Any]:
    _header(f"Batch: {n_hands} random 7-card hands")
    hands = random_hands(n_hands, 7, rng)
    times = np.empty(len(hands), dtype=np.float64)
    combos = 0
    for i, hand in enumerate(hands):
        t0 = time.perf_counter()
        combos += len(evaluate_hand(hand))
        times[i] = (time.perf_counter() - t0) * 1000.0
    row = summarize("7-card hand", times)
    row["combinations"] = combos
    row["per_combination_ms"] = float(np.sum(times)) / combos if combos else 0.0
    _print_row(row)
    print(f"{combos} combinations, {row['per_combination_ms']:.4f}ms per combination")
    row["times_ms"] = times.tolist()
    return row


def plot_batch(times_ms: List[float], path: str) -> None:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    plt.figure(figsize=(10, 6))
    plt.hist(times_ms, bins=40, color="#1f77b4", edgecolor="black", alpha=0.7)
    plt.axvline(float(np.median(times_ms)), color="red", linestyle="--", linewidth=2, label="Median")
    plt.title("7-card evaluation time", fontsize=14, fontweight="bold")
    plt.xlabel("Time per hand (ms)", fontsize=12)
    plt.ylabel("Frequency", fontsize=12)
    plt.legend()
    plt.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.savefig(path, dpi=150)
    plt.close()
    print(f"Saved '{path}'")


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--iters", type=int, default=1000)
    ap.add_argument("--seven-card-hands", type=int, default=1326)
    ap.add_argument("--seed", type=int, default=42)
    ap.add_argument("--plot", type=str, default=None, help="write a histogram of the 7-card batch")
    ap.add_argument("--out", type=str, default=None, help="write all results as JSON")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")
    rng = random.Random(args.seed)

    results: Dict[str, Any] = {
        "hand_types": bench_hand_types(args.iters),
        "card_counts": bench_card_counts(args.iters),
        "strict": bench_strict_overhead(args.iters),
    }
    batch = bench_seven_card_batch(args.seven_card_hands, rng)
    times_ms = batch.pop("times_ms")
    results["seven_card_batch"] = batch

    if args.plot and times_ms:
        plot_batch(times_ms, args.plot)

    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            json.dump(results, f, indent=2)
        logger.info("Wrote %s", args.out)


if __name__ == "__main__":
    main()
