"""Benchmark the explicit engine against the table-driven engine.

Both engines implement the same automaton; this measures the cost of
branching per state versus indexing the transition table.

Run:
    python -m benchmarks.strategy_bench

"""

import gc
import random
import statistics
import timeit

from dfalex import Scanner, ScanStrategy, TokenKind


def make_corpus(size: int = 50_000, seed: int = 12) -> str:
    """Random words over a keyword-heavy vocabulary."""
    rng = random.Random(seed)
    words = ["int", "i", "in", "intx", "x", "inline", "tint"]
    parts: list[str] = []
    length = 0
    while length < size:
        word = rng.choice(words) + " " * rng.randint(1, 3)
        parts.append(word)
        length += len(word)
    return "".join(parts)


def drain(source: str, strategy: ScanStrategy) -> int:
    scanner = Scanner(source, strategy)
    count = 0
    while scanner.next_token() != TokenKind.EOF:
        count += 1
    return count


def benchmark_strategies(trials: int = 5) -> dict[str, float]:
    """Time a full scan of the corpus with each strategy."""
    source = make_corpus()
    print(f"\n{'='*60}")
    print(f"Strategy Benchmark ({len(source):,} chars, {trials} trials)")
    print("=" * 60)

    gc.disable()
    times: dict[ScanStrategy, list[float]] = {s: [] for s in ScanStrategy}
    for _trial in range(trials):
        for strategy in ScanStrategy:
            times[strategy].append(
                timeit.timeit(lambda: drain(source, strategy), number=1)
            )
    gc.enable()

    results: dict[str, float] = {}
    for strategy, samples in times.items():
        avg = statistics.mean(samples)
        std = statistics.stdev(samples) * 1000 if len(samples) > 1 else 0.0
        print(f"{strategy.value:<9} {avg*1000:.2f}ms (±{std:.2f}ms)  {len(source)/avg/1e6:.2f} Mchar/s")
        results[f"{strategy.value}_ms"] = avg * 1000

    ratio = results["explicit_ms"] / results["table_ms"]
    print(f"explicit/table: {ratio:.2f}x")
    results["ratio"] = ratio
    return results


if __name__ == "__main__":
    benchmark_strategies()
