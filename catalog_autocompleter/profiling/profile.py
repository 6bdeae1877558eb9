# profiling/profile.py
"""
Small profiling harness to measure find_completions latency.
Usage:
    python -m catalog_autocompleter.profiling.profile --words catalog.txt --iters 1000
Without --words a synthetic catalog is generated.
"""
import argparse
import random
import statistics
import string
import time
from typing import Dict, Iterable, List, Sequence

from catalog_autocompleter.core.protocols import CompletionIndex
from catalog_autocompleter.core.trie import Trie
from catalog_autocompleter.cli.cli import load_words, read_word_file


def synthetic_catalog(n: int = 5000, seed: int = 7) -> List[str]:
    """Random lowercase product-ish names, 3-12 chars, reproducible per seed."""
    rng = random.Random(seed)
    return [
        "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(3, 12)))
        for _ in range(n)
    ]


def bench(index: CompletionIndex, prefixes: Sequence[str], runs: int = 500, seed: int = 7) -> List[float]:
    """Per-call latencies in ms for random prefixes."""
    rng = random.Random(seed)
    times = []
    for _ in range(runs):
        p = rng.choice(prefixes)
        t0 = time.perf_counter()
        index.find_completions(p)
        times.append((time.perf_counter() - t0) * 1000.0)
    return times


def summarize(times: Iterable[float]) -> Dict[str, float]:
    times_sorted = sorted(times)
    if not times_sorted:
        return {"count": 0}
    return {
        "count": len(times_sorted),
        "mean_ms": statistics.mean(times_sorted),
        "median_ms": statistics.median(times_sorted),
        "p90_ms": times_sorted[max(int(0.9 * len(times_sorted)) - 1, 0)],
        "max_ms": times_sorted[-1],
    }


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--words", help="word file, one word per line")
    parser.add_argument("--iters", type=int, default=500, help="measured iterations")
    parser.add_argument("--prefix-len", type=int, default=2, help="length of queried prefixes")
    args = parser.parse_args(argv)

    words = list(read_word_file(args.words)) if args.words else synthetic_catalog()
    trie = Trie()
    t0 = time.perf_counter()
    added, skipped = load_words(trie, words)
    msg = f"loaded {added} words in {time.perf_counter() - t0:.3f}s"
    if skipped:
        msg += f" ({skipped} skipped, reserved terminator {trie.terminator!r})"
    print(msg)

    prefixes = sorted({w[: args.prefix_len] for w in trie.words()}) or [""]
    s = summarize(bench(trie, prefixes, runs=args.iters))
    print("Profiling summary (ms):", s)
    return s


if __name__ == "__main__":
    main()
