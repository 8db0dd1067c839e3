"""Benchmark the compressed trie against other string containers."""

import bisect
import gc
import json
import random
import string
import time
import tracemalloc
from pathlib import Path
from typing import Any, Callable

import matplotlib.pyplot as plt
import psutil

from trie_search.custom_data_structures.CompressedTrie.CompressedTrie import (
    CompressedTrie,
)

DATA_SIZES = [1_000, 10_000, 50_000, 100_000]
NUMBER_OF_QUERIES = 1_000
PREFIX_LENGTH = 3
RESULTS_DIR = Path(__file__).parent / "results"
SEED = 1234


def generate_words(count: int, rng: random.Random) -> list[str]:
    """Generate `count` random lowercase words of 3 to 12 letters.

    Args:
        count (int): The number of words to generate.
        rng (random.Random): The random generator to use.

    Returns:
        list[str]: The generated words, duplicates possible.

    """
    return [
        "".join(
            rng.choice(string.ascii_lowercase)
            for _ in range(rng.randint(3, 12))
        )
        for _ in range(count)
    ]


def sorted_list_contains(words: list[str], query: str) -> bool:
    """Binary search for `query` in a sorted list."""
    index = bisect.bisect_left(words, query)
    return index < len(words) and words[index] == query


def sorted_list_matches(words: list[str], prefix: str) -> set[str]:
    """Collect the words of a sorted list that start with `prefix`."""
    found = set()
    index = bisect.bisect_left(words, prefix)
    while index < len(words) and words[index].startswith(prefix):
        found.add(words[index])
        index += 1
    return found


def set_matches(words: set[str], prefix: str) -> set[str]:
    """Collect the words of a set that start with `prefix`."""
    return {word for word in words if word.startswith(prefix)}


def measure(func: Callable[[], Any]) -> tuple[Any, float]:
    """Run `func` and return its result with the duration in ms."""
    start_time = time.perf_counter()
    result = func()
    return result, (time.perf_counter() - start_time) * 1000


def benchmark_container(
    name: str,
    build: Callable[[list[str]], Any],
    contains: Callable[[Any, str], bool],
    matches: Callable[[Any, str], set[str]],
    words: list[str],
    queries: list[str],
) -> dict[str, float]:
    """Benchmark one container type on a single word list.

    Args:
        name (str): The display name of the container.
        build (Callable): Builds the container from the words.
        contains (Callable): Membership check.
        matches (Callable): Prefix search.
        words (list[str]): The words to store.
        queries (list[str]): The queries to run.

    Returns:
        dict[str, float]: Timings in ms and memory figures in bytes.

    """
    gc.collect()
    process = psutil.Process()
    rss_before = process.memory_info().rss

    tracemalloc.start()
    container, build_time = measure(lambda: build(words))
    _current, peak_memory = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    rss_after = process.memory_info().rss

    _, contains_time = measure(
        lambda: [contains(container, query) for query in queries],
    )
    _, matches_time = measure(
        lambda: [
            matches(container, query[:PREFIX_LENGTH]) for query in queries
        ],
    )

    print(
        f"{name}: build {build_time:.2f} ms, contains {contains_time:.2f} ms, "
        f"matches {matches_time:.2f} ms, peak {peak_memory / 1024:.0f} KiB",
    )
    return {
        "build_time": build_time,
        "contains_time": contains_time,
        "matches_time": matches_time,
        "peak_memory": peak_memory,
        "rss_delta": rss_after - rss_before,
    }


CONTAINERS: dict[str, tuple[Callable[..., Any], ...]] = {
    "CompressedTrie": (
        CompressedTrie,
        lambda trie, query: trie.contains(query),
        lambda trie, prefix: trie.matches(prefix),
    ),
    "set": (set, lambda words, query: query in words, set_matches),
    "sorted list": (
        sorted,
        sorted_list_contains,
        sorted_list_matches,
    ),
}


def plot_results(
    results: dict[str, dict[str, dict[str, float]]],
    metric: str,
    ylabel: str,
) -> None:
    """Plot one metric for every container over the data sizes.

    Args:
        results (dict): The results keyed by data size, then container.
        metric (str): The metric to plot.
        ylabel (str): The label of the y axis.

    """
    plt.figure(figsize=(8, 5))
    sizes = list(results)
    for name in CONTAINERS:
        plt.plot(
            sizes,
            [results[size][name][metric] for size in sizes],
            marker="o",
            label=name,
        )
    plt.xlabel("Number of words")
    plt.ylabel(ylabel)
    plt.title(f"{metric.replace('_', ' ').capitalize()} per container")
    plt.legend()
    plt.tight_layout()
    plt.savefig(RESULTS_DIR / f"{metric}.png")
    plt.close("all")


def main() -> None:
    """Run every benchmark, then save the results and plots."""
    rng = random.Random(SEED)
    results: dict[str, dict[str, dict[str, float]]] = {}

    for size in DATA_SIZES:
        print(f"\n--- Benchmark with {size} words ---")
        words = generate_words(size, rng)
        queries = rng.sample(words, min(NUMBER_OF_QUERIES, len(words)))
        queries += generate_words(NUMBER_OF_QUERIES, rng)

        results[str(size)] = {
            name: benchmark_container(
                name,
                build,
                contains,
                matches,
                words,
                queries,
            )
            for name, (build, contains, matches) in CONTAINERS.items()
        }

    RESULTS_DIR.mkdir(parents=True, exist_ok=True)
    with open(RESULTS_DIR / "results.json", "w", encoding="utf-8") as f:
        json.dump(results, f, indent=4)

    plot_results(results, "build_time", "Build Time (ms)")
    plot_results(results, "contains_time", "Membership Time (ms)")
    plot_results(results, "matches_time", "Prefix Search Time (ms)")
    plot_results(results, "peak_memory", "Peak Traced Memory (bytes)")


if __name__ == "__main__":
    main()
