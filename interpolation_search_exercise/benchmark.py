import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

import numpy as np
from tabulate import tabulate

from .data_generator import generate_sorted_array
from .searches import interpolation_search, search_binary, search_full_scan, search_interpolation

DEFAULT_SIZES = (10, 100, 1000, 10000, 100000)

# Methods compared by compare_methods, each returning (index, comparisons)
SEARCH_METHODS = {
    "Full Scan": search_full_scan,
    "Binary Search": search_binary,
    "Interpolation Search": search_interpolation,
}


@dataclass
class BenchmarkRecord:
    size: int
    microseconds: int
    nanoseconds: int


def time_search(data: Sequence[int], target: int,
                search: Callable[[Sequence[int], int], int] = interpolation_search) -> BenchmarkRecord:
    """Times a single search call on data."""
    start = time.perf_counter_ns()
    search(data, target)
    stop = time.perf_counter_ns()

    elapsed = stop - start
    return BenchmarkRecord(size=len(data), microseconds=elapsed // 1000, nanoseconds=elapsed)


def run_benchmark(sizes: Iterable[int] = DEFAULT_SIZES,
                  rng: np.random.Generator | None = None,
                  generator: Callable[..., list[int]] = generate_sorted_array,
                  search: Callable[[Sequence[int], int], int] = interpolation_search) -> list[BenchmarkRecord]:
    """
    For each input size, generates a sorted array, picks one of its elements as
    the target (so the search always succeeds) and times a single search.
    """
    if rng is None:
        rng = np.random.default_rng()

    records = []
    for size in sizes:
        if size <= 0:
            raise ValueError(f"Input sizes must be positive, got {size}")
        data = generator(size, rng)
        target = data[int(rng.integers(size))]
        records.append(time_search(data, target, search=search))
    return records


def format_report(records: Iterable[BenchmarkRecord]) -> str:
    headers = ["Input Size", "Microseconds", "Nanoseconds"]
    rows = [[r.size, r.microseconds, r.nanoseconds] for r in records]
    return tabulate(rows, headers=headers, tablefmt="plain")


def compare_methods(data: Sequence[int], num_runs: int = 10,
                    rng: np.random.Generator | None = None) -> dict[str, dict[str, list]]:
    """
    Runs every search method on `num_runs` random queries drawn from data.

    Returns, per method, the time in microseconds, the number of comparisons and
    whether the returned index actually holds the query, one entry per run.
    """
    if num_runs <= 0:
        raise ValueError(f"Number of runs must be positive, got {num_runs}")
    if len(data) == 0:
        raise ValueError("Cannot compare search methods on an empty array")
    if rng is None:
        rng = np.random.default_rng()

    all_results = {name: {'times': [], 'comps': [], 'successes': []} for name in SEARCH_METHODS}

    for _ in range(num_runs):
        search_query = data[int(rng.integers(len(data)))]

        for name, search in SEARCH_METHODS.items():
            start_time = time.perf_counter()
            found_idx, comps = search(data, search_query)
            end_time = time.perf_counter()

            all_results[name]['times'].append((end_time - start_time) * 1e6)
            all_results[name]['comps'].append(comps)
            all_results[name]['successes'].append(found_idx != -1 and data[found_idx] == search_query)

    return all_results


def format_comparison(all_results: dict[str, dict[str, list]]) -> str:
    headers = ["Search Method", "Avg Time (µs)", "Avg Comparisons", "Success Rate"]
    table_data = []

    for name, data in all_results.items():
        avg_time = np.mean(data['times']) if data['times'] else 0
        avg_comps = np.mean(data['comps']) if data['comps'] else 0
        success_rate = np.mean(data['successes']) * 100 if data['successes'] else 0
        table_data.append([name, f"{avg_time:.2f}", f"{avg_comps:.2f}", f"{success_rate:.1f}%"])

    return tabulate(table_data, headers=headers, tablefmt="grid", disable_numparse=True)
