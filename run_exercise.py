import argparse

import numpy as np

from interpolation_search_exercise.searches import interpolation_search
from interpolation_search_exercise.data_generator import GENERATORS
from interpolation_search_exercise.benchmark import (
    DEFAULT_SIZES,
    compare_methods,
    format_comparison,
    format_report,
    run_benchmark,
)


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"{value!r} must be a positive integer")
    return number


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if number < 0:
        raise argparse.ArgumentTypeError(f"{value!r} must be a non-negative integer")
    return number


def run_example():
    """Searches a small fixed array and prints where the target was found."""
    arr = [10, 20, 30, 40, 50]
    target = 40
    result = interpolation_search(arr, target)

    print("\n\nExample test:\n")
    print(f"Array = {arr}")
    print(f"Target = {target}")
    print(f"Element found at index: {result}\n")


def run_exercise(sizes, seed=None, distribution="uniform", compare=False, num_runs=10):
    """
    Runs the example search, then times interpolation search over arrays of the given sizes.
    Optionally compares it against the baseline searches, averaged over random queries.
    """
    rng = np.random.default_rng(seed)
    generator = GENERATORS[distribution]

    run_example()

    print("Performance Analysis:")
    records = run_benchmark(sizes, rng=rng, generator=generator)
    print(format_report(records))

    if compare:
        print(f"\n--- Comparing search methods over {num_runs} random queries ({distribution} keys) ---")
        for size in sizes:
            data = generator(size, rng)
            all_results = compare_methods(data, num_runs=num_runs, rng=rng)
            print(f"\nInput Size: {size}")
            print(format_comparison(all_results))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Demonstrate and benchmark interpolation search.")
    parser.add_argument("--sizes", type=positive_int, nargs="+", default=list(DEFAULT_SIZES),
                        help="Input sizes to benchmark.")
    parser.add_argument("--seed", type=non_negative_int, default=None,
                        help="Seed for the random generator. Runs differ when omitted.")
    parser.add_argument("--distribution", choices=sorted(GENERATORS), default="uniform",
                        help="Distribution of the generated keys.")
    parser.add_argument("--compare", action="store_true",
                        help="Also compare against full scan and binary search.")
    parser.add_argument("--num-runs", type=positive_int, default=10,
                        help="Number of random queries to average over when comparing.")
    args = parser.parse_args(argv)

    run_exercise(args.sizes, seed=args.seed, distribution=args.distribution,
                 compare=args.compare, num_runs=args.num_runs)


if __name__ == "__main__":
    main()
