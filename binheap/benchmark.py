"""
BinaryHeap benchmark runner

Times the heap operations over exponentially growing random inputs and
writes the averages to a CSV file.

Usage examples:
    python -m binheap.benchmark
    python -m binheap.benchmark --output heap.csv --base-input 500 --steps 6
"""

import argparse
import csv
import random
import statistics
import time

from .datastructures.heap import BinaryHeap

# Defaults for the command-line flags
OUTPUT_CSV = "binary_heap_performance.csv"
BASE_INPUT = 100
STEPS = 12
ITERATIONS = 5


# -------------------------------------------------------------------
# Helper functions
# -------------------------------------------------------------------
def generate_random_list(size: int):
    """Generate a list of random integers of given size."""
    return [random.randint(0, 1000000) for _ in range(size)]


def measure_operation_time(operation, input_size: int, iterations: int = ITERATIONS):
    """Run the operation multiple times and return average + std deviation (ms)."""
    if iterations < 1:
        raise ValueError("iterations must be at least 1")
    times = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


# -------------------------------------------------------------------
# Operations to benchmark
# -------------------------------------------------------------------
def bench_push(data):
    heap = BinaryHeap()
    for item in data:
        heap.push(item)
    return heap


def bench_pop(data):
    heap = BinaryHeap.from_items(data)
    while heap:
        heap.pop()
    return heap


def bench_push_pop(data):
    heap = BinaryHeap.from_items(data[: len(data) // 2])
    for item in data[len(data) // 2:]:
        heap.push_pop(item)
    return heap


def bench_from_items(data):
    return BinaryHeap.from_items(data)


OPERATIONS = {
    "push": bench_push,
    "pop": bench_pop,
    "push_pop": bench_push_pop,
    "from_items": bench_from_items,
}


# -------------------------------------------------------------------
# Runner
# -------------------------------------------------------------------
def run_benchmarks(output_file: str, base_input: int = BASE_INPUT, steps: int = STEPS,
                   iterations: int = ITERATIONS):
    """Run exponential performance tests for BinaryHeap operations."""
    if base_input < 1 or steps < 1:
        raise ValueError("base_input and steps must be positive")

    input_sizes = [base_input * (2 ** i) for i in range(steps)]

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Input Size",
            "Operation",
            "Average Time (ms)",
            "Standard Deviation (ms)",
        ])

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, iterations)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}"])
                print(f"{op_name:<10} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms")

    print(f"\nBenchmark completed. Results saved to {output_file}")


def build_parser():
    parser = argparse.ArgumentParser(description="BinaryHeap benchmark runner")
    parser.add_argument("--output", default=OUTPUT_CSV, help="CSV file to write")
    parser.add_argument("--base-input", type=int, default=BASE_INPUT,
                        help="Smallest input size; doubled at each step")
    parser.add_argument("--steps", type=int, default=STEPS, help="Number of input sizes")
    parser.add_argument("--iterations", type=int, default=ITERATIONS,
                        help="Timed runs per operation and size")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    run_benchmarks(args.output, args.base_input, args.steps, args.iterations)


if __name__ == "__main__":
    main()
