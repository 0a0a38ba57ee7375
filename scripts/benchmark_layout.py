"""
Benchmark script for the compact layout engine.
Measures block creation and distribution time on generated study content
and prints the resulting balance and overflow metrics.
"""

import argparse
import logging
import statistics
import sys
import time
from pathlib import Path

# Add src to path so we can import compact_layout
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

from compact_layout import LayoutEngine
from compact_layout.engine import preset_config

# Setup logging
logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger("benchmark")

SAMPLE_UNITS = [
    ("heading", "Discrete Probability Distributions"),
    ("definition", "A random variable X is discrete if it takes countably many values x1, x2, ..."),
    ("formula", "P(X = k) = \\binom{n}{k} p^k (1-p)^{n-k}"),
    ("text", "The binomial distribution counts successes in n independent Bernoulli trials. " * 4),
    ("example", "A fair coin is tossed 10 times. Find the probability of exactly 4 heads. "
                "P(X=4) = 210 / 1024 = 0.205."),
    ("list", "- mean np\n- variance np(1-p)\n- mode floor((n+1)p)"),
    ("theorem", "For large n with np fixed, Binomial(n, p) approaches Poisson(np)."),
    ("table", "k | P(X=k)\n0 | 0.001\n1 | 0.010\n2 | 0.044"),
]


def generate_units(sections: int):
    """Repeat the sample section with unique ids."""
    for section in range(sections):
        for index, (content_type, content) in enumerate(SAMPLE_UNITS):
            yield {"id": f"s{section}-{index}", "content": content, "type": content_type}


def benchmark_distribution(sections: int, columns: int, iterations: int):
    """Benchmark block creation + distribution."""
    print(f"\n--- Benchmarking Distribution (x{iterations}) ---")
    print(f"Sections: {sections}, Columns: {columns}")

    engine = LayoutEngine(preset_config("compact", "narrow", columns=columns))
    times = []
    result = None

    for i in range(iterations):
        start = time.perf_counter()
        blocks = engine.create_content_blocks(generate_units(sections))
        result = engine.distribute_content(blocks)
        duration = time.perf_counter() - start
        times.append(duration)
        print(f"Run {i+1}: {duration * 1000:.1f}ms ({len(blocks)} blocks -> {result.block_count} placed)")

    print(f"Average: {statistics.mean(times) * 1000:.1f}ms")
    print(f"Balance: {result.balance_score:.2f}, Overflow risk: {result.overflow_risk:.2f}")
    for column in result.columns:
        print(f"  Column {column.index}: {column.block_count} blocks, "
              f"{column.estimated_height:.2f}in / {column.capacity:.2f}in")
    return result


def main():
    parser = argparse.ArgumentParser(description="Benchmark the compact layout engine")
    parser.add_argument("--sections", type=int, default=3)
    parser.add_argument("--columns", type=int, default=2, choices=[1, 2, 3])
    parser.add_argument("--iterations", type=int, default=5)
    args = parser.parse_args()

    benchmark_distribution(args.sections, args.columns, args.iterations)


if __name__ == "__main__":
    main()
