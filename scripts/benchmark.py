#!/usr/bin/env python3
"""Benchmark script for memberorder performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
Analysis time should grow linearly with file size.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

_CLASS_TEMPLATE = """\
public class Generated{index} : MonoBehaviour
{{
    public const int Max{index} = 10;
    private const string Tag{index} = "tag";
    private readonly List<int> _items{index} = new List<int>();
    [SerializeField] private float speed{index};
    private int _count{index};
    public string Title{index};
    public int Count{index} {{ get; private set; }}
    public event Action Changed{index};

    void Update()
    {{
        if (_count{index} > Max{index})
        {{
            Changed{index}?.Invoke();
        }}
    }}

    public void Reset{index}(int value)
    {{
        _count{index} = value;
    }}

    private int Helper{index}() => _count{index} * 2;
}}
"""


def make_source(class_count: int) -> str:
    """Synthetic C# file with class_count ordered classes."""
    return "\n".join(_CLASS_TEMPLATE.format(index=i) for i in range(class_count))


def benchmark_import_time() -> float:
    """Measure import time of memberorder package."""
    start = time.perf_counter()
    import memberorder  # noqa: F401

    return time.perf_counter() - start


def benchmark_analysis(class_count: int, repeat: int = 5) -> float:
    """Measure best-of-repeat uncached analysis time."""
    from memberorder.application.services.analyzer import MemberOrderAnalyzer

    analyzer = MemberOrderAnalyzer()
    text = make_source(class_count)
    best = float("inf")
    for _ in range(repeat):
        start = time.perf_counter()
        analyzer.analyze_text(text)
        best = min(best, time.perf_counter() - start)
    return best


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run memberorder benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": benchmark_import_time(),
        }
    ]

    for class_count in (10, 100, 1000):
        results.append(
            {
                "name": f"Analyze {class_count} Classes",
                "unit": "seconds",
                "value": benchmark_analysis(class_count),
            }
        )

    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for result in results:
        print(f"  {result['name']}: {result['value']:.4f} {result['unit']}")


if __name__ == "__main__":
    main()
