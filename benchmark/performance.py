"""
Resolver / detector micro-benchmark.

Usage:
    python benchmark/performance.py [iterations]
"""

import sys
import time

from language_detector import (
    LanguageDetector,
    BrowserOriginAdapter,
    Navigator,
    translate_origin_language,
    translate_origin_language_uncached,
)

TEST_CASES = [
    ["zh-Hans-CN"],
    ["en-US"],
    ["fr-CA"],
    ["zh-Hans-CN", "en-US"],
    ["unknown-XX", "zh-CN", "en"],
    ["de-DE", "fr-FR", "es-ES", "it-IT", "pt-BR"],
    ["zh-Hans-CN-x-test", "zh-Hans-CN", "zh-Hans", "zh-CN", "zh"],
]


def benchmark(name, fn, iterations=10000):
    start = time.perf_counter()
    for i in range(iterations):
        fn(TEST_CASES[i % len(TEST_CASES)])
    duration = (time.perf_counter() - start) * 1000
    avg = duration / iterations

    print(f"{name}:")
    print(f"  Total time: {duration:.2f}ms")
    print(f"  Average time: {avg:.4f}ms")
    print(f"  Operations/sec: {1000 / avg:.0f}")
    print()


def main():
    iterations = int(sys.argv[1]) if len(sys.argv) > 1 else 10000
    navigator = Navigator(languages=("zh-Hans-CN", "zh-CN", "zh", "en-US", "en"), language="zh-Hans-CN")
    detector = LanguageDetector(BrowserOriginAdapter(navigator))

    print("Performance Benchmark\n")
    benchmark("translate_origin_language (cached)", translate_origin_language, iterations)
    benchmark("translate_origin_language (uncached)", translate_origin_language_uncached, iterations)
    benchmark("get_language_name", lambda _: detector.get_language_name(), iterations)
    benchmark("detect (cached)", lambda _: detector.detect(), iterations)
    benchmark("detect (uncached)", lambda _: detector.detect(use_cache=False), iterations)
    benchmark("detect (standardized)", lambda _: detector.detect(standardize=True), iterations)


if __name__ == "__main__":
    main()
