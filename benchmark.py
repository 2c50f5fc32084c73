"""
Benchmark: scalardist vs byte-level counting and existing Levenshtein packages.

This benchmark compares scalardist against:
    1. The same DP run over UTF-8 bytes — the mistake scalardist exists to avoid
    2. python-Levenshtein (`Levenshtein`) — C implementation, if installed
    3. rapidfuzz — C++ implementation, if installed

The point is NOT "we're faster" — the pure-Python DP will lose on time.
The point is that the number is counted in characters, which a byte-level
DP gets wrong for anything outside ASCII.
"""

import sys
import os
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from scalardist.core import levenshtein, DistanceMatrix
from scalardist.api import distance, diff, changes
from scalardist.formats import to_scalars


# ═══════════════════════════════════════════════════════════════════
#  TEST DATA
# ═══════════════════════════════════════════════════════════════════

STRING_PAIRS = [
    ("kitten", "sitting"),
    ("saturday", "sunday"),
    ("intention", "execution"),
    ("🐝🔨", "🔨🐝"),
    ("café crème", "cafe creme"),
    ("東京都庁", "京都府庁"),
    ("Ωμέγα", "Ομέγα"),
    ("pneumonoultramicroscopicsilicovolcanoconiosis",
     "pseudopseudohypoparathyroidism"),
]


def _try_import(name):
    """Safely attempt to import an optional dependency by name."""
    import importlib
    try:
        return importlib.import_module(name)
    except ImportError:
        return None


# ═══════════════════════════════════════════════════════════════════
#  BENCHMARKS
# ═══════════════════════════════════════════════════════════════════

def benchmark_scalars_vs_bytes():
    """Show where byte-level counting diverges from scalar counting."""
    print("=" * 70)
    print("  §1  SCALARS vs BYTES")
    print("=" * 70)
    print()

    for s1, s2 in STRING_PAIRS:
        by_scalar = distance(s1, s2)
        by_byte = levenshtein(s1.encode("utf-8"), s2.encode("utf-8"))
        mark = "=" if by_scalar == by_byte else "≠"
        print(f"  d({s1[:20]!r}, {s2[:20]!r})  scalars={by_scalar:<3} "
              f"{mark} bytes={by_byte}")

    print()
    print("  Every '≠' row is a pair a byte-oriented implementation miscounts.")
    print()


def benchmark_vs_packages():
    """Compare results and timings with C-backed packages (if available)."""
    print("=" * 70)
    print("  §2  COMPARISON WITH EXISTING PACKAGES")
    print("=" * 70)
    print()

    lev_mod = _try_import("Levenshtein")
    rapidfuzz = _try_import("rapidfuzz")

    t0 = time.perf_counter()
    ours = [distance(a, b) for a, b in STRING_PAIRS]
    dt = time.perf_counter() - t0
    print(f"  scalardist:          {ours}  [{dt*1000:.2f}ms]")

    if lev_mod:
        t0 = time.perf_counter()
        theirs = [lev_mod.distance(a, b) for a, b in STRING_PAIRS]
        dt = time.perf_counter() - t0
        agree = "agrees" if theirs == ours else "DISAGREES"
        print(f"  python-Levenshtein:  {theirs}  [{dt*1000:.2f}ms]  {agree}")
    else:
        print(f"  python-Levenshtein:  NOT INSTALLED (pip install Levenshtein)")

    if rapidfuzz:
        from rapidfuzz.distance import Levenshtein as RFLevenshtein
        t0 = time.perf_counter()
        theirs = [RFLevenshtein.distance(a, b) for a, b in STRING_PAIRS]
        dt = time.perf_counter() - t0
        agree = "agrees" if theirs == ours else "DISAGREES"
        print(f"  rapidfuzz:           {theirs}  [{dt*1000:.2f}ms]  {agree}")
    else:
        print(f"  rapidfuzz:           NOT INSTALLED (pip install rapidfuzz)")
    print()


def benchmark_edit_scripts():
    """Time diff on realistic strings and show the script size."""
    print("=" * 70)
    print("  §3  EDIT SCRIPTS")
    print("=" * 70)
    print()

    for s1, s2 in STRING_PAIRS[:6]:
        t0 = time.perf_counter()
        script = diff(s1, s2)
        dt = time.perf_counter() - t0
        print(f"  {s1!r} → {s2!r}: {len(changes(script))} edits "
              f"[{dt*1000:.2f}ms]")
        for entry in changes(script):
            print(f"      {entry!r}")
    print()


def benchmark_scaling():
    """Test how the DP scales with input length."""
    print("=" * 70)
    print("  §4  SCALING")
    print("=" * 70)
    print()

    for n in [10, 100, 500, 1000]:
        a = to_scalars("🐝a" * (n // 2))
        b = to_scalars("a🐝" * (n // 2))

        t0 = time.perf_counter()
        d = levenshtein(a, b)
        dt_two_row = time.perf_counter() - t0

        t0 = time.perf_counter()
        DistanceMatrix.compute(a, b)
        dt_full = time.perf_counter() - t0

        print(f"  Length {n:>5}: d={d:>5}  two-row={dt_two_row*1000:>8.2f}ms  "
              f"full matrix={dt_full*1000:>8.2f}ms")

    print()


def main():
    print()
    print("╔══════════════════════════════════════════════════════════════════════╗")
    print("║          SCALAR EDIT DISTANCE — BENCHMARK SUITE                     ║")
    print("║          scalardist v0.1.0                                          ║")
    print("╚══════════════════════════════════════════════════════════════════════╝")
    print()

    benchmark_scalars_vs_bytes()
    benchmark_vs_packages()
    benchmark_edit_scripts()
    benchmark_scaling()


if __name__ == "__main__":
    main()
