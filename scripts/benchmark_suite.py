import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from snake_engine.core.session import GridSession
from snake_engine.core.stats import PathStats

def benchmark_size(width: int, height: int):
    print(f"\n--- Benchmarking {width}x{height} ({width*height/1e6:.2f}M cells) ---")

    # 1. Session setup (allocation + initial shuffle)
    start_time = time.time()
    session = GridSession(width, height, seed=42)
    print(f"Session Init: {time.time() - start_time:.4f}s")

    # 2. Fill
    print("Filling...")
    fill_start = time.time()
    paths = list(session.fill_all())
    fill_time = time.time() - fill_start
    print(f"Fill Time: {fill_time:.4f}s")
    print(f"Speed: {(width*height)/fill_time:,.0f} cells/sec")

    # 3. Path shape
    stats = PathStats.calculate(paths, width, height)
    print(f"Paths: {stats['paths']} (mean {stats['mean_length']:.1f}, longest {stats['longest']})")
    print(f"Dead ends: {stats['dead_ends']}, isolated cells: {stats['isolated']}")

def run_suite():
    sizes = [
        (50, 50),
        (200, 200),
        (500, 500),
        # (1000, 1000)   # ~1M cells, slow in pure Python
    ]

    for w, h in sizes:
        benchmark_size(w, h)

if __name__ == "__main__":
    run_suite()
