import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from labyrinth.algo.factory import ALGORITHMS, get_generator


def benchmark_size(width: int, height: int):
    print(f"\n--- Benchmarking {width}x{height} ({width*height:,} cells) ---")
    print(f"{'ALGORITHM':<12} | {'TIME (s)':<10} | {'CELLS/SEC':<12} | {'PASSAGES':<10}")
    print("-" * 52)

    for name in ALGORITHMS:
        algo = get_generator(name, width, height, seed=42)

        gen_start = time.time()
        algo.run_all()
        gen_time = time.time() - gen_start

        speed = (width * height) / gen_time if gen_time > 0 else float("inf")
        passages = algo.grid.count_open_passages()
        print(f"{name:<12} | {gen_time:<10.4f} | {speed:<12,.0f} | {passages:<10}")


def run_suite():
    sizes = [
        (50, 50),
        (200, 200),
        (500, 500),
    ]

    for w, h in sizes:
        benchmark_size(w, h)


if __name__ == "__main__":
    run_suite()
