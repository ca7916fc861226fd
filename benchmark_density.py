#!/usr/bin/env python3
# benchmark_density.py
import argparse
import gc
import random
import time
from typing import List

import matplotlib.pyplot as plt

from edge_sampler import EdgeSampler

# ------------------------------------------------------------
# 1) sampler runs at increasing density
# ------------------------------------------------------------
def benchmark(node_count: int, densities: List[float], repeats: int = 3, seed: int = 12345):
    """
    For each density d in (0, 1]:
      - edge_count = round(d * N * (N - 1))
      - run the pair-keyed sampler `repeats` times
      - record mean time, mean draws per edge and rejection rate
    """
    results = []
    capacity = node_count * (node_count - 1)
    for d in densities:
        M = max(1, round(d * capacity))

        times = []
        draws = rejections = 0
        for r in range(repeats):
            gc.collect()
            sampler = EdgeSampler(node_count, M, random.Random(seed + r))
            t0 = time.perf_counter()
            for _ in sampler.edges():
                pass
            t1 = time.perf_counter()
            times.append(t1 - t0)
            draws += sampler.draws
            rejections += sampler.rejections
        avg = sum(times) / len(times)

        print(f"[N={node_count}] density={d:.2f} M={M} time={avg:.4f}s "
              f"draws/edge={draws / (M * repeats):.2f} rejected={rejections / max(1, draws):.3f}")

        results.append({
            "density": d,
            "M": M,
            "time_s": avg,
            "draws_per_edge": draws / (M * repeats),
            "rejection_rate": rejections / max(1, draws),
        })
    return results

# ------------------------------------------------------------
# 2) 플로팅/출력
# ------------------------------------------------------------
def plot_results(results, title="Sampler cost vs density"):
    ds = [r["density"] for r in results]
    ts = [r["time_s"] for r in results]
    dpe = [r["draws_per_edge"] for r in results]

    fig, ax1 = plt.subplots()
    ax1.plot(ds, ts, marker="o", label="time (s)")
    ax1.set_xlabel("Density M / (N(N-1))")
    ax1.set_ylabel("Runtime (s)")
    ax1.set_yscale("log")
    ax2 = ax1.twinx()
    ax2.plot(ds, dpe, marker="s", color="tab:red", label="draws per edge")
    ax2.set_ylabel("Draws per accepted edge")
    ax1.set_title(title)
    fig.legend(loc="upper left")
    fig.tight_layout()
    fig.savefig("benchmark_density.png", dpi=150)
    plt.show()

def print_table(results):
    print("\ndensity, M, time_s, draws_per_edge, rejection_rate")
    for r in results:
        print("{:>7.2f}, {:>8}, {:>8.4f}, {:>14.2f}, {:>14.3f}".format(
            r["density"], r["M"], r["time_s"], r["draws_per_edge"], r["rejection_rate"]
        ))

def main(argv=None):
    ap = argparse.ArgumentParser(description="Rejection-sampling cost as the graph approaches saturation")
    ap.add_argument("--nodes", type=int, default=200)
    ap.add_argument("--repeats", type=int, default=3)
    ap.add_argument("--seed", type=int, default=12345)
    ap.add_argument("--no-plot", action="store_true")
    args = ap.parse_args(argv)

    densities = [0.1, 0.25, 0.5, 0.75, 0.9, 0.95, 0.99, 1.0]
    results = benchmark(args.nodes, densities, repeats=args.repeats, seed=args.seed)
    print_table(results)
    if results and not args.no_plot:
        plot_results(results, title=f"Sampler cost vs density (N={args.nodes})")
    return results


if __name__ == "__main__":
    main()
