#!/usr/bin/env python3
# edge_sampler.py
import argparse
import random
import sys
from typing import Iterator, List, Optional, Tuple

N_NODES = 10000
N_EDGES = 9990000

Edge = Tuple[int, int, int]


class EdgeSampler:
    """
    Rejection sampler for a random weighted digraph.

    Draws (u, v, w) with u, v uniform in [0, node_count) and w uniform in
    [1, edge_count] until edge_count distinct, non-self-loop edges are found.
    With distinct_pairs=True the seen-set is keyed on (u, v); otherwise on the
    full (u, v, w) triple.
    """

    def __init__(self, node_count: int, edge_count: int,
                 rng: Optional[random.Random] = None, distinct_pairs: bool = True):
        if not all(isinstance(x, int) and not isinstance(x, bool) for x in (node_count, edge_count)):
            raise TypeError("node_count and edge_count must be ints.")
        if node_count < 1:
            raise ValueError(f"node_count must be positive, got {node_count}")
        if edge_count < 0:
            raise ValueError(f"edge_count must be non-negative, got {edge_count}")

        self.node_count = node_count
        self.edge_count = edge_count
        self.distinct_pairs = distinct_pairs
        self.rng = rng if rng is not None else random.Random()

        if edge_count > self.capacity:
            raise ValueError(
                f"Too many edges! Max possible edges for {node_count} vertices: {self.capacity}"
            )

        self.reset()

    def reset(self):
        self.seen = set()
        self.draws = 0
        self.self_loops = 0
        self.duplicates = 0

    @property
    def capacity(self) -> int:
        pairs = self.node_count * (self.node_count - 1)
        if self.distinct_pairs:
            return pairs
        return pairs * self.edge_count

    @property
    def rejections(self) -> int:
        return self.self_loops + self.duplicates

    def edges(self) -> Iterator[Edge]:
        """Yield edge_count fresh edges; each call starts a new run from an empty seen-set."""
        self.reset()
        n, m = self.node_count, self.edge_count
        randrange, randint = self.rng.randrange, self.rng.randint
        for _ in range(m):
            while True:
                u, v, w = randrange(n), randrange(n), randint(1, m)
                self.draws += 1
                if u == v:
                    self.self_loops += 1
                    continue
                key = (u, v) if self.distinct_pairs else (u, v, w)
                if key in self.seen:
                    self.duplicates += 1
                    continue
                break
            self.seen.add(key)
            yield (u, v, w)


def generate(node_count: int, edge_count: int, seed: Optional[int] = None,
             distinct_pairs: bool = True) -> List[Edge]:
    """Return exactly edge_count edges as a list of (u, v, w)."""
    sampler = EdgeSampler(node_count, edge_count, random.Random(seed), distinct_pairs)
    return list(sampler.edges())


def write_graph(node_count: int, edges, out=None) -> int:
    """
    Write the text report:
        <node_count>
        <edge_count>
        <u> <v> <w>   (one line per edge)
    Given an EdgeSampler, each line is written as soon as its edge is drawn.
    Any other iterable is collected into a list first so the header can carry
    its length.
    """
    if out is None:
        out = sys.stdout
    if isinstance(edges, EdgeSampler):
        edges.reset()
        edge_count = edges.edge_count
        edges = edges.edges()
    else:
        edges = list(edges)
        edge_count = len(edges)

    out.write(f"{node_count}\n{edge_count}\n")
    written = 0
    for u, v, w in edges:
        out.write(f"{u} {v} {w}\n")
        written += 1
    return written


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Generate a random weighted directed graph")
    ap.add_argument("--seed", type=int, default=None, help="random seed (default: nondeterministic)")
    ap.add_argument("--out", default=None, help="output file (default: stdout)")
    ap.add_argument("--triples", action="store_true",
                    help="legacy triple-keyed mode: only reject repeated (u, v, w) triples, "
                         "so parallel edges with different weights are allowed")
    args = ap.parse_args(argv)

    sampler = EdgeSampler(N_NODES, N_EDGES, random.Random(args.seed),
                          distinct_pairs=not args.triples)
    if args.out is None:
        written = write_graph(N_NODES, sampler, sys.stdout)
    else:
        with open(args.out, "w", encoding="utf-8") as f:
            written = write_graph(N_NODES, sampler, f)

    rate = sampler.rejections / max(1, sampler.draws)
    print(f"[N={N_NODES}] edges={written}, draws={sampler.draws}, "
          f"self_loops={sampler.self_loops}, duplicates={sampler.duplicates}, "
          f"rejection_rate={rate:.3f}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
