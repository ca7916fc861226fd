#!/usr/bin/env python3
# graph_check.py
"""
Reads a generated graph report back and verifies it:
    - header has node and edge counts, edge lines have exactly three ints
    - exactly edge_count edge lines
    - no self-loops, endpoints in [0, N), weights in [1, M]
    - no repeated (u, v, w) triple (and optionally no repeated (u, v) pair)

$ python edge_sampler.py --seed 1 | python graph_check.py
"""

import argparse
import sys
from typing import Iterable, List, Tuple

from sortedcontainers import SortedSet

MAX_REPORTED = 10


def _ints(line: str, lineno: int) -> List[int]:
    try:
        return [int(tok) for tok in line.split()]
    except ValueError:
        raise ValueError(f"line {lineno}: non-integer token in {line.strip()!r}") from None


def read_graph(lines: Iterable[str]) -> Tuple[int, int, List[Tuple[int, int, int]]]:
    header = []
    edges = []
    for lineno, line in enumerate(lines, 1):
        if not line.strip():
            continue
        fields = _ints(line, lineno)
        if len(header) < 2:
            if len(fields) != 1:
                raise ValueError(f"line {lineno}: expected a single count, got {line.strip()!r}")
            header.append(fields[0])
            continue
        if len(fields) != 3:
            raise ValueError(f"line {lineno}: expected 'u v w', got {line.strip()!r}")
        edges.append((fields[0], fields[1], fields[2]))

    if len(header) < 2:
        raise ValueError("missing header: expected node count and edge count lines")
    return header[0], header[1], edges


def check_graph(node_count, edge_count, edges, distinct_pairs=False) -> List[str]:
    """Return a list of problems (empty if the graph is valid)."""
    problems = []
    if len(edges) != edge_count:
        problems.append(f"edge count mismatch: header says {edge_count}, found {len(edges)}")

    seen_triples = set()
    seen_pairs = set()
    dup_triples = SortedSet()
    dup_pairs = SortedSet()
    for i, (u, v, w) in enumerate(edges):
        if u == v:
            problems.append(f"edge {i}: self-loop on {u}")
        if not (0 <= u < node_count and 0 <= v < node_count):
            problems.append(f"edge {i}: endpoint out of range [0, {node_count}): ({u}, {v})")
        if not (1 <= w <= edge_count):
            problems.append(f"edge {i}: weight {w} out of range [1, {edge_count}]")

        if (u, v, w) in seen_triples:
            dup_triples.add((u, v, w))
        seen_triples.add((u, v, w))
        if distinct_pairs:
            if (u, v) in seen_pairs:
                dup_pairs.add((u, v))
            seen_pairs.add((u, v))

    if dup_triples:
        problems.append(f"{len(dup_triples)} duplicate triple(s): {list(dup_triples[:MAX_REPORTED])}")
    if dup_pairs:
        problems.append(f"{len(dup_pairs)} duplicate pair(s): {list(dup_pairs[:MAX_REPORTED])}")
    return problems


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Verify a generated graph report")
    ap.add_argument("path", nargs="?", default="-", help="report file (default: stdin)")
    ap.add_argument("--pairs", action="store_true", help="also reject repeated (u, v) pairs")
    args = ap.parse_args(argv)

    try:
        if args.path == "-":
            N, M, edges = read_graph(sys.stdin)
        else:
            with open(args.path, "r", encoding="utf-8") as f:
                N, M, edges = read_graph(f)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    problems = check_graph(N, M, edges, distinct_pairs=args.pairs)
    if problems:
        for p in problems:
            print(p)
        return 1
    print(f"OK: N={N}, M={M}, {len(edges)} edges")
    return 0


if __name__ == "__main__":
    sys.exit(main())
