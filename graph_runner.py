"""
CLI that generates a random strongly-connected graph and reports its metrics.

Prints the graph, its radius and diameter, a shortest path between two random
vertices, and the eccentricity of a random vertex. Defaults can come from a
YAML config file; explicit flags win over the file.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple
import argparse
import random

from graph import Graph, Vertex
from graph_generator import generate_graph
from metrics import diameter, eccentricity, radius, shortest_path


DEFAULT_VERTICES = 10
DEFAULT_SPARSENESS = 15


@dataclass(frozen=True)
class RunConfig:
    vertices: Optional[int] = None
    sparseness: Optional[int] = None
    seed: Optional[int] = None


@dataclass(frozen=True)
class RunReport:
    graph: Graph
    radius: Optional[int]
    diameter: Optional[int]
    path_source: Optional[Vertex]
    path_target: Optional[Vertex]
    path: Optional[Tuple[List[Vertex], int]]
    eccentricity_vertex: Vertex
    eccentricity: Optional[int]


def load_config(path: Path) -> RunConfig:
    """
    Read vertices/sparseness/seed from a YAML mapping. Missing keys stay None.

    Raises:
        ValueError: if the file is not a mapping or a value is out of range.
    """
    import yaml  # type: ignore

    data = yaml.safe_load(path.read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must contain a mapping.")

    vertices = data.get("vertices")
    sparseness = data.get("sparseness")
    seed = data.get("seed")
    if vertices is not None and _positive_int(str(vertices)) is None:
        raise ValueError("vertices must be a positive integer.")
    if sparseness is not None and _non_negative_int(str(sparseness)) is None:
        raise ValueError("sparseness must be a non-negative integer.")
    return RunConfig(
        vertices=None if vertices is None else int(vertices),
        sparseness=None if sparseness is None else int(sparseness),
        seed=None if seed is None else int(seed),
    )


def format_graph(graph: Graph) -> str:
    """Render the graph one vertex per line: `  src -> [(dst, weight), ...]`."""
    lines = ["{"]
    for src in graph.vertices():
        edges = ", ".join(f"({dst}, {w})" for dst, w in graph.outgoing(src).items())
        lines.append(f"  {src} -> [{edges}]")
    lines.append("}")
    return "\n".join(lines)


def _or_undefined(value: Optional[int]) -> str:
    return "undefined" if value is None else str(value)


def run(
    vertex_count: int = DEFAULT_VERTICES,
    sparseness: int = DEFAULT_SPARSENESS,
    seed: Optional[int] = None,
) -> RunReport:
    """
    Generate a graph and print its metrics to stdout.

    The shortest-path section is skipped for graphs with fewer than two vertices.
    """
    print(f"Generating graph with {vertex_count} vertices and {sparseness} edges:")
    graph = generate_graph(vertex_count, sparseness, seed=seed)
    print(format_graph(graph))

    graph_radius = radius(graph)
    graph_diameter = diameter(graph)
    print("\nGraph properties:")
    print(f"Radius: {_or_undefined(graph_radius)}")
    print(f"Diameter: {_or_undefined(graph_diameter)}")

    rng = random.Random(seed)
    vertices = list(graph.vertices())
    src: Optional[Vertex] = None
    dst: Optional[Vertex] = None
    found: Optional[Tuple[List[Vertex], int]] = None
    if len(vertices) >= 2:
        src, dst = rng.sample(vertices, 2)
        print(f"\nComputing shortest path from {src} to {dst}:")
        found = shortest_path(graph, src, dst)
        if found is None:
            print("No path found.")
        else:
            path, total = found
            print(f"Path: {' -> '.join(path)} (Total weight: {total})")

    ecc_vertex = rng.choice(vertices)
    ecc = eccentricity(graph, ecc_vertex)
    print(f"\nEccentricity for vertex {ecc_vertex}:")
    print(_or_undefined(ecc))

    return RunReport(
        graph=graph,
        radius=graph_radius,
        diameter=graph_diameter,
        path_source=src,
        path_target=dst,
        path=found,
        eccentricity_vertex=ecc_vertex,
        eccentricity=ecc,
    )


def _positive_int(text: str) -> Optional[int]:
    try:
        value = int(text)
    except ValueError:
        return None
    return value if value > 0 else None


def _non_negative_int(text: str) -> Optional[int]:
    try:
        value = int(text)
    except ValueError:
        return None
    return value if value >= 0 else None


def _arg_type(check, message: str):
    def parse(text: str) -> int:
        value = check(text)
        if value is None:
            raise argparse.ArgumentTypeError(f"{text!r}: {message}")
        return value

    return parse


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="digraph-metrics",
        description="Generate a random strongly-connected digraph and print its metrics",
    )
    ap.add_argument(
        "-N", "--vertices", type=_arg_type(_positive_int, "must be a positive integer"),
        default=None, help=f"Number of vertices (default {DEFAULT_VERTICES})",
    )
    ap.add_argument(
        "-S", "--sparseness", type=_arg_type(_non_negative_int, "must be a non-negative integer"),
        default=None, help=f"Number of edges (default {DEFAULT_SPARSENESS})",
    )
    ap.add_argument("--seed", type=int, default=None, help="RNG seed for a reproducible run")
    ap.add_argument("--config", type=Path, default=None, help="Optional YAML config with defaults")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Unrecognised flags are ignored.
    args, _ = build_parser().parse_known_args(argv)
    cfg = load_config(args.config) if args.config is not None else RunConfig()

    n = args.vertices if args.vertices is not None else cfg.vertices
    if n is None:
        print(f"Number of vertices (-N) not provided, defaulting to {DEFAULT_VERTICES}.")
        n = DEFAULT_VERTICES
    s = args.sparseness if args.sparseness is not None else cfg.sparseness
    if s is None:
        print(f"Sparseness (-S) not provided, defaulting to {DEFAULT_SPARSENESS}.")
        s = DEFAULT_SPARSENESS
    seed = args.seed if args.seed is not None else cfg.seed

    print(f"[run] vertices={n} sparseness={s} seed={seed}")
    try:
        run(n, s, seed=seed)
    except ValueError as exc:
        print(f"[run] failed vertices={n} sparseness={s}: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
