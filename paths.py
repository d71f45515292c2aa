"""
Path reconstruction from a Dijkstra predecessor map.
"""

from typing import List, Mapping

from graph import Vertex


def reconstruct_path(
    predecessors: Mapping[Vertex, Vertex], source: Vertex, target: Vertex
) -> List[Vertex]:
    """
    Walk parents back from target to source and return the forward path.

    Returns [source] when source == target and [] when target has no parent
    (unreachable). The walk is bounded by the size of the predecessor map; a
    chain that never reaches source means the map is inconsistent.

    Raises:
        AssertionError: if the parent chain does not end at source.
    """
    if source == target:
        return [source]
    if target not in predecessors:
        return []

    path = [target]
    v = target
    for _ in range(len(predecessors) + 1):
        v = predecessors.get(v)
        if v is None:
            break
        path.append(v)
        if v == source:
            path.reverse()
            return path

    raise AssertionError(
        f"Predecessor chain from {target!r} does not reach source {source!r}."
    )
