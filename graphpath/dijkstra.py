"""
Dijkstra shortest path over a graphpath Graph.

Classical O(V^2 + E) variant: each iteration scans the unvisited vertices
linearly for the smallest tentative distance. Among equal distances the
vertex that comes first in the graph's vertex order wins, so results are
deterministic for a given insertion history.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from graphpath.graph_store import VertexNotFoundError

logger = logging.getLogger(__name__)

INF = float('inf')


@dataclass
class PathResult:
    path: List[str]
    cost: Optional[int]
    distances: Dict[str, float]
    predecessors: Dict[str, Optional[str]]

    @property
    def reachable(self):
        return bool(self.path)


@dataclass(frozen=True)
class IterationSnapshot:
    """State right after `current` was taken out of the unvisited set."""
    iteration: int
    current: str
    distances: Dict[str, float]
    predecessors: Dict[str, Optional[str]]
    unvisited: Tuple[str, ...]
    min_distance: float


@dataclass
class StepByStepResult(PathResult):
    steps: List[IterationSnapshot] = field(default_factory=list)

    @property
    def total_iterations(self):
        return len(self.steps)


def reconstruct_path(predecessors, source, target):
    """
    Walk predecessor links back from target.
    Returns [] when the chain does not end at source (target unreachable).
    """
    path = []
    node = target
    while node is not None:
        path.append(node)
        node = predecessors.get(node)
    if path[-1] != source:
        return []
    path.reverse()
    return path


def _format_distance(d):
    return "inf" if d == INF else str(d)


class DijkstraEngine:
    """
    Shortest-path queries against one graph. The graph is only read.

    Keeps running counters in `stats` (see get_statistics).
    """

    def __init__(self, graph):
        self.graph = graph
        self.stats = {
            'runs': 0,
            'paths_computed': 0,
            'iterations': 0,
            'relaxations': 0,
            'unreachable': 0
        }

    def _require(self, *vids):
        for vid in vids:
            if vid not in self.graph:
                raise VertexNotFoundError(vid)

    def _initial_state(self, source):
        vertices = self.graph.vertices
        distances = {vid: INF for vid in vertices}
        distances[source] = 0
        predecessors = dict.fromkeys(vertices)
        # dict keeps vertex order for the tie-break scan
        unvisited = dict.fromkeys(vertices)
        return distances, predecessors, unvisited

    def _search(self, distances, predecessors, unvisited, target=None):
        """
        Main loop, mutating the given state in place.

        Yields (current, min_distance) once per iteration, after the
        selected vertex leaves the unvisited set and before its
        neighbours are relaxed. target=None runs until every reachable
        vertex is settled.
        """
        self.stats['runs'] += 1
        while unvisited:
            current = None
            min_distance = INF
            for vid in unvisited:
                if distances[vid] < min_distance:
                    min_distance = distances[vid]
                    current = vid

            if current is None:
                logger.debug("No reachable vertices left: %s", list(unvisited))
                break

            del unvisited[current]
            self.stats['iterations'] += 1
            logger.debug("Selected %s (distance %s)", current, min_distance)
            yield current, min_distance

            if current == target:
                break

            for neighbor, weight in self.graph.neighbors(current):
                if neighbor not in unvisited:
                    continue
                candidate = distances[current] + weight
                if candidate < distances[neighbor]:
                    distances[neighbor] = candidate
                    predecessors[neighbor] = current
                    self.stats['relaxations'] += 1
                    logger.debug("Relaxed %s = %s via %s", neighbor, candidate, current)

    def _result(self, distances, predecessors, source, target):
        path = reconstruct_path(predecessors, source, target)
        cost = distances[target]
        if not path:
            self.stats['unreachable'] += 1
            cost = None
            logger.info("%s is unreachable from %s", target, source)
        else:
            logger.info("Path %s, cost %s", " -> ".join(path), cost)
        return path, cost

    def find_shortest_path(self, source, target):
        """
        Minimum-cost path from source to target.

        Returns:
            PathResult; path == [] and cost is None when target is unreachable
        Raises:
            VertexNotFoundError: source or target not in the graph
        """
        self._require(source, target)
        self.stats['paths_computed'] += 1

        if source == target:
            distances, predecessors, _ = self._initial_state(source)
            return PathResult([source], 0, distances, predecessors)

        distances, predecessors, unvisited = self._initial_state(source)
        for _ in self._search(distances, predecessors, unvisited, target):
            pass

        path, cost = self._result(distances, predecessors, source, target)
        return PathResult(path, cost, distances, predecessors)

    def iter_steps(self, source, target):
        """
        Lazy trace of the main loop: one IterationSnapshot per iteration,
        up to the one that settles target or until nothing reachable is left.
        The returned generator can be consumed once.
        """
        self._require(source, target)
        distances, predecessors, unvisited = self._initial_state(source)
        return self._snapshots(distances, predecessors, unvisited, target)

    def _snapshots(self, distances, predecessors, unvisited, target):
        iteration = 0
        for current, min_distance in self._search(distances, predecessors, unvisited, target):
            iteration += 1
            yield IterationSnapshot(
                iteration=iteration,
                current=current,
                distances=dict(distances),
                predecessors=dict(predecessors),
                unvisited=tuple(unvisited),
                min_distance=min_distance
            )

    def find_shortest_path_step_by_step(self, source, target, on_step=None):
        """
        Same answer as find_shortest_path, plus every intermediate snapshot.

        Args:
            on_step: optional callable invoked with each IterationSnapshot
        """
        self._require(source, target)
        self.stats['paths_computed'] += 1

        distances, predecessors, unvisited = self._initial_state(source)
        steps = []
        for step in self._snapshots(distances, predecessors, unvisited, target):
            steps.append(step)
            if on_step is not None:
                on_step(step)

        path, cost = self._result(distances, predecessors, source, target)
        return StepByStepResult(path, cost, distances, predecessors, steps=steps)

    def has_path(self, source, target):
        return self.find_shortest_path(source, target).reachable

    def all_distances(self, source):
        """
        Cost from source to every vertex (None where unreachable).
        One exhaustive run; each value equals find_shortest_path(source, v).cost.
        """
        self._require(source)
        distances, predecessors, unvisited = self._initial_state(source)
        for _ in self._search(distances, predecessors, unvisited):
            pass
        return {vid: (None if d == INF else d) for vid, d in distances.items()}

    def debug_state(self, distances, predecessors, unvisited):
        """Text dump of the working state, also logged at DEBUG."""
        lines = ["Distances:"]
        for vid, d in distances.items():
            lines.append(f"  {vid}: {_format_distance(d)}")
        lines.append("Predecessors:")
        for vid, pred in predecessors.items():
            lines.append(f"  {vid}: {pred if pred is not None else '-'}")
        lines.append(f"Unvisited: [{', '.join(unvisited)}]")
        text = "\n".join(lines)
        logger.debug("Algorithm state:\n%s", text)
        return text

    def get_statistics(self):
        stats = dict(self.stats)
        if stats['runs'] > 0:
            stats['avg_iterations'] = stats['iterations'] / stats['runs']
        else:
            stats['avg_iterations'] = 0.0
        return stats

    def reset_statistics(self):
        for key in self.stats:
            self.stats[key] = 0


def shortest_path(graph, source, target):
    """Convenience wrapper: DijkstraEngine(graph).find_shortest_path(source, target)."""
    return DijkstraEngine(graph).find_shortest_path(source, target)
