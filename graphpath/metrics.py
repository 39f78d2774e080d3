import numpy as np


def graph_stats(graph):
    """
    Size and shape of a graph:
      - vertices, edges: |V|, |E|
      - max_degree, avg_degree
      - density: |E| / (|V|(|V|-1)/2), 0.0 below two vertices
    """
    n = len(graph)
    m = len(graph.edges)
    degrees = np.array([graph.degree(v) for v in graph.vertices], dtype=float)
    pairs = n * (n - 1) / 2
    return {
        'vertices': n,
        'edges': m,
        'max_degree': int(degrees.max()) if n else 0,
        'avg_degree': float(degrees.mean()) if n else 0.0,
        'density': m / pairs if pairs else 0.0
    }


def trace_summary(steps):
    """Summarise a list of IterationSnapshot objects from a step-by-step run."""
    min_distances = np.array([s.min_distance for s in steps], dtype=float)
    return {
        'iterations': len(steps),
        'visit_order': [s.current for s in steps],
        'min_distances': min_distances,
        'final_min_distance': float(min_distances[-1]) if len(steps) else None
    }


class Metrics:
    """Collects per-query results across a batch of shortest-path runs."""

    def __init__(self):
        self.data = {
            "cost": [],
            "hops": [],
            "iterations": []
        }
        self.unreachable = 0

    def log(self, result, iterations=0):
        if not result.path:
            self.unreachable += 1
            return
        self.data["cost"].append(result.cost)
        self.data["hops"].append(len(result.path) - 1)
        self.data["iterations"].append(iterations)

    def summary(self):
        out = {k: float(np.mean(v)) if v else 0.0 for k, v in self.data.items()}
        out["unreachable"] = self.unreachable
        return out
