import os

from graphpath.baseline import run_dijkstra
from graphpath.dijkstra import DijkstraEngine
from graphpath.graph_store import Graph
from graphpath.metrics import Metrics, graph_stats, trace_summary


def build_graph(config):
    """Create config['vertices'] vertices and add config['edges']."""
    g = Graph()
    for _ in range(config.get("vertices", 0)):
        g.add_vertex()
    for u, v, w in config.get("edges", []):
        if g.add_edge(u, v, w) is None:
            print(f"  Skipping duplicate edge {u}-{v}")
    return g


def _describe(result):
    if result.path:
        return f"{' -> '.join(result.path)} (cost = {result.cost})"
    return "unreachable"


def run_simulation(config):
    print("Building graph...")
    g = build_graph(config)
    print(graph_stats(g))

    engine = DijkstraEngine(g)
    src, dst = config["source"], config["target"]
    print(f"\n=== Shortest path {src} -> {dst} ===")

    if config.get("trace", False):
        result = engine.find_shortest_path_step_by_step(src, dst)
        for step in result.steps:
            print(f"  Iteration {step.iteration}: settle {step.current} "
                  f"at {step.min_distance}, unvisited {list(step.unvisited)}")
        summary = trace_summary(result.steps)
        print(f"  Visit order: {summary['visit_order']}")
    else:
        result = engine.find_shortest_path(src, dst)

    print(f"Result: {_describe(result)}")

    _, ref_cost = run_dijkstra(g, src, dst)
    expected = None if ref_cost == float('inf') else ref_cost
    if expected != result.cost:
        print(f"Warning: networkx baseline cost {expected} differs from {result.cost}")

    metrics = Metrics()
    metrics.log(result, engine.stats['iterations'])
    for q_src, q_dst in config.get("queries", []):
        before = engine.stats['iterations']
        q = engine.find_shortest_path(q_src, q_dst)
        metrics.log(q, engine.stats['iterations'] - before)
        print(f"  {q_src} -> {q_dst}: {_describe(q)}")

    print("\n=== Simulation Complete ===")
    print(metrics.summary())
    print(engine.get_statistics())

    if config.get("plot", False):
        from graphpath.visualize import plot_path, plot_trace
        out_dir = os.path.dirname(config.get("plot_path") or "")
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        plot_path(g, result, save_path=config.get("plot_path"))
        if config.get("trace", False) and result.steps:
            trace_file = config.get("plot_path")
            if trace_file:
                trace_file = trace_file.rsplit('.', 1)[0] + "_trace.png"
            plot_trace(result.steps, save_path=trace_file)

    return result
