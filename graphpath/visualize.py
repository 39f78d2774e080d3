"""
Static drawings of a graph and of a Dijkstra trace.
Path vertices/edges are highlighted; nothing is written back to the graph.
"""

import matplotlib.pyplot as plt
import networkx as nx

from graphpath.baseline import to_networkx

NODE_COLOR = '#3498db'
PATH_NODE_COLOR = '#e74c3c'
EDGE_COLOR = '#34495e'
PATH_EDGE_COLOR = '#27ae60'


def _finish(fig, save_path):
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
        plt.close(fig)
    else:
        plt.show()
    return save_path


def plot_path(graph, result=None, save_path=None, seed=42):
    """Draw the graph, highlighting result.path when one was found."""
    G = to_networkx(graph)
    pos = nx.spring_layout(G, seed=seed)
    fig, ax = plt.subplots(figsize=(8, 6))

    path = list(result.path) if result is not None else []
    path_edges = [(e.u, e.v) for e in graph.path_edges(path)]
    other_edges = [(u, v) for u, v in G.edges() if not any(
        {u, v} == {a, b} for a, b in path_edges)]

    nx.draw_networkx_edges(G, pos, edgelist=other_edges, width=2,
                           edge_color=EDGE_COLOR, ax=ax)
    nx.draw_networkx_edges(G, pos, edgelist=path_edges, width=5,
                           edge_color=PATH_EDGE_COLOR, ax=ax)
    node_colors = [PATH_NODE_COLOR if n in path else NODE_COLOR for n in G.nodes()]
    nx.draw_networkx_nodes(G, pos, node_color=node_colors, node_size=700,
                           edgecolors='#2c3e50', ax=ax)
    nx.draw_networkx_labels(G, pos, font_color='white', font_weight='bold', ax=ax)
    nx.draw_networkx_edge_labels(G, pos, edge_labels=nx.get_edge_attributes(G, 'weight'),
                                 ax=ax)

    if result is None:
        title = "Graph"
    elif path:
        title = f"{' -> '.join(path)} (cost {result.cost})"
    else:
        title = "Target unreachable"
    ax.set_title(title)
    ax.axis('off')
    return _finish(fig, save_path)


def plot_trace(steps, save_path=None):
    """Minimum selected distance per iteration of a step-by-step run."""
    fig, ax = plt.subplots(figsize=(7, 4))
    xs = [s.iteration for s in steps]
    ys = [s.min_distance for s in steps]
    ax.plot(xs, ys, marker='o')
    for s in steps:
        ax.annotate(s.current, (s.iteration, s.min_distance),
                    textcoords='offset points', xytext=(0, 6), ha='center')
    ax.set_title("Settled Distance per Iteration")
    ax.set_xlabel("Iteration")
    ax.set_ylabel("Distance")
    ax.grid(True)
    fig.tight_layout()
    return _finish(fig, save_path)
