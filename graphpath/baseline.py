import networkx as nx

from graphpath.graph_store import Graph


def to_networkx(graph):
    """
    Copy a graphpath Graph into an undirected networkx Graph.
    Node order follows the vertex order; each edge carries a 'weight' attribute.
    """
    G = nx.Graph()
    G.add_nodes_from(graph.vertices)
    for e in graph.edges:
        G.add_edge(e.u, e.v, weight=e.weight)
    return G


def run_dijkstra(graph, source, target):
    """
    Reference shortest path computed by networkx.
    Returns (path, cost), or (None, inf) when no path exists.
    """
    G = to_networkx(graph)
    try:
        path = nx.dijkstra_path(G, source, target, weight='weight')
        cost = nx.dijkstra_path_length(G, source, target, weight='weight')
        return path, cost
    except nx.NetworkXNoPath:
        return None, float('inf')


def build_sample_graph():
    """
    The five-vertex example network:
    A-B(4), A-D(2), B-C(3), B-D(1), B-E(7), C-E(2), D-E(5)
    """
    g = Graph()
    a, b, c, d, e = (g.add_vertex() for _ in range(5))

    # (u, v, weight)
    edges = [
        (a, b, 4),
        (a, d, 2),
        (b, c, 3),
        (b, d, 1),
        (b, e, 7),
        (c, e, 2),
        (d, e, 5)
    ]

    for u, v, w in edges:
        g.add_edge(u, v, w)

    return g


if __name__ == "__main__":
    print("Running networkx Dijkstra baseline...")
    g = build_sample_graph()
    path, cost = run_dijkstra(g, 'A', 'E')
    print(f"Shortest path from A to E: {path} (total cost = {cost})")
