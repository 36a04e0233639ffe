import logging
from typing import Any, Dict

import networkx as nx

logger = logging.getLogger(__name__)


def load_graph(graph_file: str, largest_component: bool = False) -> nx.Graph:
    """
    Load an undirected graph from adjacency list format.
    First line: <num_nodes> <num_edges> [fmt]
    Following lines: <neighbor1> <neighbor2> ...
    When fmt ends in 1 each neighbor is followed by an edge weight:
    <neighbor1> <weight1> <neighbor2> <weight2> ...
    Lines starting with % are comments.
    Note: Node IDs start from 0
    """
    logger.info("Loading graph file: %s", graph_file)

    # Read the graph into memory first
    with open(graph_file, 'r') as f:
        lines = [line for line in f.readlines() if not line.lstrip().startswith('%')]

    # Parse header
    header = lines[0].split()
    n, m = int(header[0]), int(header[1])
    weighted = len(header) > 2 and header[2].endswith('1')
    logger.debug("Header specifies %d nodes and %d edges (weighted=%s)", n, m, weighted)

    # Initialize graph
    G = nx.Graph()
    G.add_nodes_from(range(n))  # Add exactly n nodes

    # Add edges
    edges = {}
    for node_id in range(n):
        if node_id + 1 < len(lines):  # Ensure we don't go past end of file
            tokens = lines[node_id + 1].split()
            if weighted:
                pairs = zip(map(int, tokens[0::2]), map(float, tokens[1::2]))
            else:
                pairs = ((int(tok), 1.0) for tok in tokens)
            for neighbor, weight in pairs:
                if node_id != neighbor and neighbor < n:  # Skip self-loops and invalid nodes
                    edges[tuple(sorted((node_id, neighbor)))] = weight

    # Add all edges at once
    G.add_weighted_edges_from((u, v, w) for (u, v), w in edges.items())

    logger.info("Loaded %d nodes and %d edges (specified: %d, %d)",
                G.number_of_nodes(), G.number_of_edges(), n, m)

    if largest_component and G.number_of_nodes() > 0 and not nx.is_connected(G):
        components = list(nx.connected_components(G))
        largest_comp = max(components, key=len)
        logger.info("Found %d components; keeping the largest (%d nodes, %.1f%%)",
                    len(components), len(largest_comp), len(largest_comp) / n * 100)

        # Extract largest component
        G = G.subgraph(largest_comp).copy()
        # Renumber nodes to be 0-based consecutive integers
        G = nx.convert_node_labels_to_integers(G)

    return G


def get_graph_stats(G: nx.Graph) -> Dict[str, Any]:
    """
    Compute basic graph statistics
    """
    n = G.number_of_nodes()
    degrees = [d for _, d in G.degree()]
    stats = {
        'num_nodes': n,
        'num_edges': G.number_of_edges(),
        'directed': G.is_directed(),
        'density': nx.density(G) if n > 1 else 0.0,
        'total_weight': G.size(weight='weight'),
    }
    if n == 0:
        return stats

    stats.update({
        'is_connected': nx.is_weakly_connected(G) if G.is_directed() else nx.is_connected(G),
        'avg_degree': float(sum(degrees) / n),
        'min_degree': min(degrees),
        'max_degree': max(degrees),
        'degree_histogram': nx.degree_histogram(G)[:10],  # First 10 values
    })
    return stats
