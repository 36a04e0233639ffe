"""
Exceptions raised at the API boundary of the partitioning algorithms.

- InvalidInputError: malformed options, bad trial counts, negative weights
- MissingVertexError: a requested terminal vertex is not in the graph
- UnsupportedGraphShapeError: directed graph given to an undirected-only algorithm
"""


class GraphPartitionError(Exception):
    """Base class for every error raised by graphpart."""


class InvalidInputError(GraphPartitionError, ValueError):
    """Raised when options or edge weights are malformed."""


class MissingVertexError(GraphPartitionError, LookupError):
    """Raised when a source or sink vertex is not present in the graph.

    Attributes:
        vertex: The vertex that was looked up
        role: What the vertex was used as ("source" or "sink")
    """

    def __init__(self, vertex, role: str = "vertex") -> None:
        self.vertex = vertex
        self.role = role
        super().__init__(f"{role} {vertex!r} is not present in the graph")


class UnsupportedGraphShapeError(GraphPartitionError, TypeError):
    """Raised when an undirected-only algorithm receives a directed graph.

    Attributes:
        algorithm: Name of the algorithm that rejected the graph
    """

    def __init__(self, algorithm: str) -> None:
        self.algorithm = algorithm
        super().__init__(
            f"{algorithm} requires an undirected graph; symmetrize the input first"
        )
