from typing import Dict, Hashable, Iterable, List, Mapping, Sequence, Set


def connected_components(vertices: Sequence[Hashable],
                         adj: Mapping[Hashable, Iterable[Hashable]]) -> List[Set[Hashable]]:
    """
    Find connected components of the subgraph induced by ``vertices`` using DFS.
    Components are returned in the order of their first vertex in ``vertices``.
    For directed graphs pass a symmetric adjacency to get weak components.
    """
    areas = set(vertices)
    visited = set()
    components = []

    for start in vertices:
        if start not in visited:
            stack = [start]
            comp = set()

            while stack:
                cur = stack.pop()
                if cur not in visited:
                    visited.add(cur)
                    comp.add(cur)
                    stack.extend([nb for nb in adj[cur] if nb in areas and nb not in visited])

            components.append(comp)

    return components


def order_by_index(members: Iterable[Hashable], index: Mapping[Hashable, int]) -> List[Hashable]:
    """Sort vertices by their position in the source graph."""
    return sorted(members, key=index.__getitem__)


class UnionFind:
    """
    Disjoint sets over hashable items, with path compression and union by size.
    """

    def __init__(self, items: Iterable[Hashable] = ()):
        self.parent: Dict[Hashable, Hashable] = {}
        self.size: Dict[Hashable, int] = {}
        self.count = 0
        for item in items:
            self.add(item)

    def add(self, item: Hashable) -> None:
        if item not in self.parent:
            self.parent[item] = item
            self.size[item] = 1
            self.count += 1

    def find(self, item: Hashable) -> Hashable:
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        # Path compression
        while self.parent[item] != root:
            self.parent[item], item = root, self.parent[item]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets holding ``a`` and ``b``; False if already merged."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.size[ra] < self.size[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        self.size[ra] += self.size[rb]
        del self.size[rb]
        self.count -= 1
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self.find(a) == self.find(b)

    def groups(self) -> List[List[Hashable]]:
        """Sets in order of their first inserted member, members in insertion order."""
        groups: Dict[Hashable, List[Hashable]] = {}
        for item in self.parent:
            groups.setdefault(self.find(item), []).append(item)
        return list(groups.values())
