from array import array


class DisjointSet:
    """
    Union-find over the integers 0..size-1.
    Path compression in find, union by rank in union.
    """

    __slots__ = ('size', 'parent', 'rank', 'set_count')

    def __init__(self, size: int):
        if size < 0:
            raise ValueError(f"DisjointSet size must be non-negative, got {size}")
        self.size = size
        self.parent = array('i', range(size))
        self.rank = array('i', [0] * size)
        self.set_count = size

    def __len__(self) -> int:
        return self.size

    def _check(self, x: int):
        if not 0 <= x < self.size:
            raise IndexError(f"Element {x} out of range for DisjointSet of size {self.size}")

    def find(self, x: int) -> int:
        self._check(x)
        parent = self.parent

        root = x
        while parent[root] != root:
            root = parent[root]

        # Point every node on the walked chain straight at the root
        while parent[x] != root:
            parent[x], x = root, parent[x]

        return root

    def union(self, a: int, b: int) -> bool:
        """
        Merges the sets holding a and b.
        Returns False (and changes nothing) if they already share a root.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            self.parent[root_a] = root_b
        elif self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        else:
            self.parent[root_b] = root_a
            self.rank[root_a] += 1

        self.set_count -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)
