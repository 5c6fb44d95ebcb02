from array import array


class UnionFind:
    """
    Disjoint sets over integer cell ids (y * width + x).
    Parent links live in a dense array; -1 marks a root.
    """

    __slots__ = ('parents', 'set_count')

    def __init__(self, size: int):
        self.parents = array('i', [-1] * size)
        self.set_count = size

    def __len__(self):
        return len(self.parents)

    def find(self, cell_id: int) -> int:
        root = cell_id
        while self.parents[root] != -1:
            root = self.parents[root]

        # Path compression
        while cell_id != root:
            nxt = self.parents[cell_id]
            self.parents[cell_id] = root
            cell_id = nxt
        return root

    def union(self, a: int, b: int) -> bool:
        """Attaches b's root under a's root. Returns False if already joined."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        self.parents[root_b] = root_a
        self.set_count -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)
