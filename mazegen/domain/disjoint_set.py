"""Disjoint set (union-find) over hashable keys."""

from typing import Dict, FrozenSet, Generic, Hashable, Iterator, Set, TypeVar

T = TypeVar("T", bound=Hashable)


class DisjointSet(Generic[T]):
    """
    Partition of keys into disjoint groups.

    Uses parent pointers with union by rank and path compression. Each root
    also keeps the members of its group so groups can be listed. The handle
    returned by ``find_set`` is the group's root key; two keys are in the same
    group exactly when their handles are equal.
    """

    def __init__(self):
        self._parent: Dict[T, T] = {}
        self._rank: Dict[T, int] = {}
        self._members: Dict[T, Set[T]] = {}

    def make_set(self, x: T) -> None:
        """Create a new singleton group containing ``x``."""
        if x in self._parent:
            raise ValueError(f"{x!r} is already in the disjoint set")
        self._parent[x] = x
        self._rank[x] = 0
        self._members[x] = {x}

    def find_set(self, x: T) -> T:
        """Return the handle of the group containing ``x``."""
        if x not in self._parent:
            raise KeyError(f"{x!r} is not in the disjoint set")
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        # Path compression
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def same_set(self, x: T, y: T) -> bool:
        return self.find_set(x) == self.find_set(y)

    def merge(self, x: T, y: T) -> None:
        """
        Combine the groups containing ``x`` and ``y``.
        No-op when they already share a group.
        """
        x_root = self.find_set(x)
        y_root = self.find_set(y)
        if x_root == y_root:
            return

        if self._rank[x_root] < self._rank[y_root]:
            x_root, y_root = y_root, x_root
        self._parent[y_root] = x_root
        if self._rank[x_root] == self._rank[y_root]:
            self._rank[x_root] += 1
        self._members[x_root] |= self._members.pop(y_root)

    def group(self, x: T) -> FrozenSet[T]:
        """Members of the group containing ``x``."""
        return frozenset(self._members[self.find_set(x)])

    def groups(self) -> Iterator[FrozenSet[T]]:
        for members in self._members.values():
            yield frozenset(members)

    def __contains__(self, x: object) -> bool:
        return x in self._parent

    def __len__(self) -> int:
        """Number of groups."""
        return len(self._members)
