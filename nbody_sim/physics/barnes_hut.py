"""Barnes-Hut quadtree for O(N log N) approximate gravitational forces.

Each node covers a Region and is in one of three states: empty, external
(holding one body snapshot) or internal (holding the aggregate of its subtree
plus up to four children). Trees are cheap to build and are rebuilt from
scratch every step; there is no incremental update.
"""

from typing import Optional, Tuple
from nbody_sim.physics.body import Body
from nbody_sim.physics.region import Region


# Aggregates are accepted when region.length / distance falls below this value
OPENING_THRESHOLD = 2.0

NORTHWEST, NORTHEAST, SOUTHWEST, SOUTHEAST = range(4)


class BarnesHutTree:
    """Single node of the quadtree, owning its (at most four) children."""

    __slots__ = ("region", "body", "source", "children")

    def __init__(self, region: Region):
        self.region = region
        self.body: Optional[Body] = None
        # Inserted Body instance an external node was built from; None for internal nodes
        self.source: Optional[Body] = None
        self.children = [None, None, None, None]

    def insert(self, body: Body):
        """Insert a snapshot of ``body`` into the subtree.

        The tree keeps its own copy, so bodies may be integrated afterwards
        without disturbing the aggregates. Two bodies at the same position
        can never be separated and exhaust the recursion limit.
        """
        self._insert(body.copy(), body)

    def _insert(self, body: Body, source: Body):
        if self.body is None:
            self.body = body
            self.source = source
            return

        if self.is_external():
            existing, existing_source = self.body, self.source
            self.body = existing.combine(body)
            self.source = None
            self._insert_proper_quad(existing, existing_source)
            self._insert_proper_quad(body, source)
            return

        self.body = self.body.combine(body)
        self._insert_proper_quad(body, source)

    def _insert_proper_quad(self, body: Body, source: Body):
        subdivisions = self.region.subdivisions()
        slot = SOUTHEAST
        for index, quad in enumerate(subdivisions):
            if quad.contains(body.position):
                slot = index
                break
        if self.children[slot] is None:
            self.children[slot] = BarnesHutTree(subdivisions[slot])
        self.children[slot]._insert(body, source)

    def update_force(self, body: Body, theta: float = OPENING_THRESHOLD):
        """Accumulate the approximate force of the subtree onto ``body``.

        A leaf built from ``body`` itself contributes nothing. An internal
        node whose ``region.length / distance`` is below ``theta`` stands in
        for its whole subtree; otherwise its children are visited. With
        ``theta=0`` every leaf is visited and the result is exact. A node whose
        aggregate sits exactly on ``body`` is always opened.

        Args:
            body: Target body; only its force accumulator is modified
            theta: Opening threshold
        """
        if self.body is None:
            return

        if self.is_external():
            if self.source is not body:
                body.add_force(self.body)
            return

        # A target on the centroid is infinitely close; open the node instead
        distance = self.body.position.distance(body.position)
        if distance > 0 and self.region.length / distance < theta:
            body.add_force(self.body)
            return

        for child in self.children:
            if child is not None:
                child.update_force(body, theta)

    def is_external(self) -> bool:
        return all(child is None for child in self.children)

    def is_empty(self) -> bool:
        return self.body is None

    @property
    def northwest(self) -> Optional["BarnesHutTree"]:
        return self.children[NORTHWEST]

    @property
    def northeast(self) -> Optional["BarnesHutTree"]:
        return self.children[NORTHEAST]

    @property
    def southwest(self) -> Optional["BarnesHutTree"]:
        return self.children[SOUTHWEST]

    @property
    def southeast(self) -> Optional["BarnesHutTree"]:
        return self.children[SOUTHEAST]

    def depth(self) -> int:
        """Number of levels below and including this node."""
        child_depths = [child.depth() for child in self.children if child is not None]
        return 1 + max(child_depths, default=0)

    def __len__(self) -> int:
        if self.body is None:
            return 0
        if self.is_external():
            return 1
        return sum(len(child) for child in self.children if child is not None)

    def __repr__(self) -> str:
        state = "empty" if self.body is None else ("external" if self.is_external() else "internal")
        return f"BarnesHutTree(region={self.region!r}, state={state})"


def build_tree(region: Region, bodies) -> Tuple[BarnesHutTree, int]:
    """Build a tree over ``region`` from the bodies it contains.

    Returns:
        Tuple of (tree, number of bodies inserted)
    """
    tree = BarnesHutTree(region)
    inserted = 0
    for body in bodies:
        if region.contains(body.position):
            tree.insert(body)
            inserted += 1
    return tree, inserted
