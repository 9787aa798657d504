"""Octree spatial partitioning for ray picking."""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from enum import IntEnum
from typing import Protocol, Sequence

import numpy as np

from gamecore.geometry import BoundingBox, Ray

logger = logging.getLogger(__name__)


class Collidable(Protocol):
    bounding_box: BoundingBox

    def set_hit(self, hit: bool, button_type: int) -> None: ...


class OctChild(IntEnum):
    """Child positions: top/bottom, left/right, front/rear."""

    TLF = 0
    BLF = 1
    BRF = 2
    TRF = 3
    TLR = 4
    BLR = 5
    BRR = 6
    TRR = 7


class OctNode:
    """A cubic cell; leaves hold the objects that overlap them."""

    def __init__(self, position: Sequence[float], size: float, parent: OctNode | None = None) -> None:
        lo = np.asarray(position, dtype=float).reshape(3)
        self.bounding_box = BoundingBox(lo, lo + size)
        self.size = float(size)
        self.parent = parent
        self.children: list[OctNode | None] = [None] * 8
        self.objects: list[Collidable] = []

    def octify(self, depth: int) -> None:
        """Split into eight children, recursively ``depth`` levels deep."""
        if depth <= 0:
            return
        half = self.size / 2.0
        x, y, z = self.bounding_box.min_vert
        offsets = {
            OctChild.TLF: (x, y + half, z + half),
            OctChild.BLF: (x, y, z + half),
            OctChild.BRF: (x + half, y, z + half),
            OctChild.TRF: (x + half, y + half, z + half),
            OctChild.TLR: (x, y + half, z),
            OctChild.BLR: (x, y, z),
            OctChild.BRR: (x + half, y, z),
            OctChild.TRR: (x + half, y + half, z),
        }
        for slot, corner in offsets.items():
            self.children[slot] = OctNode(corner, half, self)
        for child in self.children:
            child.octify(depth - 1)

    def child(self, position: OctChild) -> OctNode | None:
        return self.children[OctChild(position)]

    def add_object(self, obj: Collidable) -> None:
        self.objects.append(obj)

    @property
    def object_count(self) -> int:
        return len(self.objects)

    @property
    def is_leaf(self) -> bool:
        return self.children[0] is None

    @property
    def child_count(self) -> int:
        """Number of nodes below this one."""
        return sum(1 + c.child_count for c in self.children if c is not None)

    def leaves(self):
        """Yield every leaf under (or equal to) this node."""
        if self.is_leaf:
            yield self
        else:
            for c in self.children:
                if c is not None:
                    yield from c.leaves()


class OctSpatialPartition:
    """An octree centred on the origin, spanning ``world_size`` per side."""

    def __init__(self, world_size: float, depth: int = 3) -> None:
        self.root = OctNode(np.full(3, -world_size / 2.0), world_size, None)
        self.root.octify(depth)
        logger.debug("there are %d child nodes", self.root.child_count)

    def add_object(self, obj: Collidable) -> None:
        self._add_to_cell(self.root, obj)

    def get_collision(self, ray: Ray, near: float, far: float) -> Collidable | None:
        """Return the nearest object hit by ``ray`` and mark it as hit."""
        probe = replace(ray)
        cells: list[OctNode] = []
        self._collect_cells(self.root, probe, near, far, cells)

        hit_result: Collidable | None = None
        shortest = math.inf
        for cell in cells:
            for obj in cell.objects:
                if probe.is_colliding(obj.bounding_box, near, far) and probe.intersection_distance < shortest:
                    hit_result = obj
                    shortest = probe.intersection_distance

        if hit_result is not None:
            hit_result.set_hit(True, 1)
        return hit_result

    def _add_to_cell(self, cell: OctNode | None, obj: Collidable) -> None:
        if cell is None or not cell.bounding_box.intersects(obj.bounding_box):
            return
        if cell.is_leaf:
            cell.add_object(obj)
            logger.debug("added %r to cell %s", getattr(obj, "tag", obj), cell.bounding_box.max_vert)
        else:
            for child in cell.children:
                self._add_to_cell(child, obj)

    def _collect_cells(
        self, cell: OctNode | None, ray: Ray, near: float, far: float, out: list[OctNode]
    ) -> None:
        if cell is None or not ray.is_colliding(cell.bounding_box, near, far):
            return
        if cell.is_leaf:
            out.append(cell)
        else:
            for child in cell.children:
                self._collect_cells(child, ray, near, far, out)