"""Skyline bottom-left / best-fit rectangle packing into a fixed-size target."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

__all__ = ["Heuristic", "Rect", "Packer", "pack_rects", "MAX_COORD"]

MAX_COORD = 0xFFFF
_SENTINEL_Y = 65535
_UNREACHABLE = 1 << 30


class Heuristic(enum.IntEnum):
    """Placement heuristic used by the skyline packer."""

    BL_SORT_HEIGHT = 0
    BF_SORT_HEIGHT = 1
    DEFAULT = 0


@dataclass
class Rect:
    """A rectangle to pack; ``x``/``y`` are filled in when it is placed."""

    w: int
    h: int
    id: int = 0
    x: Optional[int] = None
    y: Optional[int] = None
    was_packed: bool = False


@dataclass
class _Node:
    x: int
    y: int


class Packer:
    """Packs rectangles into a ``width`` x ``height`` target using a skyline.

    ``num_nodes`` bounds the number of skyline segments available. Unless
    :meth:`set_allow_out_of_mem` is enabled, rectangle widths are rounded up to
    a multiple of ``ceil(width / num_nodes)`` so the packer never runs short.
    """

    def __init__(self, width: int, height: int, num_nodes: int) -> None:
        if width > MAX_COORD or height > MAX_COORD:
            raise ValueError(f"target size {width}x{height} exceeds {MAX_COORD}")
        if width < 0 or height < 0:
            raise ValueError("target size must not be negative")
        if num_nodes < 1:
            raise ValueError("num_nodes must be at least 1")
        self.width = width
        self.height = height
        self.num_nodes = num_nodes
        self.heuristic = Heuristic.DEFAULT
        self._free = num_nodes
        # The first node spans the full width; the last is a sentinel at x == width.
        self._skyline: List[_Node] = [_Node(0, 0), _Node(width, _SENTINEL_Y)]
        self.set_allow_out_of_mem(False)

    def set_allow_out_of_mem(self, allow: bool) -> None:
        """Choose exact widths (may run out of nodes) or quantised widths."""
        if allow:
            self.align = 1
        else:
            self.align = (self.width + self.num_nodes - 1) // self.num_nodes

    def set_heuristic(self, heuristic: int) -> None:
        """Select the placement heuristic; raises ValueError for unknown values."""
        self.heuristic = Heuristic(heuristic)

    def pack(self, rects: Iterable[Rect]) -> bool:
        """Place ``rects`` in place and return True if every one was packed.

        Rectangles are placed tallest first; successfully placed rectangles get
        ``x``, ``y`` and ``was_packed`` set, the others get ``x = y = None``.
        """
        rects = list(rects)
        for rect in rects:
            if rect.w > MAX_COORD or rect.h > MAX_COORD:
                raise ValueError(f"rectangle {rect.w}x{rect.h} exceeds {MAX_COORD}")
            if rect.w < 1:
                raise ValueError("rectangle width must be positive")
            if rect.h < 0:
                raise ValueError("rectangle height must not be negative")

        for rect in sorted(rects, key=lambda r: (-r.h, -r.w)):
            placed = self._pack_rectangle(rect.w, rect.h)
            if placed is None:
                rect.x = rect.y = None
                rect.was_packed = False
            else:
                rect.x, rect.y = placed
                rect.was_packed = True
        return all(rect.was_packed for rect in rects)

    @property
    def skyline(self) -> List[Tuple[int, int]]:
        """Current skyline segments as ``(x, y)`` pairs, sentinel included."""
        return [(node.x, node.y) for node in self._skyline]

    @property
    def free_nodes(self) -> int:
        """Number of skyline nodes still available."""
        return self._free

    def _find_min_y(self, first: int, x0: int, width: int) -> Tuple[int, int]:
        x1 = x0 + width
        min_y = waste = visited = 0
        nodes = self._skyline
        for node, nxt in zip(nodes[first:], nodes[first + 1:]):
            if node.x >= x1:
                break
            if node.y > min_y:
                waste += visited * (node.y - min_y)
                min_y = node.y
                if node.x < x0:
                    visited += nxt.x - x0
                else:
                    visited += nxt.x - node.x
            else:
                under = nxt.x - node.x
                if under + visited > width:
                    under = width - visited
                waste += under * (min_y - node.y)
                visited += under
        return min_y, waste

    def _find_best_pos(self, width: int, height: int) -> Tuple[Optional[int], int, int]:
        width += self.align - 1
        width -= width % self.align

        best: Optional[int] = None
        best_y = _UNREACHABLE
        best_waste = _UNREACHABLE
        nodes = self._skyline

        for index, node in enumerate(nodes):
            if node.x + width > self.width:
                break
            y, waste = self._find_min_y(index, node.x, width)
            if self.heuristic == Heuristic.BL_SORT_HEIGHT:
                if y < best_y:
                    best_y = y
                    best = index
            elif y + height <= self.height:
                if y < best_y or (y == best_y and waste < best_waste):
                    best_y = y
                    best_waste = waste
                    best = index

        best_x = 0 if best is None else nodes[best].x

        if self.heuristic == Heuristic.BF_SORT_HEIGHT:
            left = 0
            for tail in (n for n in nodes if n.x >= width):
                xpos = tail.x - width
                while nodes[left + 1].x <= xpos:
                    left += 1
                y, waste = self._find_min_y(left, xpos, width)
                if y + height < self.height and y <= best_y:
                    if (
                        y < best_y
                        or waste < best_waste
                        or (waste == best_waste and xpos < best_x)
                    ):
                        best_x = xpos
                        best_y = y
                        best_waste = waste
                        best = left

        return best, best_x, best_y

    def _pack_rectangle(self, width: int, height: int) -> Optional[Tuple[int, int]]:
        best, x, y = self._find_best_pos(width, height)
        if best is None or y + height > self.height or self._free == 0:
            return None

        self._free -= 1
        nodes = self._skyline
        new_node = _Node(x, y + height)

        position = best + 1 if nodes[best].x < x else best
        nodes.insert(position, new_node)

        current = position + 1
        right = x + width
        while current + 1 < len(nodes) and nodes[current + 1].x <= right:
            del nodes[current]
            self._free += 1

        if nodes[current].x < right:
            nodes[current].x = right

        return x, y


def pack_rects(width: int, height: int, rects: Iterable[Rect]) -> List[Rect]:
    """Pack ``rects`` into a fresh ``width`` x ``height`` target and return them."""
    rects = list(rects)
    Packer(width, height, max(width, 1)).pack(rects)
    return rects