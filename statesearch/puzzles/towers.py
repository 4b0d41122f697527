"""
Multi-peg disc-stacking puzzle (Towers of Hanoi family).

Discs are numbered by size, 0 = largest. Each peg is a tuple listed
bottom to top, so a legal peg is strictly increasing.

Start: all discs on peg 0. Goal: all discs on the last peg.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Towers:
    """
    Immutable puzzle state.

    Attributes:
        pegs: One tuple of disc numbers per peg, bottom first

    Example:
        >>> t = Towers.new(3, 2)
        >>> t.pegs
        ((0, 1), (), ())
        >>> t.move_disc(0, 2).pegs
        ((0,), (), (1,))
    """
    pegs: tuple[tuple[int, ...], ...]

    @classmethod
    def new(cls, pegs: int, discs: int) -> Towers:
        """
        Start position: every disc on the first peg.

        Raises:
            ValueError: If pegs < 2 or discs < 0
        """
        if pegs < 2:
            raise ValueError(f"Need at least 2 pegs, got {pegs}")
        if discs < 0:
            raise ValueError(f"Disc count must be >= 0, got {discs}")
        return cls((tuple(range(discs)),) + ((),) * (pegs - 1))

    @property
    def n_discs(self) -> int:
        return sum(len(p) for p in self.pegs)

    def move_disc(self, src: int, dst: int) -> Optional[Towers]:
        """
        Move the top disc of peg src onto peg dst.

        Returns:
            New state, or None if the move is illegal (same peg, peg out of
            range, empty source, or a larger disc onto a smaller one)
        """
        n = len(self.pegs)
        if src == dst or not (0 <= src < n) or not (0 <= dst < n):
            return None
        if not self.pegs[src]:
            return None
        disc = self.pegs[src][-1]
        if self.pegs[dst] and disc < self.pegs[dst][-1]:
            return None

        pegs = list(self.pegs)
        pegs[src] = pegs[src][:-1]
        pegs[dst] = pegs[dst] + (disc,)
        return Towers(tuple(pegs))

    def neighbors(self) -> list[Towers]:
        result = []
        for src in range(len(self.pegs)):
            for dst in range(len(self.pegs)):
                moved = self.move_disc(src, dst)
                if moved is not None:
                    result.append(moved)
        return result

    def is_goal(self) -> bool:
        return all(not peg for peg in self.pegs[:-1])

    def priority(self) -> int:
        """Discs not yet on the target peg (0 at the goal)."""
        return self.n_discs - len(self.pegs[-1])


def optimal_moves(discs: int) -> int:
    """Minimum number of moves for the three-peg puzzle."""
    return 2 ** discs - 1


def is_valid_path(path: list[Towers]) -> bool:
    """
    Check a solution path.

    Returns:
        True if the path is non-empty, ends at a goal, and every
        consecutive pair is one legal move
    """
    if not path or not path[-1].is_goal():
        return False
    for prev, nxt in zip(path, path[1:]):
        if nxt not in prev.neighbors():
            return False
    return True
