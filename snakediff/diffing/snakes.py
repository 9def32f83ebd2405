# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Shortest edit script search over the edit graph of two sequences.

The edit graph of an old sequence of length W and a new sequence of
length H is the grid [0,W]x[0,H]. Moving right removes an element of
the old sequence, moving down inserts an element of the new sequence,
and moving diagonally skips a pair of elements that compare equal.
Every path from (0,0) to (W,H) is an edit script, and the shortest
path is the minimal one.

The search advances a wavefront of candidate paths ('snakes') one
edit graph move per round, keeping only the cheapest snake for each
grid point.
"""

from collections import namedtuple
import operator

from ..diff_format import Operation
from ..log import debug

__all__ = ["compute_edit_script", "Snake", "Frontier"]


class Snake(namedtuple("Snake", ["x", "y", "cost", "trail"])):
    """A candidate partial path through the edit graph.

    x and y are the number of elements consumed from the old and new
    sequence, and cost the number of edits taken so far. The operations
    are kept as a linked list of (operation, previous trail) pairs,
    so that snakes extended from the same parent share their prefix.
    """
    __slots__ = ()

    @classmethod
    def origin(cls):
        return cls(0, 0, 0, None)

    def extend(self, op):
        "Return a new snake one move further along the edit graph."
        if op == Operation.SKIP:
            return Snake(self.x + 1, self.y + 1, self.cost, (op, self.trail))
        elif op == Operation.REMOVE:
            return Snake(self.x + 1, self.y, self.cost + 1, (op, self.trail))
        elif op == Operation.INSERT:
            return Snake(self.x, self.y + 1, self.cost + 1, (op, self.trail))
        raise ValueError("Invalid edit script operation {!r}.".format(op))

    @property
    def operations(self):
        "The full list of operations taken to reach this snake."
        ops = []
        trail = self.trail
        while trail is not None:
            op, trail = trail
            ops.append(op)
        ops.reverse()
        return ops


class Frontier(object):
    """The cheapest snake known for each grid point in one round.

    A snake only replaces the occupant of its grid point if it is
    strictly cheaper, so among equally cheap snakes the first one
    registered is kept. Iteration follows the order in which grid
    points were first reached.
    """

    def __init__(self):
        self._snakes = {}

    def register(self, snake):
        "Add snake to the frontier, returns True if it was kept."
        key = (snake.x, snake.y)
        current = self._snakes.get(key)
        if current is None or snake.cost < current.cost:
            self._snakes[key] = snake
            return True
        return False

    def get(self, x, y):
        return self._snakes.get((x, y))

    def __contains__(self, point):
        return point in self._snakes

    def __iter__(self):
        return iter(self._snakes.values())

    def __len__(self):
        return len(self._snakes)


def _check_length(name, value):
    "Return value as an int, raising ValueError unless it is a non-negative integer."
    if isinstance(value, bool):
        raise ValueError("{} must be an integer, got {!r}.".format(name, value))
    try:
        value = operator.index(value)
    except TypeError:
        raise ValueError("{} must be an integer, got {!r}.".format(name, value))
    if value < 0:
        raise ValueError("{} must be non-negative, got {}.".format(name, value))
    return value


def extend_snake(snake, old_len, new_len, same_at):
    """Compute the moves available from snake.

    A matching pair of elements is always skipped, since a skip costs
    nothing and reaches the same grid point as a removal followed by
    an insertion. Branches list the removal before the insertion.
    """
    x, y = snake.x, snake.y
    if x == old_len:
        return [snake.extend(Operation.INSERT)]
    elif y == new_len:
        return [snake.extend(Operation.REMOVE)]
    elif same_at(x, y):
        return [snake.extend(Operation.SKIP)]
    else:
        return [snake.extend(Operation.REMOVE), snake.extend(Operation.INSERT)]


def advance_frontier(frontier, old_len, new_len, same_at):
    "Compute the next round of the wavefront from the current one."
    new_frontier = Frontier()
    for snake in frontier:
        for extended in extend_snake(snake, old_len, new_len, same_at):
            new_frontier.register(extended)
    return new_frontier


def select_best_snake(snakes):
    """Pick the cheapest snake.

    Ties are resolved in favour of the snake that comes first in the
    given order.
    """
    best = None
    for snake in snakes:
        if best is None or snake.cost < best.cost:
            best = snake
    return best


def compute_edit_script(old_len, new_len, same_at):
    """Compute a minimal edit script between two sequences.

    old_len and new_len are the lengths of the old and new sequence,
    and same_at(i, j) tells whether old element i and new element j
    are considered equal. same_at is only called for
    0 <= i < old_len and 0 <= j < new_len.

    Returns a list of Operation values of minimal length, which turns
    the old sequence into the new one when replayed with
    snakediff.patching.apply_edit_script.
    """
    old_len = _check_length("old_len", old_len)
    new_len = _check_length("new_len", new_len)
    if not callable(same_at):
        raise TypeError("same_at must be callable, got {!r}.".format(same_at))

    end = (old_len, new_len)
    frontier = Frontier()
    frontier.register(Snake.origin())
    rounds = 0
    peak = 1
    while end not in frontier:
        frontier = advance_frontier(frontier, old_len, new_len, same_at)
        rounds += 1
        peak = max(peak, len(frontier))

    best = select_best_snake(s for s in frontier if (s.x, s.y) == end)
    script = best.operations
    debug("Edit script for %dx%d grid: cost %d after %d rounds, peak frontier %d",
          old_len, new_len, best.cost, rounds, peak)
    return script
