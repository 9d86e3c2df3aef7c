"""Best-first branch-and-bound solver for the 15 puzzle."""

from __future__ import annotations

import heapq
import itertools
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

SIZE = 4
MAX_NODES = 10000

Board = tuple[tuple[int, ...], ...]

GOAL: Board = (
    (1, 2, 3, 4),
    (5, 6, 7, 8),
    (9, 10, 11, 12),
    (13, 14, 15, 0),
)

# Down, Left, Up, Right as (row, column) offsets.
MOVES = ((1, 0), (0, -1), (-1, 0), (0, 1))

INITIAL: Board = (
    (1, 3, 4, 15),
    (2, 5, 12, 6),
    (7, 11, 14, 8),
    (9, 10, 13, 0),
)


class SearchLimitExceeded(Exception):
    """The search ran out of room before reaching the goal."""


def _normalise(board: Sequence[Sequence[int]]) -> Board:
    rows = tuple(tuple(row) for row in board)
    if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
        raise ValueError(f"board must be {SIZE}x{SIZE}")
    if sorted(itertools.chain.from_iterable(rows)) != list(range(SIZE * SIZE)):
        raise ValueError(f"board must hold each of 0..{SIZE * SIZE - 1} once")
    return rows


def manhattan_cost(board: Sequence[Sequence[int]]) -> int:
    """Sum of Manhattan distances of every tile from its goal position."""
    cost = 0
    for i, row in enumerate(board):
        for j, value in enumerate(row):
            if value:
                goal_row, goal_col = divmod(value - 1, SIZE)
                cost += abs(i - goal_row) + abs(j - goal_col)
    return cost


def is_goal(board: Sequence[Sequence[int]]) -> bool:
    return tuple(tuple(row) for row in board) == GOAL


def _moved(board: Board, blank: tuple[int, int], target: tuple[int, int]) -> Board:
    cells = [list(row) for row in board]
    (bx, by), (tx, ty) = blank, target
    cells[bx][by], cells[tx][ty] = cells[tx][ty], cells[bx][by]
    return tuple(tuple(row) for row in cells)


@dataclass
class _Node:
    board: Board
    blank: tuple[int, int]
    level: int
    parent: _Node | None
    cost: int = field(init=False)

    def __post_init__(self) -> None:
        self.cost = manhattan_cost(self.board) + self.level

    def path(self) -> list[Board]:
        boards = []
        node: _Node | None = self
        while node is not None:
            boards.append(node.board)
            node = node.parent
        return boards[::-1]


def solve(initial: Sequence[Sequence[int]], max_nodes: int = MAX_NODES) -> list[Board]:
    """Return the boards from ``initial`` to the goal, both included.

    Nodes are expanded by lowest cost (heuristic plus depth), earliest
    inserted first among equals. Raises SearchLimitExceeded when more than
    ``max_nodes`` nodes would be waiting in the queue.
    """
    start = _normalise(initial)
    blank = next((i, j) for i, row in enumerate(start) for j, value in enumerate(row) if value == 0)
    order = itertools.count()
    queue: list[tuple[int, int, _Node]] = []

    def push(node: _Node) -> None:
        if len(queue) >= max_nodes:
            raise SearchLimitExceeded("Queue overflow")
        heapq.heappush(queue, (node.cost, next(order), node))

    push(_Node(start, blank, 0, None))
    while queue:
        _, _, node = heapq.heappop(queue)
        if is_goal(node.board):
            return node.path()
        x, y = node.blank
        for dx, dy in MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < SIZE and 0 <= ny < SIZE:
                child_board = _moved(node.board, node.blank, (nx, ny))
                push(_Node(child_board, (nx, ny), node.level + 1, node))
    raise SearchLimitExceeded("Solution not found within limit.")


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board as rows of right-aligned two-character cells."""
    return "\n".join("".join(f"{value:2d} " for value in row) for row in board) + "\n"


def main(argv=None) -> int:
    """Solve the built-in starting position and print the path to the goal."""
    print("Input - Initial state of 15 Puzzle problem:\n")
    print(format_board(INITIAL))
    try:
        path = solve(INITIAL)
    except SearchLimitExceeded as error:
        print(error)
        return 1
    print("Output - Path to Goal State:\n")
    for board in path:
        print(format_board(board))
    return 0


if __name__ == "__main__":
    sys.exit(main())