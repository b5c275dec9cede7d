import copy

from .board import EMPTY, GRASS, TENT, TREE, MARKERS, SQUARE_NEIGHBOR_OFFSETS
from .board import copy_board, legal_cell, has_adjacent, has_surrounding, compute_sums
from .configuration import Configuration
from .render import render_board


def tree_deadlines(board):
  """(cursor, y, x) per tree, sorted by cursor.

  cursor is the row-major index of the tree's last orthogonal neighbor: once
  the search has decided that cell, no tent can ever be added next to the tree.
  a tree without neighbors gets -1.
  """
  size = len(board)
  deadlines = []
  for y in range(size):
    for x in range(size):
      if board[y][x] != TREE: continue
      last = -1
      for dy,dx in SQUARE_NEIGHBOR_OFFSETS:
        if legal_cell(board,y+dy,x+dx):
          last = max(last, (y+dy)*size + x+dx)
      deadlines.append((last, y, x))
  deadlines.sort()
  return deadlines


class TentConfig(Configuration):
  """A partially decided tents-and-trees board.

  Cells are decided one at a time in row-major order. cursor is the index of
  the last decided cell, -1 before the first one. Every successor is a fresh
  copy, a TentConfig is never changed once built.

  The board list is taken over, not copied.
  """

  def __init__(self, rowsums, colsums, board, cursor=-1):
    size = len(board)
    if size < 1:
      raise ValueError("board must have at least one row")
    if len(rowsums) != size:
      raise ValueError(f"expected {size} row sums, got {len(rowsums)}")
    if len(colsums) != size:
      raise ValueError(f"expected {size} column sums, got {len(colsums)}")
    if not -1 <= cursor < size*size:
      raise ValueError(f"cursor {cursor} is off the board")
    for y, row in enumerate(board):
      if len(row) != size:
        raise ValueError(f"row {y} has {len(row)} cells, expected {size}")
      for x, cell in enumerate(row):
        if cell not in MARKERS:
          raise ValueError(f"unknown cell {cell!r} at {y},{x}")
        if cell not in [EMPTY, TREE] and y*size + x > cursor:
          raise ValueError(f"{y},{x} is past the cursor but already holds {cell!r}")
    self.size = size
    self.rowsums = tuple(rowsums)
    self.colsums = tuple(colsums)
    self.board = board
    self.cursor = cursor
    self.deadlines = tree_deadlines(board)

  @property
  def last(self):
    return self.size*self.size - 1

  def next_cell(self):
    """(y,x) of the cell the next successor decides."""
    return divmod(self.cursor + 1, self.size)

  def advance(self, piece):
    """copy of this config with the next cell set to piece."""
    child = copy.copy(self)
    child.board = copy_board(self.board)
    child.cursor = self.cursor + 1
    y, x = divmod(child.cursor, self.size)
    child.board[y][x] = piece
    return child

  def check(self, y, x):
    """True if neither row y nor column x has all its tents yet."""
    if sum(1 for cell in self.board[y] if cell == TENT) >= self.rowsums[y]:
      return False
    if sum(1 for row in self.board if row[x] == TENT) >= self.colsums[x]:
      return False
    return True

  def can_place_tent(self, y, x):
    return (self.check(y, x) and
            not has_surrounding(self.board, y, x, TENT) and
            has_adjacent(self.board, y, x, TREE))

  def successors(self):
    if self.cursor == self.last:
      return []
    y, x = self.next_cell()
    if self.board[y][x] == TREE:
      return [self.advance(TREE)]
    successors = []
    if self.can_place_tent(y, x):
      successors.append(self.advance(TENT))
    successors.append(self.advance(GRASS))
    return successors

  def is_valid(self):
    rowtents, coltents = compute_sums(self.board)
    for y in range(self.size):
      if rowtents[y] > self.rowsums[y]:
        return False
    for x in range(self.size):
      if coltents[x] > self.colsums[x]:
        return False

    if self.cursor == self.last:
      if tuple(rowtents) != self.rowsums or tuple(coltents) != self.colsums:
        return False

    # trees whose neighbors are all decided must have their tent by now
    for deadline, y, x in self.deadlines:
      if deadline > self.cursor:
        break
      if not has_adjacent(self.board, y, x, TENT):
        return False
    return True

  def is_goal(self):
    return self.cursor == self.last

  def tents(self):
    return [[y,x] for y, row in enumerate(self.board) for x, cell in enumerate(row) if cell == TENT]

  def undecided(self):
    return sum(1 for row in self.board for cell in row if cell == EMPTY)

  def __str__(self):
    return render_board(self.board, self.rowsums, self.colsums)
