import random

from .board import EMPTY, GRASS, TENT, TREE, ALL_NEIGHBOR_OFFSETS, SQUARE_NEIGHBOR_OFFSETS
from .board import new_board, get_cell, compute_sums, copy_board_trees_only
from .tentconfig import TentConfig

def can_place_tent(board,y,x):
  if get_cell(board,y,x) != EMPTY: return False
  # check neighbors for other tents
  for dy,dx in ALL_NEIGHBOR_OFFSETS:
    if get_cell(board,y+dy,x+dx) == TENT: return False
  return True

def random_solution(size, density=0.5, seed=None):
  """a solved board, built by placing each tree together with its tent.

  returns (board, rowsums, colsums).
  """
  rng = random.Random(seed)
  board = new_board(size)
  offsets = [offset.copy() for offset in SQUARE_NEIGHBOR_OFFSETS]
  for y in range(size):
    for x in range(size):
      if board[y][x] == EMPTY and rng.random() < density:
        rng.shuffle(offsets)
        for dy,dx in offsets:
          if can_place_tent(board,y+dy,x+dx):
            board[y+dy][x+dx] = TENT
            board[y][x] = TREE
            break
  board = [[GRASS if cell == EMPTY else cell for cell in row] for row in board]
  rowsums, colsums = compute_sums(board)
  return board, rowsums, colsums

def random_puzzle(size, density=0.5, seed=None):
  """(initial TentConfig, hidden solution board) for a random solvable puzzle."""
  solution, rowsums, colsums = random_solution(size, density, seed)
  return TentConfig(rowsums, colsums, copy_board_trees_only(solution)), solution
