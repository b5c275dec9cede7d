# independent checks of a finished board

from ortools.sat.python import cp_model

from .board import EMPTY, TENT, TREE, ALL_NEIGHBOR_OFFSETS, SQUARE_NEIGHBOR_OFFSETS
from .board import get_cell, has_adjacent, compute_sums

def check_solution(board, expected_rowsums, expected_colsums):
  """every rule the board breaks, as messages. empty means solved."""
  size = len(board)
  rowsums, colsums = compute_sums(board)
  errors = []
  for y in range(size):
    if rowsums[y] != expected_rowsums[y]:
      errors.append(f"error: row {y} has {rowsums[y]} tents but expected {expected_rowsums[y]}.")
  for x in range(size):
    if colsums[x] != expected_colsums[x]:
      errors.append(f"error: col {x} has {colsums[x]} tents but expected {expected_colsums[x]}.")
  for y in range(size):
    for x in range(size):
      cell = board[y][x]
      if cell == EMPTY:
        errors.append(f"error: {y},{x} is undecided.")
      elif cell == TREE and not has_adjacent(board, y, x, TENT):
        errors.append(f"error: tree@{y},{x} has no tent.")
      elif cell == TENT:
        if not has_adjacent(board, y, x, TREE):
          errors.append(f"error: tent@{y},{x} has no tree.")
        # each pair is reported once, from its first tent
        for dy,dx in ALL_NEIGHBOR_OFFSETS[4:]:
          if get_cell(board, y+dy, x+dx) == TENT:
            errors.append(f"error: tents@{y},{x} and {y+dy},{x+dx} touch.")
  return errors

def does_solution_match(board, expected_board):
  """same trees and tents. grass and empty count as the same."""
  for y, row in enumerate(board):
    for x, cell in enumerate(row):
      expected = expected_board[y][x]
      if (cell in [TREE, TENT] or expected in [TREE, TENT]) and cell != expected:
        return False
  return True

def is_one_tree_per_tent(board, print_mismatch=True):
  """can every tree be paired with its own adjacent tent?

  stricter than the rules the backtracker solves for: two trees may not share
  a tent here.
  """
  model = cp_model.CpModel()
  solver = cp_model.CpSolver()
  tent_for_tree_vars = []
  tentidx = {}
  for y, row in enumerate(board):
    for x, cell in enumerate(row):
      if cell == TENT:
        tentidx[y,x] = len(tentidx)

  for y, row in enumerate(board):
    for x, cell in enumerate(row):
      if cell == TREE:
        adjacent_tent_idxs = [tentidx[y+dy,x+dx] for dy,dx in SQUARE_NEIGHBOR_OFFSETS if get_cell(board, y+dy, x+dx) == TENT]
        if len(adjacent_tent_idxs) == 0:
          if print_mismatch: print(f"is_one_tree_per_tent: tree@{y},{x} is missing a tent !")
          return False
        adjacent_tents = [[idx,idx] for idx in adjacent_tent_idxs]
        tent_for_tree_vars.append(model.NewIntVarFromDomain(
          cp_model.Domain.FromIntervals(adjacent_tents),
          't4T'+str(len(tent_for_tree_vars))))
  if len(tent_for_tree_vars) == 0:
    return True
  model.AddAllDifferent(tent_for_tree_vars)
  status = solver.Solve(model)
  if status == cp_model.INFEASIBLE:
    if print_mismatch: print("is_one_tree_per_tent: can't match trees and tents")
    return False
  if status == cp_model.MODEL_INVALID:
    print("is_one_tree_per_tent: invalid")
    print(model.Validate())
    return False
  if status == cp_model.UNKNOWN:
    print("is_one_tree_per_tent: unknown")
    return False
  return True
