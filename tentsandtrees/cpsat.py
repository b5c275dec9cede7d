# the same rules as TentConfig, handed to the OR-Tools CP-SAT solver.
# used to cross-check the backtracker, not to replace it.

from ortools.sat.python import cp_model

from .board import GRASS, TENT, TREE, TWOBYTWO_NEIGHBOR_OFFSETS, SQUARE_NEIGHBOR_OFFSETS
from .board import legal_cell, has_adjacent, copy_board_trees_only

SOLVER_TIMEOUT = 100.0

class SolutionCollector(cp_model.CpSolverSolutionCallback):
  """Collect solution boards, stopping after limit of them."""

  def __init__(self, variables, board, limit):
    cp_model.CpSolverSolutionCallback.__init__(self)
    self.__variables = variables
    self.__board = board
    self.__limit = limit
    self.__solnboards = []

  def SolutionBoards(self):
    return self.__solnboards

  def OnSolutionCallback(self):
    soln_board = copy_board_trees_only(self.__board)
    for y, row in enumerate(soln_board):
      for x, cell in enumerate(row):
        if cell != TREE:
          var = self.__variables[y][x]
          row[x] = TENT if var is not None and self.Value(var) == 1 else GRASS
    self.__solnboards.append(soln_board)
    if self.__limit and len(self.__solnboards) >= self.__limit:
      self.StopSearch()

def ortools_cpsat_solver(board, rowsums, colsums, limit=1, timeout=SOLVER_TIMEOUT):
  """up to limit solution boards (limit=0 for all). [] if there is none.

  raises RuntimeError if the solver gives up before deciding.
  """
  size = len(board)
  model = cp_model.CpModel()
  solver = cp_model.CpSolver()

  # only cells next to a tree can hold a tent
  vars = []
  for y in range(size):
    vars.append([None] * size)
    for x in range(size):
      if board[y][x] != TREE and has_adjacent(board, y, x, TREE):
        vars[y][x] = model.NewIntVar(0, 1, f"y{y}x{x}")

  def candidates(cells):
    return [vars[y][x] for y,x in cells if vars[y][x] is not None]

  for y in range(size):
    rowsum_vars = candidates([[y,x] for x in range(size)])
    if len(rowsum_vars) < rowsums[y]:
      return []
    if rowsum_vars:
      model.Add(sum(rowsum_vars) == rowsums[y])
  for x in range(size):
    colsum_vars = candidates([[y,x] for y in range(size)])
    if len(colsum_vars) < colsums[x]:
      return []
    if colsum_vars:
      model.Add(sum(colsum_vars) == colsums[x])

  # every tree needs a tent
  for y in range(size):
    for x in range(size):
      if board[y][x] == TREE:
        neighbor_vars = candidates([[y+dy,x+dx] for dy,dx in SQUARE_NEIGHBOR_OFFSETS
                                    if legal_cell(board, y+dy, x+dx)])
        if len(neighbor_vars) == 0:
          return []
        model.Add(sum(neighbor_vars) >= 1)

  # no tent can be adjacent to another tent - one tent per 2x2 grid
  for y in range(size - 1):
    for x in range(size - 1):
      window_vars = candidates([[y+dy,x+dx] for dy,dx in TWOBYTWO_NEIGHBOR_OFFSETS])
      if len(window_vars) > 1:
        model.Add(sum(window_vars) <= 1)

  callback = SolutionCollector(vars, board, limit)
  solver.parameters.enumerate_all_solutions = True
  solver.parameters.max_time_in_seconds = timeout
  status = solver.Solve(model, callback)
  if status == cp_model.MODEL_INVALID:
    raise RuntimeError(f"cpsat: model invalid: {model.Validate()}")
  if status == cp_model.UNKNOWN:
    raise RuntimeError("cpsat: solver says UNKNOWN / timeout")
  return callback.SolutionBoards()
