# cell markers and grid helpers shared by the solvers
#
# boards are lists of rows, indexed board[y][x]

EMPTY='.'
GRASS='-'
TENT='^'
TREE='%'
WALL='w'

MARKERS = [EMPTY, GRASS, TENT, TREE]

SQUARE_NEIGHBOR_OFFSETS = [ [-1,0], [0,-1], [0,1], [1,0] ]
ALL_NEIGHBOR_OFFSETS = [ [-1,-1], [-1,0], [-1,1], [0,-1], [0,1], [1,-1], [1,0], [1,1] ]
TWOBYTWO_NEIGHBOR_OFFSETS = [ [0,0], [0,1], [1,0], [1,1] ]

def new_board(size):
  return [[EMPTY] * size for y in range(size)]

def copy_board(board):
  return [row.copy() for row in board]

def copy_board_trees_only(board):
  return [[TREE if cell == TREE else EMPTY for cell in row] for row in board]

def legal_cell(board,y,x):
  return (0 <= y < len(board) and 0 <= x < len(board[y]))

def get_cell(board,y,x):
  if not legal_cell(board,y,x): return WALL
  return board[y][x]

def has_adjacent(board,y,x,celltype):
  for dy,dx in SQUARE_NEIGHBOR_OFFSETS:
    if get_cell(board,y+dy,x+dx) == celltype: return True
  return False

def has_surrounding(board,y,x,celltype):
  """8-directional version of has_adjacent()."""
  for dy,dx in ALL_NEIGHBOR_OFFSETS:
    if get_cell(board,y+dy,x+dx) == celltype: return True
  return False

def compute_sums(board):
  """tents per row and per column."""
  rowsums = [0] * len(board)
  colsums = [0] * len(board)
  for y, row in enumerate(board):
    for x, cell in enumerate(row):
      if cell == TENT:
        rowsums[y] += 1
        colsums[x] += 1
  return rowsums, colsums
