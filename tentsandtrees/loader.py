"""Reads puzzle files.

A puzzle file looks like this, '#' starts a comment:

  3        # square dimension of field
  2 0 1    # row sums, top to bottom
  2 0 1    # column sums, left to right
  . % .    # row 1, .=empty, %=tree
  % . .    # row 2
  . % .    # row 3
"""

from .board import EMPTY, TREE, MARKERS
from .tentconfig import TentConfig

MAX_SIZE = 100

class PuzzleFormatError(ValueError):
  pass

def content_lines(text):
  for line in text.splitlines():
    line = line.split('#', 1)[0].strip()
    if line:
      yield line

def parse_ints(line, size, what):
  fields = line.split()
  if len(fields) != size:
    raise PuzzleFormatError(f"expected {size} {what}, got {len(fields)}: {line!r}")
  try:
    sums = [int(field) for field in fields]
  except ValueError:
    raise PuzzleFormatError(f"{what} must be integers: {line!r}") from None
  for s in sums:
    if not 0 <= s <= size:
      raise PuzzleFormatError(f"{what} must be between 0 and {size}, not {s}")
  return sums

def parse_row(line, size, y):
  fields = line.split()
  if len(fields) != size:
    raise PuzzleFormatError(f"row {y} has {len(fields)} cells, expected {size}: {line!r}")
  for x, cell in enumerate(fields):
    if cell not in MARKERS:
      raise PuzzleFormatError(f"unknown cell {cell!r} at {y},{x}")
  # the solver decides every non-tree cell itself
  return [TREE if cell == TREE else EMPTY for cell in fields]

def parse_puzzle(text):
  lines = list(content_lines(text))
  if not lines:
    raise PuzzleFormatError("empty puzzle")
  try:
    size = int(lines[0])
  except ValueError:
    raise PuzzleFormatError(f"dimension must be an integer: {lines[0]!r}") from None
  if size < 1 or size > MAX_SIZE:
    raise PuzzleFormatError(f"dimension must be between 1 and {MAX_SIZE}, not {size}")
  if len(lines) != size + 3:
    raise PuzzleFormatError(f"expected {size+3} lines for a {size}x{size} puzzle, got {len(lines)}")
  rowsums = parse_ints(lines[1], size, "row sums")
  colsums = parse_ints(lines[2], size, "column sums")
  board = [parse_row(line, size, y) for y, line in enumerate(lines[3:])]
  return TentConfig(rowsums, colsums, board)

def read_puzzle(path):
  with open(path, encoding='utf-8') as f:
    try:
      text = f.read()
    except UnicodeDecodeError as e:
      raise PuzzleFormatError(f"not a text file: {e}") from None
  return parse_puzzle(text)
