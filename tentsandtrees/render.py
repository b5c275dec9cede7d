HORI_DIVIDE='-'
VERT_DIVIDE='|'

def render_board(board, rowsums, colsums):
  """board framed by dividers, row sums on the right and column sums below.

   -----
  |. % .|2
  |% . .|0
  |. % .|1
   -----
   2 0 1
  """
  # cells are space separated, without a space before the closing divider
  width = max(len(board) * 2 - 1, 0)
  border = " " + HORI_DIVIDE * width
  lines = [border]
  for y, row in enumerate(board):
    lines.append(f"{VERT_DIVIDE}{' '.join(row)}{VERT_DIVIDE}{rowsums[y]}")
  lines.append(border)
  lines.append(" " + ' '.join([str(x) for x in colsums]))
  return "\n".join(lines) + "\n"

def print_board(board, rowsums, colsums):
  print(render_board(board, rowsums, colsums))
