import pytest

from tentsandtrees.board import EMPTY, GRASS, TENT, TREE, compute_sums
from tentsandtrees.loader import parse_puzzle
from tentsandtrees.tentconfig import TentConfig, tree_deadlines

EXAMPLE = """
3
2 0 1
2 0 1
. % .
% . .
. % .
"""


def grid(*rows):
  return [row.split() for row in rows]


def test_initial_config():
  config = parse_puzzle(EXAMPLE)
  assert config.size == 3
  assert config.cursor == -1
  assert config.next_cell() == (0, 0)
  assert config.is_valid()
  assert not config.is_goal()


def test_successors_try_tent_before_grass():
  config = parse_puzzle(EXAMPLE)
  tent, grass = config.successors()
  assert tent.board[0][0] == TENT
  assert grass.board[0][0] == GRASS
  assert tent.cursor == grass.cursor == 0
  # the parent is left alone
  assert config.board[0][0] == EMPTY
  assert config.cursor == -1


def test_tree_has_a_single_successor():
  config = parse_puzzle(EXAMPLE).successors()[0]
  (child,) = config.successors()
  assert child.cursor == 1
  assert child.board == config.board


def test_successors_decide_only_the_next_cell():
  stack = [parse_puzzle(EXAMPLE)]
  while stack:
    config = stack.pop()
    for child in config.successors():
      assert child.cursor == config.cursor + 1
      changed = [(y, x) for y in range(3) for x in range(3)
             if child.board[y][x] != config.board[y][x]]
      assert set(changed) <= {config.next_cell()}
      if child.is_valid():
        stack.append(child)


def test_no_successors_after_last_cell():
  config = TentConfig([0], [0], grid("-"), cursor=0)
  assert config.is_goal()
  assert config.successors() == []


def test_no_tent_once_row_is_full():
  config = TentConfig([1, 1, 1], [1, 1, 1], grid("^ % .", "% . .", ". % ."), cursor=1)
  (child,) = config.successors()
  assert child.board[0][2] == GRASS


def test_no_tent_once_column_is_full():
  config = TentConfig([1, 0, 1], [1, 0, 1], grid("^ % -", "- - -", ". % ."), cursor=5)
  assert config.next_cell() == (2, 0)
  (child,) = config.successors()
  assert child.board[2][0] == GRASS


def test_no_tent_next_to_tent():
  config = TentConfig([2, 1, 1], [1, 1, 1], grid("^ . .", "% % .", ". . ."), cursor=0)
  (child,) = config.successors()
  assert child.board[0][1] == GRASS


def test_no_tent_away_from_trees():
  config = TentConfig([1, 1, 1], [1, 1, 1], grid(". . .", ". . .", ". . %"))
  (child,) = config.successors()
  assert child.board[0][0] == GRASS


def test_row_over_quota_is_invalid():
  config = TentConfig([0, 1, 1], [1, 1, 1], grid("^ % .", ". . .", ". . ."), cursor=0)
  assert not config.is_valid()


def test_column_over_quota_is_invalid():
  config = TentConfig([1, 1, 1], [0, 1, 1], grid("^ % .", ". . .", ". . ."), cursor=0)
  assert not config.is_valid()


def test_last_cell_needs_exact_sums():
  short = TentConfig([1, 0, 1], [1, 0, 1], grid("^ % -", "- - -", "- % -"), cursor=8)
  assert not short.is_valid()
  exact = TentConfig([1, 0, 1], [1, 0, 1], grid("^ % -", "- - -", "- % ^"), cursor=8)
  assert exact.is_valid()
  assert exact.is_goal()


def test_empty_one_by_one():
  config = TentConfig([0], [0], grid("."))
  (child,) = config.successors()
  assert child.board == [[GRASS]]
  assert child.is_valid()
  assert child.is_goal()


def test_tree_coverage_waits_for_last_neighbor():
  # tree at 0,1 can still get a tent at 1,1 (cursor 4)
  waiting = TentConfig([2, 0, 1], [2, 0, 1], grid("- % -", "% . .", ". % ."), cursor=3)
  assert waiting.is_valid()
  too_late = TentConfig([2, 0, 1], [2, 0, 1], grid("- % -", "% - .", ". % ."), cursor=4)
  assert not too_late.is_valid()


def test_boxed_in_tree_is_pruned():
  board = grid("% % .", "% . .", ". . .")
  before = TentConfig([1, 1, 1], [1, 1, 1], [row.copy() for row in board], cursor=2)
  assert before.is_valid()
  after = TentConfig([1, 1, 1], [1, 1, 1], [row.copy() for row in board], cursor=3)
  assert not after.is_valid()


def test_lone_tree_is_invalid_from_the_start():
  config = TentConfig([0], [0], grid("%"))
  assert tree_deadlines(config.board) == [(-1, 0, 0)]
  assert not config.is_valid()


def test_tree_deadlines():
  board = grid(". % .", "% . .", ". % .")
  assert tree_deadlines(board) == [(4, 0, 1), (6, 1, 0), (8, 2, 1)]


def test_tents_and_str():
  config = TentConfig([2, 0, 1], [2, 0, 1], grid("^ % ^", "% - -", "^ % -"), cursor=8)
  assert config.tents() == [[0, 0], [0, 2], [2, 0]]
  assert config.undecided() == 0
  assert str(config) == (
    " -----\n"
    "|^ % ^|2\n"
    "|% - -|0\n"
    "|^ % -|1\n"
    " -----\n"
    " 2 0 1\n")


def test_reachable_configs_stay_within_quota():
  config = parse_puzzle(EXAMPLE)
  stack = [config]
  while stack:
    config = stack.pop()
    rowsums, colsums = compute_sums(config.board)
    assert all(n <= q for n, q in zip(rowsums, config.rowsums))
    assert all(n <= q for n, q in zip(colsums, config.colsums))
    stack.extend(child for child in config.successors() if child.is_valid())


@pytest.mark.parametrize("rowsums, colsums, board", [
  ([1, 1], [1, 1, 1], grid(". . .", ". . .", ". . .")),
  ([1, 1, 1], [1], grid(". . .", ". . .", ". . .")),
  ([1, 1, 1], [1, 1, 1], grid(". . .", ". .", ". . .")),
  ([1, 1, 1], [1, 1, 1], grid(". . .", ". x .", ". . .")),
  ([], [], []),
])
def test_bad_construction(rowsums, colsums, board):
  with pytest.raises(ValueError):
    TentConfig(rowsums, colsums, board)


def test_cursor_must_be_on_board():
  with pytest.raises(ValueError):
    TentConfig([0], [0], grid("."), cursor=1)


@pytest.mark.parametrize("board, cursor", [
  (grid(". % .", ". . ^", ". . ."), -1),
  (grid("- % -", "- . ^", ". . ."), 3),
  (grid("- % -", "- - -", "- - -"), 4),
])
def test_cells_past_cursor_must_be_undecided(board, cursor):
  with pytest.raises(ValueError, match="past the cursor"):
    TentConfig([1, 1, 1], [1, 1, 1], board, cursor)
