import os, sys, re, random, time

from .backtracker import Backtracker
from .cpsat import ortools_cpsat_solver, SOLVER_TIMEOUT
from .generator import random_puzzle
from .loader import read_puzzle, PuzzleFormatError, MAX_SIZE
from .render import print_board
from .verify import check_solution, does_solution_match, is_one_tree_per_tent

class SettingsError(ValueError):
  pass

def env_flag(environ, name, default):
  return int(environ.get(name, default).strip() or default) == 1

def read_settings(environ):
  settings = {}
  size = environ.get('SIZE', '8').strip()
  try:
    width = int(re.sub('x.+', '', size))
    height = int(re.sub('.+?x', '', size))
  except ValueError:
    raise SettingsError(f"SIZE must look like 8 or 8x8, not {size}") from None
  if width != height:
    raise SettingsError(f"puzzles must be square, not {width}x{height}")
  if width < 1 or width > MAX_SIZE:
    raise SettingsError(f"SIZE must be between 1 and {MAX_SIZE}, not {width}")
  settings['size'] = width
  try:
    settings['density'] = float(environ.get('DENSITY', '0.5').strip())
    settings['timeout'] = float(environ.get('TIMEOUT', str(SOLVER_TIMEOUT)).strip())
    settings['seed'] = int(environ.get('SEED', random.randint(0, 9999999)))
    settings['all'] = env_flag(environ, 'ALL', '0')
    settings['crosscheck'] = env_flag(environ, 'CROSSCHECK', '1')
  except ValueError as e:
    raise SettingsError(f"bad setting: {e}") from None
  if settings['density'] < 0.1 or settings['density'] > 1.0:
    raise SettingsError(f"DENSITY must be between 0.1 and 1.0, not {settings['density']}")
  return settings

def crosscheck(config, solutions, settings):
  """True if CP-SAT agrees with the backtracker."""
  limit = 0 if settings['all'] else 1
  try:
    boards = ortools_cpsat_solver(config.board, config.rowsums, config.colsums, limit, settings['timeout'])
  except RuntimeError as e:
    print(f"oops! {e}")
    return False
  if settings['all']:
    found = sorted(map(str, [s.board for s in solutions]))
    expected = sorted(map(str, boards))
    if found != expected:
      print(f"oops! cpsat found {len(boards)} solutions, backtracker found {len(solutions)}")
      return False
  elif bool(boards) != bool(solutions):
    print(f"oops! cpsat {'found' if boards else 'did not find'} a solution")
    return False
  print("cpsat agrees")
  return True

def main(argv=None, environ=None):
  """solve a puzzle file, or a random puzzle if no file is given.

  exit status 0 when solved, 2 when there is no solution, 1 on errors.
  """
  argv = sys.argv[1:] if argv is None else argv
  environ = os.environ if environ is None else environ
  try:
    settings = read_settings(environ)
  except SettingsError as e:
    print(e)
    return 1

  hidden = None
  if argv:
    try:
      config = read_puzzle(argv[0])
    except (OSError, PuzzleFormatError) as e:
      print(f"can't read puzzle {argv[0]}: {e}")
      return 1
  else:
    print(f"SEED={settings['seed']}")
    config, hidden = random_puzzle(settings['size'], settings['density'], settings['seed'])
  print("puzzle:")
  print_board(config.board, config.rowsums, config.colsums)

  print("running the solver...")
  start_ts = time.time()
  backtracker = Backtracker()
  if settings['all']:
    solutions = list(backtracker.solve_all(config))
  else:
    solution = backtracker.solve(config)
    solutions = [solution] if solution is not None else []
  elapsed_secs = time.time() - start_ts
  print(f"explored {backtracker.explored} configs, pruned {backtracker.pruned}, {elapsed_secs:.2f} secs")

  for solution in solutions:
    print(solution)
    errors = check_solution(solution.board, config.rowsums, config.colsums)
    if errors:
      print("\n".join(errors))
      print("oops! solver returned a broken board")
      return 1
    if not is_one_tree_per_tent(solution.board, print_mismatch=False):
      print("note: trees and tents can't be paired one to one in this solution")

  if settings['crosscheck'] and not crosscheck(config, solutions, settings):
    return 1
  if not solutions:
    print("no solution")
    return 2
  print(f"success! {len(solutions)} solution{'s' if len(solutions) != 1 else ''}")
  if hidden is not None:
    if any(does_solution_match(s.board, hidden) for s in solutions):
      print("and it matches the generated solution")
    else:
      print("but it doesn't match the generated solution (new solution)")
  return 0
