# generic depth-first backtracking over Configuration objects
#
# trace the search:
# DEBUG=1 python3 tents-and-trees.py puzzles/3x3.txt

import os, sys
from contextlib import closing

DEBUG = (int(os.environ.get('DEBUG', '0').strip() or '0') == 1)

class Backtracker:
  """Searches a Configuration space for goals.

  Successors that fail is_valid() are dropped without being expanded.
  The search knows nothing about the puzzle behind the configurations.
  """

  def __init__(self, debug=DEBUG):
    self.debug = debug
    self.explored = 0
    self.pruned = 0

  def trace(self, msg, config):
    if self.debug:
      print(f"{msg}:\n{config}")

  def reserve_stack(self, config):
    # one frame per decided cell, plus some slack for the caller
    depth = getattr(config, 'size', 0) ** 2 + 100
    if sys.getrecursionlimit() < depth:
      sys.setrecursionlimit(depth)

  def search(self, config):
    self.explored += 1
    if config.is_goal():
      self.trace("goal", config)
      yield config
      return
    for child in config.successors():
      if not child.is_valid():
        self.pruned += 1
        self.trace("pruned", child)
        continue
      self.trace("valid", child)
      yield from self.search(child)

  def solve_all(self, config):
    """every goal reachable from config, in search order.

    the recursion limit is put back once the generator finishes or is closed.
    """
    self.explored = self.pruned = 0
    limit = sys.getrecursionlimit()
    self.reserve_stack(config)
    try:
      if not config.is_valid():
        self.trace("initial config is invalid", config)
        return
      yield from self.search(config)
    finally:
      sys.setrecursionlimit(limit)

  def solve(self, config):
    """the first goal reachable from config, or None."""
    with closing(self.solve_all(config)) as goals:
      for goal in goals:
        return goal
    return None
