from abc import ABC, abstractmethod


class Configuration(ABC):
  """One point in a backtracking search space.

  The backtracker only ever calls these three methods, so any puzzle that
  implements them can be searched.
  """

  @abstractmethod
  def successors(self):
    """all immediate successors, valid or not."""

  @abstractmethod
  def is_valid(self):
    """False if no goal can be reached from here."""

  @abstractmethod
  def is_goal(self):
    """True if this configuration is a complete solution."""
