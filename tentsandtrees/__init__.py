from .board import EMPTY, GRASS, TENT, TREE
from .configuration import Configuration
from .tentconfig import TentConfig
from .backtracker import Backtracker
from .loader import parse_puzzle, read_puzzle, PuzzleFormatError
from .render import render_board
