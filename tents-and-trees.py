#!python3
# backtracking solver for tents and trees: https://www.google.com/search?q=tents+and+trees+puzzle
#
# solve a puzzle file:
# python3 tents-and-trees.py puzzles/6x6.txt
#
# solve a random puzzle (see first line of output for the random seed chosen):
# SIZE=8x8 python3 tents-and-trees.py
#
# set random seed for reproducibility
# SEED=123 SIZE=8x8 python3 tents-and-trees.py
#
# list every solution, and make sure CP-SAT finds the same ones
# ALL=1 SEED=123 SIZE=6x6 python3 tents-and-trees.py
#
# test for errors (randomly)
# while [ 1 ]; do SIZE=8x8 python3 tents-and-trees.py > output.txt; status=$?; egrep 'SEED|success|oops' output.txt; if [ $status -eq 1 ]; then break; fi; done
#
# trace the search
# DEBUG=1 python3 tents-and-trees.py puzzles/3x3.txt

from tentsandtrees.cli import main

if __name__ == '__main__':
  raise SystemExit(main())
