from npuzzle.engine.solver.node import SearchNode
from npuzzle.engine.solver.solver import Solver
from npuzzle.engine.solver.stats import SearchStats

__all__ = ["SearchNode", "SearchStats", "Solver"]
