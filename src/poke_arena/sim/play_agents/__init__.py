"""Move-selection policies for autonomous combatants.

Re-exports the base class and all concrete policies so consumers can do::

    from poke_arena.sim.play_agents import MovePolicy, RandomPolicy
"""

from .base import MovePolicy
from .greedy_agent import GreedyPolicy
from .random_agent import RandomPolicy

__all__ = ["GreedyPolicy", "MovePolicy", "RandomPolicy"]
