from dataclasses import dataclass
from enum import Enum

import numpy as np

from tabular_rl.decay import Decay


class Choice(Enum):
    EXPLORE = "explore"
    EXPLOIT = "exploit"


@dataclass(frozen=True)
class EpsilonGreedy:
    """Epsilon-greedy exploration driven by a decay schedule.

    The exploration probability at a given episode is ``decay.evaluate(episode)``.

    Args:
        decay: Schedule producing epsilon from the episode index
    """

    decay: Decay

    def epsilon(self, episode: int) -> float:
        """Exploration probability for the given episode."""
        return float(self.decay.evaluate(float(episode)))

    def choose(self, episode: int) -> Choice:
        """Decide whether to explore or exploit.

        Args:
            episode: Number of episodes completed so far

        Returns:
            Choice.EXPLORE with probability epsilon, otherwise Choice.EXPLOIT
        """
        if np.random.random() < self.epsilon(episode):
            return Choice.EXPLORE
        return Choice.EXPLOIT
