from typing import Hashable, List

from tabular_rl.agents.base_agent import BaseAgent
from tabular_rl.memory import Experience


class QTableAgent(BaseAgent):
    """Tabular Q-Learning agent with decaying epsilon-greedy exploration.

    Implements one-step Q-learning (off-policy TD(0)) on a Q-table keyed by
    (state, action) pairs. States and actions can be any hashable values.

    Example:
        >>> from tabular_rl.decay import Exponential
        >>> from tabular_rl.env.chain import ChainEnv
        >>> from tabular_rl.exploration import EpsilonGreedy
        >>> agent = QTableAgent(EpsilonGreedy(Exponential(0.05, 1.0, 0.05)), alpha=0.5, gamma=0.9)
        >>> env = ChainEnv(n_states=4)
        >>> for _ in range(200):
        ...     stats = agent.go(env)
    """

    def learn(self, experience: Experience, next_actions: List[Hashable]) -> None:
        """Update the Q-value for the visited state and action.

        Q(s,a) ← (1-α)Q(s,a) + α[r + γ max_a' Q(s',a')]

        Args:
            experience: Transition just observed
            next_actions: Actions legal in ``experience.next_state``

        Note:
            The bootstrap term is 0.0 when ``next_state`` is None.
        """
        state, action = experience.state, experience.action
        current_q = self.q_value(state, action)
        max_next_q = self.max_q(experience.next_state, next_actions)
        td_target = experience.reward + self.gamma * max_next_q

        self.q_table[(state, action)] = (1 - self.alpha) * current_q + self.alpha * td_target
