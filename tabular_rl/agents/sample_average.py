from typing import Any, Dict, Hashable, List

from tabular_rl.agents.base_agent import BaseAgent
from tabular_rl.memory import Experience


class SampleAverageAgent(BaseAgent):
    """Tabular agent whose Q-values are running means of their TD targets.

    Same as Q-learning but with step size 1/N(s,a), where N(s,a) counts the
    updates of each pair. ``alpha`` is kept for the config but not used.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.visits: Dict[tuple, int] = {}

    def learn(self, experience: Experience, next_actions: List[Hashable]) -> None:
        key = (experience.state, experience.action)
        n = self.visits.get(key, 0) + 1
        self.visits[key] = n

        current_q = self.q_table.get(key, 0.0)
        td_target = experience.reward + self.gamma * self.max_q(experience.next_state, next_actions)
        self.q_table[key] = current_q + (td_target - current_q) / n

    def state_dict(self) -> Dict[str, Any]:
        state_dict = super().state_dict()
        state_dict["visits"] = dict(self.visits)
        return state_dict

    def load_state_dict(self, state_dict: Dict[str, Any]) -> None:
        super().load_state_dict(state_dict)
        if "visits" in state_dict:
            self.visits = dict(state_dict["visits"])
