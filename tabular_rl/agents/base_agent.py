import pickle
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Hashable, List, Optional

from tabular_rl.configs.q_config import QTableConfig
from tabular_rl.env.base import Environment, EnvironmentContractError
from tabular_rl.exploration import Choice, EpsilonGreedy
from tabular_rl.memory import Experience
from tabular_rl.metrics import EpisodeStats


class BaseAgent(ABC):
    """Abstract base class for tabular agents.

    Owns the Q-table, the exploration policy and the episode counter, and
    drives the interaction loop. Subclasses only define the learning update.

    The Q-table maps (state, action) pairs to values. Pairs that were never
    updated are not stored and read as 0.0.

    Args:
        exploration: Policy deciding between exploring and exploiting
        alpha: Learning rate, in [0, 1]
        gamma: Discount factor, in [0, 1]
        config: Optional QTableConfig object (overrides alpha and gamma)

    Raises:
        ValueError: If alpha or gamma is outside [0, 1]
    """

    def __init__(
        self,
        exploration: EpsilonGreedy,
        alpha: float = 0.5,
        gamma: float = 0.9,
        config: QTableConfig | None = None,
    ):
        if config is None:
            # Validates alpha and gamma
            config = QTableConfig(alpha=alpha, gamma=gamma)
        self.alpha = config.alpha
        self.gamma = config.gamma
        self.exploration = exploration

        self.q_table: Dict[tuple, float] = {}
        self.episode = 0  # Completed episodes, drives the exploration schedule

    def q_value(self, state: Hashable, action: Hashable) -> float:
        return self.q_table.get((state, action), 0.0)

    def max_q(self, state: Optional[Hashable], actions: List[Hashable]) -> float:
        """Largest Q-value over ``actions`` in ``state``; 0.0 for a terminal state."""
        if state is None or not actions:
            return 0.0
        return max(self.q_value(state, a) for a in actions)

    def greedy_action(self, state: Hashable, actions: List[Hashable]) -> Hashable:
        """Action with the highest Q-value. Ties go to the earliest action in ``actions``.

        Raises:
            EnvironmentContractError: If ``actions`` is empty
        """
        if not actions:
            raise EnvironmentContractError(
                f"Environment offered no legal actions in non-terminal state {state!r}"
            )
        best_action = actions[0]
        best_value = self.q_value(state, best_action)
        for a in actions[1:]:
            value = self.q_value(state, a)
            if value > best_value:
                best_action, best_value = a, value
        return best_action

    def act(self, env: Environment, state: Hashable, actions: List[Hashable]) -> Hashable:
        """Select an action using the exploration policy.

        Args:
            env: Environment, asked for a random action when exploring
            state: Current state
            actions: Actions legal in ``state``

        Raises:
            EnvironmentContractError: If ``actions`` is empty
        """
        if not actions:
            raise EnvironmentContractError(
                f"Environment offered no legal actions in non-terminal state {state!r}"
            )
        if self.exploration.choose(self.episode) is Choice.EXPLORE:
            return env.random_action()
        return self.greedy_action(state, actions)

    @abstractmethod
    def learn(self, experience: Experience, next_actions: List[Hashable]) -> None:
        """Update the Q-table from one transition."""
        pass

    def go(self, env: Environment) -> EpisodeStats:
        """Run one full episode, learning after every step.

        Returns:
            Stats of the finished episode

        Note:
            The episode counter is incremented once, after the episode ends.
        """
        next_state = env.reset()
        actions = env.actions()
        total_reward = 0.0
        steps = 0

        while next_state is not None:
            state = next_state
            action = self.act(env, state, actions)
            next_state, reward = env.step(action)
            actions = env.actions()
            self.learn(Experience(state, action, next_state, reward), actions)
            total_reward += reward
            steps += 1

        stats = EpisodeStats(episode=self.episode, total_reward=total_reward, steps=steps)
        self.episode += 1
        return stats

    def state_dict(self) -> Dict[str, Any]:
        return {
            "q_table": dict(self.q_table),
            "episode": self.episode,
            "config": self.get_config(),
        }

    def load_state_dict(self, state_dict: Dict[str, Any]) -> None:
        if "q_table" in state_dict:
            self.q_table = dict(state_dict["q_table"])
        if "episode" in state_dict:
            self.episode = state_dict["episode"]
        if "config" in state_dict:
            saved_config = state_dict["config"]
            config = QTableConfig(
                alpha=saved_config.get("alpha", self.alpha),
                gamma=saved_config.get("gamma", self.gamma),
            )
            self.alpha = config.alpha
            self.gamma = config.gamma

    def save(self, path: str) -> None:
        """Save the Q-table and agent state to a pickle file.

        Args:
            path: Path to save the agent (will create parent directories if needed)
        """
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            pickle.dump(self.state_dict(), f)

    def load(self, path: str) -> None:
        """Load the Q-table and agent state from a pickle file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the saved alpha or gamma is outside [0, 1]
        """
        with open(path, "rb") as f:
            state_dict = pickle.load(f)
        self.load_state_dict(state_dict)

    def get_config(self) -> Dict[str, Any]:
        """Get the agent's configuration as a dictionary."""
        return {
            "agent_type": type(self).__name__,
            "alpha": self.alpha,
            "gamma": self.gamma,
            "exploration": repr(self.exploration.decay),
            "episode": self.episode,
            "q_table_size": len(self.q_table),
        }
