from abc import ABC, abstractmethod
from typing import Hashable, List, Optional, Tuple


class EnvironmentContractError(RuntimeError):
    """Raised when an environment breaks the contract the agents rely on."""


class Environment(ABC):
    """Abstract base class for discrete environments driven by tabular agents.

    States and actions are opaque to the agents but must be hashable, since
    they key the Q-table.
    """

    @abstractmethod
    def reset(self) -> Hashable:
        """Start a new episode and return the initial state."""
        pass

    @abstractmethod
    def actions(self) -> List[Hashable]:
        """Actions legal from the current state."""
        pass

    @abstractmethod
    def step(self, action: Hashable) -> Tuple[Optional[Hashable], float]:
        """Apply an action. Returns (next_state, reward); next_state is None when the episode ends."""
        pass

    @abstractmethod
    def random_action(self) -> Hashable:
        """Action to take when exploring."""
        pass
