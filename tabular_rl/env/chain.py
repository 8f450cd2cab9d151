import numpy as np

from tabular_rl.env.base import Environment


class ChainEnv(Environment):
    """
    Deterministic corridor of ``n_states`` cells.
    state = index of the current cell, starting at 0.
    action = 0 (left) or 1 (right)

    Notes:
    - Stepping right out of the last cell ends the episode with reward ``goal_reward``.
    - Stepping left from cell 0 stays in place.
    - Every other step yields ``step_reward``.
    - The episode is cut after ``max_steps`` steps.
    """

    LEFT = 0
    RIGHT = 1

    def __init__(
        self,
        n_states: int = 5,
        goal_reward: float = 1.0,
        step_reward: float = 0.0,
        max_steps: int = 100,
    ):
        if n_states <= 0:
            raise ValueError(f"n_states must be positive, got {n_states}")
        if max_steps <= 0:
            raise ValueError(f"max_steps must be positive, got {max_steps}")
        self.n_states = n_states
        self.goal_reward = goal_reward
        self.step_reward = step_reward
        self.max_steps = max_steps

        self.pos = 0
        self.steps = 0

    def reset(self) -> int:
        self.pos = 0
        self.steps = 0
        return self.pos

    def actions(self) -> list[int]:
        return [self.LEFT, self.RIGHT]

    def step(self, action: int) -> tuple[int | None, float]:
        self.steps += 1
        if action == self.RIGHT:
            if self.pos == self.n_states - 1:
                return None, self.goal_reward
            self.pos += 1
        elif action == self.LEFT:
            self.pos = max(0, self.pos - 1)
        else:
            raise ValueError(f"Unknown action: {action!r}")

        if self.steps >= self.max_steps:
            return None, self.step_reward
        return self.pos, self.step_reward

    def random_action(self) -> int:
        return int(np.random.randint(2))
