import gymnasium as gym

from tabular_rl.env.base import Environment


class GymnasiumEnv(Environment):
    """Adapts a gymnasium env with Discrete observation and action spaces.

    Gymnasium's step() returns (obs, reward, terminated, truncated, info).
    The tabular agents expect (next_state, reward) with next_state=None at
    the end of an episode, so both termination and truncation map to None.

    Args:
        env: A gymnasium env, e.g. ``gym.make("FrozenLake-v1", is_slippery=False)``
        seed: Optional seed passed to the first reset() and the action space
    """

    def __init__(self, env: gym.Env, seed: int | None = None):
        if not isinstance(env.observation_space, gym.spaces.Discrete):
            raise ValueError(f"Expected Discrete observation space, got {env.observation_space}")
        if not isinstance(env.action_space, gym.spaces.Discrete):
            raise ValueError(f"Expected Discrete action space, got {env.action_space}")
        self.env = env
        self._seed = seed
        if seed is not None:
            self.env.action_space.seed(seed)
        space = env.action_space
        self._actions = [int(space.start) + i for i in range(int(space.n))]

    @classmethod
    def make(cls, env_id: str, seed: int | None = None, **kwargs) -> "GymnasiumEnv":
        return cls(gym.make(env_id, **kwargs), seed=seed)

    def reset(self) -> int:
        obs, _ = self.env.reset(seed=self._seed)
        # only seed the first episode, later resets continue the same stream
        self._seed = None
        return int(obs)

    def actions(self) -> list[int]:
        return list(self._actions)

    def step(self, action: int) -> tuple[int | None, float]:
        obs, reward, terminated, truncated, _ = self.env.step(action)
        if terminated or truncated:
            return None, float(reward)
        return int(obs), float(reward)

    def random_action(self) -> int:
        return int(self.env.action_space.sample())

    def close(self) -> None:
        self.env.close()
