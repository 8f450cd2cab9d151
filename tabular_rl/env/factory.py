"""Factory for creating environments based on env config."""

from omegaconf import OmegaConf

from tabular_rl.env.chain import ChainEnv
from tabular_rl.env.gym_adapter import GymnasiumEnv


def make_env(env_cfg, seed: int | None = None):
    """Return an environment matching *env_cfg.type*.

    Args:
        env_cfg: Config object with at least a ``type`` attribute.
            For ``chain``, also accepts n_states, goal_reward, step_reward,
            max_steps. For ``gym``, requires ``id`` and accepts ``kwargs``
            forwarded to ``gymnasium.make``.
        seed: Optional seed for gymnasium environments.

    Returns:
        An ``Environment`` instance.
    """
    env_type = getattr(env_cfg, "type", "chain")

    if env_type == "chain":
        return ChainEnv(
            n_states=getattr(env_cfg, "n_states", 5),
            goal_reward=getattr(env_cfg, "goal_reward", 1.0),
            step_reward=getattr(env_cfg, "step_reward", 0.0),
            max_steps=getattr(env_cfg, "max_steps", 100),
        )

    if env_type == "gym":
        kwargs = getattr(env_cfg, "kwargs", None) or {}
        if OmegaConf.is_config(kwargs):
            kwargs = OmegaConf.to_container(kwargs, resolve=True)
        return GymnasiumEnv.make(env_cfg.id, seed=seed, **kwargs)

    raise ValueError(f"Unknown env type: {env_type!r}")
