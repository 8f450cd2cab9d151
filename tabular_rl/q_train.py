"""Tabular Q-learning training.

Builds the environment, exploration schedule and agent from a Hydra config,
runs one ``go`` per episode and saves the best agent, per-episode metrics and a training plot.
"""

import random
from pathlib import Path

import hydra
import numpy as np
from omegaconf import DictConfig, OmegaConf

from tabular_rl.agents.q_agent import QTableAgent
from tabular_rl.agents.sample_average import SampleAverageAgent
from tabular_rl.configs.q_config import QTableConfig, make_decay
from tabular_rl.env.factory import make_env
from tabular_rl.exploration import EpsilonGreedy
from tabular_rl.metrics import MetricsChannel
from tabular_rl.utils.io_utils import save_episodes_csv, save_q_table_csv
from tabular_rl.utils.plot_utils import plot_training


def make_agent(agent_cfg, exploration: EpsilonGreedy):
    """Return a tabular agent matching *agent_cfg.type* (``q_table`` or ``sample_average``)."""
    agent_type = getattr(agent_cfg, "type", "q_table")
    config = QTableConfig(
        alpha=float(getattr(agent_cfg, "alpha", 0.5)),
        gamma=float(getattr(agent_cfg, "gamma", 0.9)),
    )

    if agent_type == "q_table":
        return QTableAgent(exploration, config=config)
    if agent_type == "sample_average":
        return SampleAverageAgent(exploration, config=config)

    raise ValueError(f"Unknown agent type: {agent_type!r}")


def train(cfg: DictConfig, out_dir: Path, channel: MetricsChannel | None = None):
    """Train a tabular agent.

    Args:
        cfg: DictConfig with env, agent, exploration and training parameters.
        out_dir: Directory for the saved agent, episode metrics and plots.
        channel: Optional channel receiving each episode's stats.

    Returns:
        Tuple of (episode returns list, trained agent).
    """
    seed = OmegaConf.select(cfg, "seed", default=None)
    if seed is not None:
        random.seed(seed)
        np.random.seed(seed)

    env = make_env(cfg.env, seed=seed)
    exploration = EpsilonGreedy(make_decay(cfg.exploration.decay))
    agent = make_agent(cfg.agent, exploration)

    num_episodes = cfg.num_episodes
    log_every = OmegaConf.select(cfg, "log_every", default=1)

    history = []
    epsilons = []
    best_return = -float("inf")
    best_state = None

    print(f"Starting {agent.get_config()['agent_type']} training for {num_episodes} episodes")
    print(f"Config: {agent.get_config()}")
    print("-" * 80)

    try:
        for _ in range(num_episodes):
            eps = exploration.epsilon(agent.episode)
            stats = agent.go(env)
            if channel is not None:
                channel.publish(stats)

            history.append(stats)
            epsilons.append(eps)
            if (stats.episode + 1) % log_every == 0:
                print(
                    f"Episode {stats.episode + 1}/{num_episodes}, Return: {stats.total_reward:.2f}, "
                    f"Steps: {stats.steps}, Epsilon: {eps:.4f}"
                )

            if stats.total_reward > best_return:
                best_return = stats.total_reward
                best_state = agent.state_dict()
    finally:
        if hasattr(env, "close"):
            env.close()
        if channel is not None:
            channel.close()

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    agent.save(str(out_dir / "agent.pkl"))
    if best_state is not None:
        best_agent = make_agent(cfg.agent, exploration)
        best_agent.load_state_dict(best_state)
        best_agent.save(str(out_dir / "best_agent.pkl"))
    save_q_table_csv(agent.q_table, out_path=str(out_dir / "q_table.csv"))
    save_episodes_csv(history, epsilons, out_path=str(out_dir / "episodes.csv"))

    print("-" * 80)
    print(
        f"Training completed. Best return: {best_return:.2f}. "
        f"Q-table size: {len(agent.q_table)}. Agent saved to {out_dir / 'agent.pkl'}."
    )

    if OmegaConf.select(cfg, "plot", default=True):
        plot_training(
            history,
            epsilons,
            out_path=str(out_dir / "training.png"),
            smooth_window=OmegaConf.select(cfg, "smooth_window", default=10),
            title=f"{agent.get_config()['agent_type']} training",
        )

    return [s.total_reward for s in history], agent


@hydra.main(version_base=None, config_path="conf", config_name="q_train")
def main(cfg: DictConfig):
    orig_cwd = hydra.utils.get_original_cwd()
    train(cfg, out_dir=Path(orig_cwd) / cfg.out_dir)


if __name__ == "__main__":
    main()
