from pathlib import Path

import hydra
from omegaconf import DictConfig, OmegaConf

from tabular_rl.agents.base_agent import BaseAgent
from tabular_rl.agents.q_agent import QTableAgent
from tabular_rl.decay import Constant
from tabular_rl.env.base import Environment
from tabular_rl.env.factory import make_env
from tabular_rl.exploration import EpsilonGreedy


def eval_policy(agent: BaseAgent, env: Environment, max_steps: int = 10_000):
    """Run one greedy episode without learning.

    Returns:
        Tuple of (total reward, steps)
    """
    s = env.reset()
    G = 0.0
    steps = 0

    while s is not None and steps < max_steps:
        a = agent.greedy_action(s, env.actions())
        s, r = env.step(a)
        G += r
        steps += 1
    return G, steps


@hydra.main(version_base=None, config_path="conf", config_name="q_eval")
def main(cfg: DictConfig):
    orig_cwd = hydra.utils.get_original_cwd()

    agent = QTableAgent(EpsilonGreedy(Constant(0.0)))
    agent.load(str(Path(orig_cwd) / cfg.agent_path))

    env = make_env(cfg.env, seed=OmegaConf.select(cfg, "seed", default=None))
    try:
        G, steps = eval_policy(agent, env, max_steps=cfg.max_steps)
        print(f"Evaluation Return: {G:.2f}, Steps: {steps}")
    finally:
        if hasattr(env, "close"):
            env.close()


if __name__ == "__main__":
    main()
