"""Tests for SampleAverageAgent (step size 1/N)."""

import pytest

from tabular_rl.agents.sample_average import SampleAverageAgent
from tabular_rl.decay import Constant
from tabular_rl.env.chain import ChainEnv
from tabular_rl.exploration import EpsilonGreedy
from tabular_rl.memory import Experience


@pytest.fixture
def agent():
    return SampleAverageAgent(EpsilonGreedy(Constant(0.0)), alpha=0.5, gamma=0.9)


class TestLearn:
    def test_first_update_takes_full_target(self, agent):
        agent.learn(Experience("s", "a", None, 3.0), [])
        assert agent.q_table[("s", "a")] == 3.0
        assert agent.visits[("s", "a")] == 1

    def test_value_is_mean_of_targets(self, agent):
        for r in (1.0, 3.0, 8.0):
            agent.learn(Experience("s", "a", None, r), [])
        assert agent.q_table[("s", "a")] == pytest.approx(4.0)
        assert agent.visits[("s", "a")] == 3

    def test_counts_are_per_pair(self, agent):
        agent.learn(Experience("s", "a", None, 1.0), [])
        agent.learn(Experience("s", "b", None, 1.0), [])
        agent.learn(Experience("s", "a", None, 1.0), [])
        assert agent.visits == {("s", "a"): 2, ("s", "b"): 1}

    def test_bootstraps_from_next_state(self, agent):
        agent.q_table[("t", "x")] = 2.0
        agent.learn(Experience("s", "a", "t", 1.0), ["x", "y"])
        assert agent.q_table[("s", "a")] == pytest.approx(1.0 + 0.9 * 2.0)


class TestEpisodes:
    def test_go_runs_episode(self, agent):
        env = ChainEnv(n_states=3, max_steps=20)
        stats = agent.go(env)
        assert stats.episode == 0
        assert agent.episode == 1
        # greedy on a fresh table keeps choosing LEFT until truncation
        assert stats.steps == 20
        assert stats.total_reward == 0.0


class TestSaveLoad:
    def test_visits_survive_round_trip(self, agent, tmp_path):
        agent.learn(Experience("s", "a", None, 1.0), [])
        agent.learn(Experience("s", "a", None, 3.0), [])
        path = tmp_path / "agent.pkl"
        agent.save(str(path))

        restored = SampleAverageAgent(EpsilonGreedy(Constant(0.0)))
        restored.load(str(path))
        assert restored.visits == {("s", "a"): 2}
        assert restored.q_table[("s", "a")] == pytest.approx(2.0)
        assert restored.get_config()["agent_type"] == "SampleAverageAgent"
