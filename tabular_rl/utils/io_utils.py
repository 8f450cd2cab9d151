import csv
from pathlib import Path


def save_episodes_csv(stats, epsilons, out_path: str):
    """Write one row per episode: episode number, return, steps and epsilon."""
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, mode="w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["episode", "return", "steps", "epsilon"])
        for s, eps in zip(stats, epsilons):
            writer.writerow([s.episode + 1, s.total_reward, s.steps, eps])
    print(f"Saved episode metrics to {out_path}.")


def save_q_table_csv(q_table: dict, out_path: str):
    """Write a Q-table as rows of (state, action, value), ordered by the repr of state and action."""
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    rows = sorted(q_table.items(), key=lambda kv: (repr(kv[0][0]), repr(kv[0][1])))
    with open(out_path, mode="w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["state", "action", "value"])
        for (state, action), value in rows:
            writer.writerow([state, action, value])
    print(f"Saved Q-table to {out_path}.")
