import matplotlib.pyplot as plt
import numpy as np
from pathlib import Path


def moving_average(x, w=10):
    """Trailing mean over windows of ``w`` values; shorter inputs are returned as-is."""
    values = np.asarray(x, dtype=float)
    if w <= 1 or values.size < w:
        return values
    return np.convolve(values, np.ones(w) / w, mode="valid")


def plot_training(
    stats,
    epsilons,
    out_path: str,
    smooth_window: int = 10,
    title: str = "Tabular Q-learning",
):
    """Plot episode returns and episode lengths, with epsilon on a second axis.

    Args:
        stats: EpisodeStats of each finished episode, in order
        epsilons: Exploration rate used in each episode
        out_path: Path to save the plot
        smooth_window: Window of the moving average drawn over the raw curves
        title: Figure title
    """
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)

    episodes = np.array([s.episode + 1 for s in stats])
    returns = [s.total_reward for s in stats]
    steps = [s.steps for s in stats]

    fig, (ax_ret, ax_len) = plt.subplots(2, 1, figsize=(8, 6), sharex=True)
    fig.suptitle(title)

    for ax, values, label in ((ax_ret, returns, "Return"), (ax_len, steps, "Steps")):
        ax.plot(episodes, values, alpha=0.4, label=label)
        ma = moving_average(values, smooth_window)
        if len(values) >= smooth_window > 1:
            ax.plot(episodes[smooth_window - 1:], ma, label=f"MA({smooth_window})")
        ax.set_ylabel(label)
        ax.grid(True, alpha=0.3)

    ax_eps = ax_ret.twinx()
    ax_eps.plot(episodes, epsilons, color="tab:red", linestyle="--", label="Epsilon")
    ax_eps.set_ylabel("Epsilon")
    ax_eps.set_ylim(bottom=0.0)

    handles, labels = ax_ret.get_legend_handles_labels()
    eps_handles, eps_labels = ax_eps.get_legend_handles_labels()
    ax_ret.legend(handles + eps_handles, labels + eps_labels, loc="upper left")
    ax_len.legend(loc="upper right")
    ax_len.set_xlabel("Episode")

    fig.tight_layout()
    fig.savefig(out_path, dpi=150)
    plt.close(fig)
    print(f"[OK] Saved plot: {out_path}")
