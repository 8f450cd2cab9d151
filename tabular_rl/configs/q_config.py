from dataclasses import dataclass

from tabular_rl.decay import Constant, Exponential, InverseTime, Linear, Step


@dataclass
class QTableConfig:
    """Configuration for tabular agents."""

    # Learning parameters
    alpha: float = 0.5  # Learning rate
    gamma: float = 0.9  # Discount factor

    def __post_init__(self):
        """Validate configuration parameters."""
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"alpha must be in [0, 1], got {self.alpha}")
        if not 0.0 <= self.gamma <= 1.0:
            raise ValueError(f"gamma must be in [0, 1], got {self.gamma}")


@dataclass
class DecayConfig:
    """Configuration for an exploration decay schedule."""

    type: str = "exponential"  # constant | exponential | inverse_time | linear | step
    value: float = 0.1  # constant only
    rate: float = 0.01
    vi: float = 1.0  # Initial value
    vf: float = 0.05  # Final value
    step: float = 10.0  # step only


def make_decay(decay_cfg):
    """Return a decay schedule matching *decay_cfg.type*.

    Args:
        decay_cfg: Config object with at least a ``type`` attribute, e.g. a
            ``DecayConfig`` or a Hydra DictConfig with the same fields.

    Raises:
        ValueError: For an unknown type or parameters that violate the
            schedule's sign invariant.
    """
    decay_type = getattr(decay_cfg, "type", "exponential")

    if decay_type == "constant":
        return Constant(value=float(decay_cfg.value))

    rate = float(getattr(decay_cfg, "rate", 0.01))
    vi = float(getattr(decay_cfg, "vi", 1.0))
    vf = float(getattr(decay_cfg, "vf", 0.05))

    if decay_type == "exponential":
        return Exponential(rate=rate, vi=vi, vf=vf)
    if decay_type == "inverse_time":
        return InverseTime(rate=rate, vi=vi, vf=vf)
    if decay_type == "linear":
        return Linear(rate=rate, vi=vi, vf=vf)
    if decay_type == "step":
        return Step(rate=rate, vi=vi, vf=vf, step=float(getattr(decay_cfg, "step", 10.0)))

    raise ValueError(f"Unknown decay type: {decay_type!r}")
