from dataclasses import dataclass
from typing import Hashable, Optional


@dataclass(frozen=True)
class Experience:
    """A single transition. ``next_state`` is None when the episode ended."""

    state: Hashable
    action: Hashable
    next_state: Optional[Hashable]
    reward: float
