"""Per-episode training metrics and a non-blocking channel to publish them.

The trainer calls ``publish`` once per finished episode. A consumer (e.g. a
dashboard running in another thread) calls ``poll`` or ``drain``. Publishing
never blocks and never raises: when the channel is full the snapshot is
dropped and counted in ``dropped``, and after ``close`` it is ignored.
"""

import queue
import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class EpisodeStats:
    episode: int  # index of the finished episode, starting at 0
    total_reward: float
    steps: int


class ChannelClosed(Exception):
    """Raised to the consumer once the channel is closed and empty."""


class MetricsChannel:
    def __init__(self, maxsize: int = 1024):
        self._queue: queue.Queue = queue.Queue(maxsize=maxsize)
        self._closed = threading.Event()
        self.dropped = 0

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def publish(self, stats: EpisodeStats) -> None:
        if self.closed:
            return
        try:
            self._queue.put_nowait(stats)
        except queue.Full:
            self.dropped += 1

    def poll(self) -> EpisodeStats | None:
        """Next snapshot, or None if nothing is pending.

        Raises:
            ChannelClosed: If the channel was closed and everything was consumed
        """
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            if self.closed:
                raise ChannelClosed("Channel disconnected.")
            return None

    def drain(self) -> list[EpisodeStats]:
        """All pending snapshots, oldest first."""
        items = []
        while True:
            try:
                items.append(self._queue.get_nowait())
            except queue.Empty:
                return items

    def close(self) -> None:
        self._closed.set()
