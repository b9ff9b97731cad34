from abc import ABC, abstractmethod
from typing import Iterator, List, Tuple

# Event Types
EVT_CLOSE = 0x01
EVT_OPEN = 0x02


class WallListener(ABC):
    """
    Host-side view of the walls. The grid calls on_wall_set for every wall
    write so a host can toggle its own wall visuals.
    """

    @abstractmethod
    def on_wall_set(self, x: int, y: int, direction: int, closed: bool):
        pass


class EventLog(WallListener):
    """Keeps every wall write in memory as (type, x, y, direction)."""

    def __init__(self):
        self.events: List[Tuple[int, int, int, int]] = []

    def on_wall_set(self, x: int, y: int, direction: int, closed: bool):
        self.events.append((EVT_CLOSE if closed else EVT_OPEN, x, y, direction))

    def openings(self) -> Iterator[Tuple[int, int, int]]:
        for type_code, x, y, direction in self.events:
            if type_code == EVT_OPEN:
                yield (x, y, direction)

    def clear(self):
        self.events = []

    def __len__(self) -> int:
        return len(self.events)
