"""Per-region display state.

Each region holds exactly one of ``Loading``, ``Found``, ``NotFound`` or
``Error`` plus the ticket of the flow that wrote it. Tickets come from a
single monotonic counter; a flow that resolves with a ticket older than the
region's current one is dropped, so a region always reflects the most
recently started flow rather than the most recently finished one.

Every open page gets its own ``DisplayState`` through ``ViewerStates``, so
tickets are only ever compared between requests of the same page.
"""
import itertools
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

DETAIL = "detail"
CATEGORIES = "categories"
REGIONS = (DETAIL, CATEGORIES)


@dataclass(frozen=True)
class Loading:
    message: str = "Cargando..."


@dataclass(frozen=True)
class Found:
    value: Any


@dataclass(frozen=True)
class NotFound:
    message: str


@dataclass(frozen=True)
class Error:
    message: str


@dataclass(frozen=True)
class Empty:
    pass


RegionState = Union[Empty, Loading, Found, NotFound, Error]


class DisplayState:
    def __init__(self):
        self._tickets = itertools.count(1)
        self._regions: Dict[str, RegionState] = {name: Empty() for name in REGIONS}
        self._current: Dict[str, int] = {name: 0 for name in REGIONS}

    def _check(self, region: str):
        if region not in self._regions:
            raise KeyError(f"Unknown display region: {region}")

    def get(self, region: str) -> RegionState:
        self._check(region)
        return self._regions[region]

    def begin(self, region: str, state: RegionState) -> int:
        """Claim a region for a new flow and show its opening state."""
        self._check(region)
        ticket = next(self._tickets)
        self._current[region] = ticket
        self._regions[region] = state
        return ticket

    def resolve(self, region: str, ticket: int, state: RegionState) -> bool:
        self._check(region)
        if ticket != self._current[region]:
            return False
        self._regions[region] = state
        return True


class ViewerStates:
    """One ``DisplayState`` per open page, least recently used dropped first."""

    def __init__(self, max_viewers: int = 256):
        self.max_viewers = max_viewers
        self._states: "OrderedDict[str, DisplayState]" = OrderedDict()

    def __len__(self):
        return len(self._states)

    def __contains__(self, viewer_id: str):
        return viewer_id in self._states

    def open(self) -> Tuple[str, DisplayState]:
        viewer_id = uuid.uuid4().hex
        return viewer_id, self.get(viewer_id)

    def get(self, viewer_id: Optional[str]) -> DisplayState:
        # requests without a page token get a throwaway state and are never stale
        if not viewer_id:
            return DisplayState()
        state = self._states.get(viewer_id)
        if state is not None:
            self._states.move_to_end(viewer_id)
            return state
        state = self._states[viewer_id] = DisplayState()
        while len(self._states) > self.max_viewers:
            self._states.popitem(last=False)
        return state
