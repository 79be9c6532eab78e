"""Single "current forecast" slot written by fetch completions."""

import itertools
import logging
from dataclasses import dataclass, field

from weatherapp.models.common import Coordinates, utc_now_iso
from weatherapp.models.forecast import ForecastModel

logger = logging.getLogger(__name__)


@dataclass
class FetchTicket:
    """Sequence token for one in-flight fetch.

    Cancelling does not abort the request; its result is just ignored.
    """

    sequence: int
    coordinates: Coordinates
    cancelled: bool = field(default=False)

    def cancel(self) -> None:
        self.cancelled = True


@dataclass(frozen=True)
class ForecastSnapshot:
    model: ForecastModel
    coordinates: Coordinates
    sequence: int
    published_at: str


class ForecastStore:
    """Holds the latest published forecast.

    Whole-model replacement only. By default the last completed fetch wins;
    with drop_stale=True a result older than the published one is discarded.
    """

    def __init__(self, drop_stale: bool = False):
        self.drop_stale = drop_stale
        self._sequence = itertools.count(1)
        self._snapshot: ForecastSnapshot | None = None

    def begin(self, coordinates: Coordinates) -> FetchTicket:
        return FetchTicket(sequence=next(self._sequence), coordinates=coordinates)

    def publish(self, ticket: FetchTicket, model: ForecastModel) -> bool:
        """Store a fetch result. Returns False if it was ignored."""
        if ticket.cancelled:
            logger.info("Ignoring result of cancelled fetch #%d", ticket.sequence)
            return False
        current = self._snapshot
        if self.drop_stale and current is not None and ticket.sequence < current.sequence:
            logger.info(
                "Dropping stale fetch #%d (published #%d)",
                ticket.sequence, current.sequence,
            )
            return False
        self._snapshot = ForecastSnapshot(
            model=model,
            coordinates=ticket.coordinates,
            sequence=ticket.sequence,
            published_at=utc_now_iso(),
        )
        return True

    @property
    def snapshot(self) -> ForecastSnapshot | None:
        return self._snapshot

    @property
    def current(self) -> ForecastModel | None:
        snapshot = self._snapshot
        return snapshot.model if snapshot is not None else None
