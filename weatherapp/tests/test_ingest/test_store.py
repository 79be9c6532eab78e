"""Tests for the current-forecast slot."""

from weatherapp.ingest.store import ForecastStore
from weatherapp.models.common import Coordinates
from weatherapp.models.forecast import ForecastModel

SYDNEY = Coordinates(-33.87, 151.21)
MELBOURNE = Coordinates(-37.81, 144.96)


class TestForecastStore:
    def test_empty(self):
        store = ForecastStore()
        assert store.current is None
        assert store.snapshot is None

    def test_tickets_increase(self):
        store = ForecastStore()
        t1 = store.begin(SYDNEY)
        t2 = store.begin(SYDNEY)
        assert t2.sequence > t1.sequence

    def test_publish_replaces_whole_model(
        self, sydney_model: ForecastModel, week_model: ForecastModel
    ):
        store = ForecastStore()
        assert store.publish(store.begin(SYDNEY), sydney_model)
        assert store.publish(store.begin(MELBOURNE), week_model)
        assert store.current == week_model
        assert store.snapshot.coordinates == MELBOURNE

    def test_last_write_wins_by_default(
        self, sydney_model: ForecastModel, week_model: ForecastModel
    ):
        store = ForecastStore()
        older = store.begin(SYDNEY)
        newer = store.begin(MELBOURNE)
        store.publish(newer, week_model)
        # Older fetch completes last and overwrites
        assert store.publish(older, sydney_model)
        assert store.current == sydney_model

    def test_drop_stale(self, sydney_model: ForecastModel, week_model: ForecastModel):
        store = ForecastStore(drop_stale=True)
        older = store.begin(SYDNEY)
        newer = store.begin(MELBOURNE)
        store.publish(newer, week_model)
        assert not store.publish(older, sydney_model)
        assert store.current == week_model

    def test_cancelled_ticket_ignored(self, sydney_model: ForecastModel):
        store = ForecastStore()
        ticket = store.begin(SYDNEY)
        ticket.cancel()
        assert not store.publish(ticket, sydney_model)
        assert store.current is None
