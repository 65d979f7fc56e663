from datetime import UTC, datetime, timedelta, timezone

from src.app.services.record_clock import RecordClock, format_occurred_at


class SteppingNow:
    def __init__(self, *moments):
        self.moments = list(moments)

    def __call__(self):
        return self.moments.pop(0)


def test_fixed_width_utc_format():
    moment = datetime(2026, 1, 2, 3, 4, 5, 6, tzinfo=UTC)

    assert format_occurred_at(moment) == "2026-01-02T03:04:05.000006Z"


def test_other_timezones_converted_to_utc():
    moment = datetime(2026, 1, 2, 5, 0, 0, tzinfo=timezone(timedelta(hours=2)))

    assert format_occurred_at(moment) == "2026-01-02T03:00:00.000000Z"


def test_same_instant_still_increases():
    moment = datetime(2026, 10, 19, 8, 0, 0, tzinfo=UTC)
    clock = RecordClock(now=SteppingNow(moment, moment, moment))

    values = [clock.next() for _ in range(3)]

    assert values == [
        "2026-10-19T08:00:00.000000Z",
        "2026-10-19T08:00:00.000001Z",
        "2026-10-19T08:00:00.000002Z",
    ]


def test_clock_step_back_does_not_reorder():
    later = datetime(2026, 10, 19, 8, 0, 1, tzinfo=UTC)
    earlier = datetime(2026, 10, 19, 7, 59, 0, tzinfo=UTC)
    clock = RecordClock(now=SteppingNow(later, earlier))

    first, second = clock.next(), clock.next()

    assert second > first
    assert second == "2026-10-19T08:00:01.000001Z"


def test_string_order_matches_time_order():
    clock = RecordClock()

    values = [clock.next() for _ in range(50)]

    assert values == sorted(values)
    assert len(set(values)) == 50
