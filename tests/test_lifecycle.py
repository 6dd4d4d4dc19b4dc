from datetime import date, datetime, timedelta, timezone

import pytest

from hackboard.models import Hackathon, HackathonRead, HackathonStatus
from hackboard.services.lifecycle import (
    annotate,
    classify,
    classify_all,
    filter_by_status,
    hackathons_on_date,
    month_calendar,
    nearest_upcoming,
)

UTC = timezone.utc
START = datetime(2025, 6, 1, 9, 0, tzinfo=UTC)
END = datetime(2025, 6, 3, 18, 0, tzinfo=UTC)


def _read(title, start, end, status=HackathonStatus.UPCOMING, hackathon_id=None):
    return HackathonRead(
        id=hackathon_id, title=title, start_date=start, end_date=end, status=status
    )


@pytest.mark.parametrize(
    "now, expected",
    [
        (START - timedelta(seconds=1), HackathonStatus.UPCOMING),
        (START, HackathonStatus.ONGOING),
        (START + timedelta(days=1), HackathonStatus.ONGOING),
        (END, HackathonStatus.ONGOING),
        (END + timedelta(seconds=1), HackathonStatus.PAST),
    ],
)
def test_classify_boundaries_are_inclusive(now, expected):
    assert classify(START, END, now) is expected


def test_classify_mixes_naive_and_aware_as_utc():
    naive_start = datetime(2025, 6, 1, 9, 0)
    naive_end = datetime(2025, 6, 3, 18, 0)

    assert classify(naive_start, naive_end, START) is HackathonStatus.ONGOING


def test_classify_does_not_reject_end_before_start():
    # Inverted ranges fall through to whatever the comparisons say.
    assert classify(END, START, END + timedelta(hours=1)) is HackathonStatus.PAST
    assert classify(END, START, START + timedelta(hours=1)) is HackathonStatus.UPCOMING


def test_classify_all_overwrites_inbound_status_and_keeps_order():
    now = datetime(2025, 6, 2, tzinfo=UTC)
    stale = _read("stale", START, END, status=HackathonStatus.PAST)
    stored = Hackathon(
        id=7,
        title="stored",
        start_date=datetime(2025, 7, 1, tzinfo=UTC),
        end_date=datetime(2025, 7, 2, tzinfo=UTC),
        offerings=["swag"],
    )

    classified = classify_all([stale, stored], now)

    assert [h.title for h in classified] == ["stale", "stored"]
    assert classified[0].status is HackathonStatus.ONGOING
    assert classified[1].status is HackathonStatus.UPCOMING
    assert classified[1].id == 7
    assert classified[1].offerings == ["swag"]
    assert classified[1].start_date.tzinfo is not None


def test_filter_by_status():
    hackathons = [
        _read("a", START, END, HackathonStatus.PAST),
        _read("b", START, END, HackathonStatus.ONGOING),
        _read("c", START, END, HackathonStatus.PAST),
    ]

    assert [h.title for h in filter_by_status(hackathons, HackathonStatus.PAST)] == ["a", "c"]


def test_nearest_upcoming_picks_earliest_start():
    hackathons = [
        _read("ongoing", START - timedelta(days=5), END, HackathonStatus.ONGOING),
        _read("later", START + timedelta(days=10), END + timedelta(days=11)),
        _read("sooner", START + timedelta(days=2), END + timedelta(days=3)),
    ]

    assert nearest_upcoming(hackathons).title == "sooner"


def test_nearest_upcoming_tie_goes_to_first_occurrence():
    hackathons = [
        _read("first", START, END),
        _read("second", START, END),
    ]

    assert nearest_upcoming(hackathons).title == "first"


def test_nearest_upcoming_none_when_nothing_upcoming():
    hackathons = [_read("done", START, END, HackathonStatus.PAST)]

    assert nearest_upcoming(hackathons) is None
    assert nearest_upcoming([]) is None


def test_annotate_matches_on_day_granularity():
    june = _read("June Jam", datetime(2025, 6, 1), datetime(2025, 6, 3))

    assert annotate([june], date(2025, 6, 2)) is june
    assert annotate([june], date(2025, 6, 3)) is june
    assert annotate([june], date(2025, 6, 4)) is None
    # Time of day is ignored, including late on the final day.
    assert annotate([june], datetime(2025, 6, 3, 23, 59, tzinfo=UTC)) is june


def test_annotate_surfaces_first_overlap_only():
    first = _read("first", START, END)
    second = _read("second", START - timedelta(days=1), END)

    assert annotate([first, second], date(2025, 6, 2)) is first
    assert hackathons_on_date([first, second], date(2025, 6, 2)) == [first, second]


def test_month_calendar_has_one_cell_per_day():
    june = _read("June Jam", START, END)

    cells = month_calendar([june], 2025, 6)

    assert len(cells) == 30
    titled = [cell.day.day for cell in cells if cell.hackathon is not None]
    assert titled == [1, 2, 3]
