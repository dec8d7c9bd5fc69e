"""Testes da regra de duplicidade e dos seus limites."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from app.domain.school_event import AllDayEvent, TimedEvent
from app.services.duplicate_matcher import (
    check_duplicates,
    events_match,
    is_duplicate,
    start_date_of,
)

NY = ZoneInfo("America/New_York")
BASE = datetime(2025, 10, 20, 8, 0, tzinfo=NY)


def _all_day(title: str, day: date) -> AllDayEvent:
    return AllDayEvent(title=title, start_date=day, end_date=day)


def _timed(title: str, start: datetime) -> TimedEvent:
    return TimedEvent(title=title, start=start, end=start + timedelta(hours=1))


class TestStartDate:
    def test_all_day_uses_start_date(self) -> None:
        assert start_date_of(_all_day("Holiday", date(2025, 12, 24))) == date(2025, 12, 24)

    def test_timed_uses_local_date_of_instant(self) -> None:
        late = datetime(2025, 10, 20, 23, 30, tzinfo=NY)
        assert start_date_of(_timed("Concert", late)) == date(2025, 10, 20)


class TestDateProximity:
    def test_one_day_apart_with_similarity_90_matches(self) -> None:
        a = _all_day("Math Test", date(2025, 10, 20))
        b = _all_day("Math Test 2", date(2025, 10, 21))
        assert events_match(a, b) is True

    def test_two_days_apart_never_matches(self) -> None:
        a = _all_day("Math Test", date(2025, 10, 20))
        b = _all_day("Math Test", date(2025, 10, 22))
        assert events_match(a, b) is False

    def test_adjacent_day_timed_events_outside_window_do_not_match(self) -> None:
        a = _timed("Math Test", BASE)
        b = _timed("Math Test", BASE + timedelta(days=1))
        assert events_match(a, b) is False


class TestTitleSimilarity:
    def test_similarity_exactly_85_does_not_match(self) -> None:
        a = _timed("Spelling Test Ch3", BASE)
        b = _timed("Spelling Test Ch3 Retry", BASE)
        assert events_match(a, b) is False

    def test_similarity_86_matches(self) -> None:
        a = _timed("Spelling Tests Ch3", BASE)
        b = _timed("Spelling Tests Ch3 Retry", BASE)
        assert events_match(a, b) is True

    def test_title_comparison_is_case_insensitive(self) -> None:
        a = _all_day("MATH TEST", date(2025, 10, 20))
        b = _all_day("math test", date(2025, 10, 20))
        assert events_match(a, b) is True

    def test_different_titles_same_slot_do_not_match(self) -> None:
        a = _timed("Math Test", BASE)
        b = _timed("Parent Teacher Conference", BASE)
        assert events_match(a, b) is False


class TestAllDaySufficiency:
    def test_all_day_pair_matches_on_date_and_title(self) -> None:
        a = _all_day("Math Test", date(2025, 10, 20))
        b = _all_day("Math Test", date(2025, 10, 20))
        assert events_match(a, b) is True

    def test_all_day_against_timed_skips_time_check(self) -> None:
        a = _all_day("Math Test", date(2025, 10, 20))
        b = _timed("Math Test", datetime(2025, 10, 20, 22, 0, tzinfo=NY))
        assert events_match(a, b) is True
        assert events_match(b, a) is True


class TestTimeWindow:
    def test_120_minutes_apart_matches(self) -> None:
        a = _timed("Science Fair Set Up", BASE)
        b = _timed("Science Fair Set Up A", BASE + timedelta(minutes=120))
        assert events_match(a, b) is True

    def test_121_minutes_apart_does_not_match(self) -> None:
        a = _timed("Science Fair Set Up", BASE)
        b = _timed("Science Fair Set Up A", BASE + timedelta(minutes=121))
        assert events_match(a, b) is False

    def test_window_compares_instants_across_offsets(self) -> None:
        a = _timed("Math Test", BASE)
        b = _timed("Math Test", BASE.astimezone(ZoneInfo("UTC")) + timedelta(minutes=90))
        assert events_match(a, b) is True


class TestIsDuplicate:
    def test_empty_existing_list(self) -> None:
        assert is_duplicate(_timed("Math Test", BASE), []) is False

    def test_any_match_is_enough(self) -> None:
        existing = [
            _timed("Book Fair", BASE),
            _all_day("Math Test", date(2025, 10, 20)),
        ]
        assert is_duplicate(_timed("Math Test", BASE), existing) is True

    def test_result_is_order_independent(self) -> None:
        candidate = _timed("Math Test", BASE)
        existing = [_timed("Book Fair", BASE), _timed("Math Test", BASE + timedelta(hours=1))]
        assert is_duplicate(candidate, existing) == is_duplicate(candidate, existing[::-1])

    def test_check_duplicates_keeps_input_order(self) -> None:
        existing = [_all_day("Emma - Math Test", date(2025, 10, 20))]
        candidates = [
            _all_day("Emma - Field Trip", date(2025, 10, 25)),
            _timed("Emma - Math Test", BASE),
        ]
        checks = check_duplicates(candidates, existing)
        assert [check.candidate for check in checks] == candidates
        assert [check.is_duplicate for check in checks] == [False, True]
