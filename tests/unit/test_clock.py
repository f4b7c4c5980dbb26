from datetime import datetime, timedelta, timezone

from comphub.utils.clock import ONE_TICK, isoformat_utc, next_after, parse_iso, utc_now


def test_isoformat_has_milliseconds_and_z_suffix():
    dt = datetime(2026, 3, 1, 9, 30, 0, 125999, tzinfo=timezone.utc)
    assert isoformat_utc(dt) == "2026-03-01T09:30:00.125Z"


def test_isoformat_converts_offsets_to_utc():
    dt = datetime(2026, 3, 1, 11, 0, tzinfo=timezone(timedelta(hours=2)))
    assert isoformat_utc(dt) == "2026-03-01T09:00:00.000Z"


def test_parse_iso_handles_z_and_garbage():
    assert parse_iso("2026-03-01T09:30:00.125Z") == datetime(2026, 3, 1, 9, 30, 0, 125000, tzinfo=timezone.utc)
    assert parse_iso("not a date") is None
    assert parse_iso(None) is None


def test_utc_now_is_truncated_to_milliseconds():
    assert utc_now().microsecond % 1000 == 0


def test_next_after_uses_clock_when_it_has_advanced():
    now = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
    assert next_after("2026-01-01T11:59:59.000Z", now) == now


def test_next_after_bumps_one_tick_when_clock_has_not_advanced():
    now = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
    assert next_after(isoformat_utc(now), now) == now + ONE_TICK
    assert next_after("2030-01-01T00:00:00.000Z", now) == parse_iso("2030-01-01T00:00:00.000Z") + ONE_TICK
