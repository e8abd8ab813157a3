import pytest

from wgcore.tai64n import BASE, TIMESTAMP_SIZE, Timestamp, now, stamp

START = 123456789


@pytest.mark.parametrize(
    "delta, want_after",
    [
        (10, False),
        (10_000, False),
        (1_000_000, False),
        (10_000_000, False),
        (20_000_000, True),
    ],
    ids=["after_10_ns", "after_10_us", "after_1_ms", "after_10_ms", "after_20_ms"],
)
def test_monotonic(delta, want_after):
    ts1 = stamp(START)
    ts2 = stamp(START + delta)
    assert ts2.after(ts1) is want_after


def test_stamp_size_and_seconds_field():
    ts = stamp(0)
    assert len(bytes(ts)) == TIMESTAMP_SIZE
    assert bytes(ts)[:8] == BASE.to_bytes(8, "big")
    assert bytes(ts)[8:] == b"\x00\x00\x00\x00"


def test_string_of_epoch():
    assert str(stamp(0)) == "1970-01-01 00:00:00 +0000 UTC"


def test_string_with_fraction():
    ts = Timestamp(BASE.to_bytes(8, "big") + (500_000_000).to_bytes(4, "big"))
    assert str(ts) == "1970-01-01 00:00:00.5 +0000 UTC"


def test_whitening_keeps_seconds():
    assert str(stamp(START)).startswith("1970-01-01 00:00:00")


def test_later_second_is_after():
    assert stamp(2_000_000_000).after(stamp(1_000_000_000))
    assert not stamp(1_000_000_000).after(stamp(2_000_000_000))


def test_not_after_itself():
    ts = stamp(5_000_000_000)
    assert not ts.after(ts)


def test_now_is_after_epoch():
    assert now().after(stamp(0))


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        Timestamp(b"\x00" * 11)