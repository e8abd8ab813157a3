import base64
import string

import pytest

from wgcore.peerlabel import peer_label

_ALPHABET = set(string.ascii_letters + string.digits + "+/")


def _key(fill: int = 0) -> bytearray:
    return bytearray([fill] * 32)


def test_zero_key():
    assert peer_label(bytes(32)) == "peer(AAAA…AAAA)"


def test_all_ones_key():
    assert peer_label(b"\xff" * 32) == "peer(////…///8)"


def test_shape_of_label():
    label = peer_label(bytes(range(32)))
    assert label.startswith("peer(")
    assert label.endswith(")")
    assert label[9] == "…"
    assert len(label) == len("peer(") + 4 + 1 + 4 + 1


def test_label_characters_are_base64():
    label = peer_label(bytes(range(100, 132)))
    assert set(label[5:9]) <= _ALPHABET
    assert set(label[10:14]) <= _ALPHABET


def test_head_decodes_to_first_three_bytes():
    key = bytes(range(7, 39))
    label = peer_label(key)
    assert base64.b64decode(label[5:9]) == key[:3]


def test_middle_bytes_do_not_affect_label():
    first = _key(0x11)
    second = _key(0x11)
    for index in range(3, 29):
        second[index] = 0xA5
    assert peer_label(first) == peer_label(second)


def test_first_byte_changes_head_only():
    first = _key(0x22)
    second = _key(0x22)
    second[0] = 0x99
    a, b = peer_label(first), peer_label(second)
    assert a[5:9] != b[5:9]
    assert a[10:] == b[10:]


def test_last_byte_changes_tail_only():
    first = _key(0x33)
    second = _key(0x33)
    second[31] = 0x01
    a, b = peer_label(first), peer_label(second)
    assert a[10:14] != b[10:14]
    assert a[:10] == b[:10]


def test_accepts_bytes_like_inputs():
    key = bytes(range(32))
    assert peer_label(bytearray(key)) == peer_label(key)
    assert peer_label(memoryview(key)) == peer_label(key)


@pytest.mark.parametrize("size", [0, 16, 31, 33, 64])
def test_wrong_length_rejected(size):
    with pytest.raises(ValueError):
        peer_label(bytes(size))