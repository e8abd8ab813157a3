"""Padding of transport payloads and the queue sizes used around them."""

from __future__ import annotations

PADDING_MULTIPLE = 16

QUEUE_OUTBOUND_SIZE = 1024
QUEUE_INBOUND_SIZE = 1024
QUEUE_HANDSHAKE_SIZE = 1024
MAX_SEGMENT_SIZE = (1 << 16) - 1  # largest possible UDP datagram
PREALLOCATED_BUFFERS_PER_POOL = 4096


def _round_up(size: int) -> int:
    return (size + PADDING_MULTIPLE - 1) & ~(PADDING_MULTIPLE - 1)


def calculate_padding_size(packet_size: int, mtu: int) -> int:
    """Number of zero bytes to append to a payload of ``packet_size`` bytes.

    The payload is padded to a multiple of :data:`PADDING_MULTIPLE`. With a
    non-zero ``mtu`` only the last MTU-sized unit is considered and the
    padded unit never exceeds ``mtu``.
    """
    if packet_size < 0:
        raise ValueError("packet_size must not be negative")
    if mtu < 0:
        raise ValueError("mtu must not be negative")

    last_unit = packet_size
    if mtu == 0:
        return _round_up(last_unit) - last_unit
    if last_unit > mtu:
        last_unit %= mtu
    padded_size = min(_round_up(last_unit), mtu)
    return padded_size - last_unit