"""Building blocks of a WireGuard-style tunnel: replay filter, rate limiter, timestamps, timers, pools, padding and peer labels."""

__version__ = "0.1.0"

__all__ = [
    "padding",
    "peerlabel",
    "pools",
    "ratelimiter",
    "replay",
    "tai64n",
    "timers",
]