[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wgcore"
version = "0.1.0"
description = "Building blocks of a userspace WireGuard-style tunnel: replay filtering, rate limiting, TAI64N timestamps, timers, object pools, payload padding and peer labels"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "wireguard",
    "vpn",
    "replay-protection",
    "rate-limiting",
    "tai64n",
    "networking",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wgcore"]

[tool.hatch.build.targets.sdist]
include = ["wgcore", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
