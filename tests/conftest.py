"""Pytest configuration and shared fixtures.

Reference data is the icosahedron mesh in ``tests/data/icosahedron-binary.vtu``.
"""

from __future__ import annotations

import struct
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"

POINTS_BASE64 = (
    "kAAAAAAAAABpg40+QMRZPy755D5MPjm/UJYGPy755D5MPjm/UJYGvy755D5pg40+QMRZvy755D4u+WQ/"
    "f5J8pS755D5pg42+QMRZPy755L4u+WS/d5L8JC755L5pg42+QMRZvy755L5MPjk/UJYGvy755L5MPjk/"
    "UJYGPy755L4AAAAAAAAAAAAAgD8zMQ0lAAAAAAAAgL8="
)

CONNECTIVITY_BASE64 = (
    "4AEAAAAAAAAAAAAAAAAAAAEAAAAAAAAACgAAAAAAAAABAAAAAAAAAAIAAAAAAAAACgAAAAAAAAACAAAA"
    "AAAAAAMAAAAAAAAACgAAAAAAAAADAAAAAAAAAAQAAAAAAAAACgAAAAAAAAAEAAAAAAAAAAAAAAAAAAAA"
    "CgAAAAAAAAABAAAAAAAAAAAAAAAAAAAABQAAAAAAAAACAAAAAAAAAAEAAAAAAAAABgAAAAAAAAADAAAA"
    "AAAAAAIAAAAAAAAABwAAAAAAAAAEAAAAAAAAAAMAAAAAAAAACAAAAAAAAAAAAAAAAAAAAAQAAAAAAAAA"
    "CQAAAAAAAAAFAAAAAAAAAAYAAAAAAAAAAQAAAAAAAAAGAAAAAAAAAAcAAAAAAAAAAgAAAAAAAAAHAAAA"
    "AAAAAAgAAAAAAAAAAwAAAAAAAAAIAAAAAAAAAAkAAAAAAAAABAAAAAAAAAAJAAAAAAAAAAUAAAAAAAAA"
    "AAAAAAAAAAAGAAAAAAAAAAUAAAAAAAAACwAAAAAAAAAHAAAAAAAAAAYAAAAAAAAACwAAAAAAAAAIAAAA"
    "AAAAAAcAAAAAAAAACwAAAAAAAAAJAAAAAAAAAAgAAAAAAAAACwAAAAAAAAAFAAAAAAAAAAkAAAAAAAAA"
    "CwAAAAAAAAA="
)

TYPES_BASE64 = "FAAAAAAAAAAFBQUFBQUFBQUFBQUFBQUFBQUFBQ=="

POINTS = [
    0.2763932, 0.8506508, 0.4472136,
    -0.7236068, 0.5257311, 0.4472136,
    -0.7236068, -0.5257311, 0.4472136,
    0.2763932, -0.8506508, 0.4472136,
    0.8944272, -2.190715e-16, 0.4472136,
    -0.2763932, 0.8506508, -0.4472136,
    -0.8944272, 1.095357e-16, -0.4472136,
    -0.2763932, -0.8506508, -0.4472136,
    0.7236068, -0.5257311, -0.4472136,
    0.7236068, 0.5257311, -0.4472136,
    0.0, 0.0, 1.0,
    1.224647e-16, 0.0, -1.0,
]  # fmt: skip

CONNECTIVITY = [
    0, 1, 10, 1, 2, 10, 2, 3, 10, 3, 4, 10, 4, 0, 10,
    1, 0, 5, 2, 1, 6, 3, 2, 7, 4, 3, 8, 0, 4, 9,
    5, 6, 1, 6, 7, 2, 7, 8, 3, 8, 9, 4, 9, 5, 0,
    6, 5, 11, 7, 6, 11, 8, 7, 11, 9, 8, 11, 5, 9, 11,
]  # fmt: skip

OFFSETS = list(range(3, 61, 3))

TYPES = [5] * 20


def as_float32(values: list[float]) -> list[float]:
    """Round each value to the nearest binary32, as the codec does on encode."""
    return [struct.unpack("<f", struct.pack("<f", value))[0] for value in values]


@pytest.fixture
def points_base64() -> str:
    """Points of the icosahedron, little-endian Float32."""
    return POINTS_BASE64


@pytest.fixture
def connectivity_base64() -> str:
    """Connectivity of the icosahedron, little-endian Int64."""
    return CONNECTIVITY_BASE64


@pytest.fixture
def types_base64() -> str:
    """Cell types of the icosahedron (all triangles), UInt8."""
    return TYPES_BASE64


@pytest.fixture
def points() -> list[float]:
    """Icosahedron vertex coordinates as written in the source mesh."""
    return list(POINTS)


@pytest.fixture
def points_f32() -> list[float]:
    """Icosahedron vertex coordinates rounded to float32."""
    return as_float32(POINTS)


@pytest.fixture
def connectivity() -> list[int]:
    return list(CONNECTIVITY)


@pytest.fixture
def offsets() -> list[int]:
    return list(OFFSETS)


@pytest.fixture
def types() -> list[int]:
    return list(TYPES)


@pytest.fixture
def icosahedron_path() -> Path:
    """Path to the binary little-endian icosahedron file."""
    return DATA_DIR / "icosahedron-binary.vtu"
