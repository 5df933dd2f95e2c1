from datetime import datetime, timezone

import pytest

from nulls import (
    NullBool,
    NullFloat32,
    NullInt,
    NullInt32,
    NullInt64,
    NullString,
    NullTime,
    NullUInt32,
    set_driver_converter,
)
from nulls.infra.logger import setup_logging

SAMPLE_TIME = datetime(2021, 3, 4, 5, 6, 7, 500000, tzinfo=timezone.utc)

# One representative valid value per kind.
SAMPLES = [
    pytest.param(NullBool, True, id="bool"),
    pytest.param(NullInt32, -123, id="int32"),
    pytest.param(NullInt64, 2 ** 40, id="int64"),
    pytest.param(NullInt, -7, id="int"),
    pytest.param(NullUInt32, 123, id="uint32"),
    pytest.param(NullFloat32, 3.22, id="float32"),
    pytest.param(NullString, "héllo <&> world", id="string"),
    pytest.param(NullTime, SAMPLE_TIME, id="timestamp"),
]

ALL_TYPES = [
    NullBool,
    NullInt32,
    NullInt64,
    NullInt,
    NullUInt32,
    NullFloat32,
    NullString,
    NullTime,
]


@pytest.fixture(scope="session", autouse=True)
def configured_logging():
    setup_logging("DEBUG")


@pytest.fixture(autouse=True)
def default_driver_converter():
    """Every test starts and ends with the standard converter."""
    set_driver_converter(None)
    yield
    set_driver_converter(None)
