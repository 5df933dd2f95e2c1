from .driver import (
    DriverConverter,
    DriverValue,
    Scanner,
    Valuer,
    get_driver_converter,
    set_driver_converter,
)

__all__ = [
    "DriverConverter",
    "DriverValue",
    "Scanner",
    "Valuer",
    "get_driver_converter",
    "set_driver_converter",
]
