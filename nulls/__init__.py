"""
Nullable primitive values.

Each type pairs a primitive ``value`` with a ``valid`` flag and converts to
and from a relational driver value, JSON, and XML (element and attribute
form). An invalid instance always renders as absence: driver NULL, JSON
``null``, or an omitted element/attribute.

Instances are plain mutable values owned by the caller; concurrent mutation
of the same instance needs external synchronisation.
"""

from nulls.core.models import (
    ABSENT,
    Absent,
    Dynamic,
    Nullable,
    NullBool,
    NullFloat32,
    NullInt,
    NullInt32,
    NullInt64,
    NullString,
    NullTime,
    NullUInt32,
    Present,
    XmlAttr,
    new_bool,
    new_float32,
    new_int,
    new_int32,
    new_int64,
    new_string,
    new_time,
    new_uint32,
)
from nulls.core.ports import DriverConverter, get_driver_converter, set_driver_converter
from nulls.infra.exceptions import DriverConversionError, FormatParseError, NullsError

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "Absent",
    "Dynamic",
    "DriverConversionError",
    "DriverConverter",
    "FormatParseError",
    "Nullable",
    "NullBool",
    "NullFloat32",
    "NullInt",
    "NullInt32",
    "NullInt64",
    "NullString",
    "NullTime",
    "NullUInt32",
    "NullsError",
    "Present",
    "XmlAttr",
    "get_driver_converter",
    "new_bool",
    "new_float32",
    "new_int",
    "new_int32",
    "new_int64",
    "new_string",
    "new_time",
    "new_uint32",
    "set_driver_converter",
]
