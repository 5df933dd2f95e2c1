from .base import ABSENT, Absent, Dynamic, Nullable, Present, XmlAttr
from .boolean import NullBool, new_bool
from .float32 import NullFloat32, new_float32
from .int32 import NullInt32, new_int32
from .int64 import NullInt64, new_int64
from .integer import NullInt, new_int
from .string import NullString, new_string
from .timestamp import NullTime, new_time
from .uint32 import NullUInt32, new_uint32

__all__ = [
    "ABSENT",
    "Absent",
    "Dynamic",
    "Nullable",
    "Present",
    "XmlAttr",
    "NullBool",
    "NullFloat32",
    "NullInt",
    "NullInt32",
    "NullInt64",
    "NullString",
    "NullTime",
    "NullUInt32",
    "new_bool",
    "new_float32",
    "new_int",
    "new_int32",
    "new_int64",
    "new_string",
    "new_time",
    "new_uint32",
]
