"""
SQLAlchemy column types for nullable values.

Bound parameters go out through ``driver_value()``; result values come back
through ``scan()``, so a row mapper always gets a nullable, never a bare None.
"""

from typing import Any, Dict, Optional, Type

from sqlalchemy import BigInteger, Boolean, DateTime, Float, Integer, String
from sqlalchemy.types import TypeDecorator

from nulls.core.models import (
    Nullable,
    NullBool,
    NullFloat32,
    NullInt,
    NullInt32,
    NullInt64,
    NullString,
    NullTime,
    NullUInt32,
)


class NullableType(TypeDecorator):
    """Base decorator; subclasses set ``impl`` and ``nullable_class``."""

    cache_ok = True
    nullable_class: Type[Nullable] = Nullable

    def process_bind_param(self, value: Any, dialect: Any) -> Any:
        if isinstance(value, Nullable):
            return value.driver_value()
        return value

    def process_result_value(self, value: Any, dialect: Any) -> Nullable:
        result = self.nullable_class()
        result.scan(value)
        return result


class NullBoolType(NullableType):
    impl = Boolean
    nullable_class = NullBool


class NullInt32Type(NullableType):
    impl = Integer
    nullable_class = NullInt32


class NullInt64Type(NullableType):
    impl = BigInteger
    nullable_class = NullInt64


class NullIntType(NullableType):
    impl = BigInteger
    nullable_class = NullInt


class NullUInt32Type(NullableType):
    impl = BigInteger
    nullable_class = NullUInt32


class NullFloat32Type(NullableType):
    impl = Float
    nullable_class = NullFloat32


class NullStringType(NullableType):
    impl = String
    nullable_class = NullString


class NullTimeType(NullableType):
    impl = DateTime(timezone=True)
    nullable_class = NullTime


_TYPES: Dict[Type[Nullable], Type[NullableType]] = {
    decorator.nullable_class: decorator
    for decorator in (
        NullBoolType,
        NullInt32Type,
        NullInt64Type,
        NullIntType,
        NullUInt32Type,
        NullFloat32Type,
        NullStringType,
        NullTimeType,
    )
}


def nullable_type_for(cls: Type[Nullable]) -> Optional[Type[NullableType]]:
    """Column type decorator for a nullable class, or None."""
    return _TYPES.get(cls)
