"""
Base nullable value.

A nullable pairs a primitive ``value`` with a ``valid`` flag. When ``valid``
is False, every encoder renders absence (JSON ``null``, an omitted XML
element or attribute, a driver NULL) whatever ``value`` holds.

Subclasses supply the per-kind parse and format rules; the absence handling
shared by the driver, JSON and XML paths lives here. The JSON decode policy
differs per kind, so each subclass implements ``decode_json`` itself.

Instances are plain mutable values. Concurrent mutation of one instance is
the caller's responsibility.
"""

import json
from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Optional, Tuple, Type, TypeVar, Union
from xml.etree.ElementTree import Element, SubElement

from pydantic_core import core_schema

from nulls.core.parsing import as_text
from nulls.core.ports.driver import DriverValue, Scanner, Valuer
from nulls.infra.exceptions import FormatParseError
from nulls.infra.logger import get_logger

T = TypeVar("T")
N = TypeVar("N", bound="Nullable")

NULL_LITERAL = "null"
NULL_JSON = b"null"

log = get_logger("nulls.models")


@dataclass(frozen=True)
class Present(Generic[T]):
    """A value that is there."""
    value: T


class Absent:
    """Absence marker. Use the ``ABSENT`` singleton."""

    _instance: ClassVar[Optional["Absent"]] = None

    def __new__(cls) -> "Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = Absent()

Dynamic = Union[Present[T], Absent]


@dataclass(frozen=True)
class XmlAttr:
    """An XML attribute. An empty name means the attribute is omitted."""
    name: str = ""
    value: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.name


class Nullable(Scanner, Valuer, Generic[T]):
    """
    Common contract for every nullable kind.

    Concrete classes are dataclasses with the fields ``value`` and ``valid``.
    """

    kind: ClassVar[str] = ""
    # Python types accepted as an already-typed value by pydantic validation.
    python_types: ClassVar[Tuple[type, ...]] = ()

    value: T
    valid: bool

    def __post_init__(self) -> None:
        self.value = self._narrow(self.value)

    @classmethod
    def of(cls: Type[N], value: Any) -> N:
        """Valid instance holding ``value``."""
        return cls(value, True)

    @classmethod
    def zero(cls) -> Any:
        """Value held by a zero-constructed instance."""
        return cls().value

    # === Per-kind hooks ===

    @classmethod
    def _narrow(cls, value: Any) -> Any:
        return value

    def _to_driver(self) -> DriverValue:
        return self.value

    @abstractmethod
    def _json_text(self) -> str:
        pass

    @abstractmethod
    def _xml_text(self) -> str:
        pass

    def _attr_text(self) -> str:
        return self._xml_text()

    @abstractmethod
    def _parse_markup(self, text: str) -> Any:
        pass

    # === Dynamic value ===

    def dynamic_value(self) -> Dynamic:
        if not self.valid:
            return ABSENT
        return Present(self.value)

    def interface(self) -> Optional[T]:
        """The value, or None when absent."""
        if not self.valid:
            return None
        return self.value

    # === Driver ===

    def driver_value(self) -> DriverValue:
        if not self.valid:
            return None
        return self._to_driver()

    def _reset(self) -> None:
        self.value = self.zero()
        self.valid = False

    # === JSON ===

    def encode_json(self) -> bytes:
        if not self.valid:
            return NULL_JSON
        return self._json_text().encode("utf-8")

    @abstractmethod
    def decode_json(self, data: Union[bytes, str]) -> None:
        pass

    def decode_text(self, data: Union[bytes, str]) -> None:
        self.decode_json(data)

    # === XML ===

    def encode_xml(self, parent: Element, tag: str) -> Optional[Element]:
        """Append ``<tag>`` to ``parent``. Nothing is appended when absent."""
        if not self.valid:
            return None
        child = SubElement(parent, tag)
        child.text = self._xml_text()
        return child

    def decode_xml(self, element: Optional[Element]) -> None:
        if element is None:
            return
        # Direct character data only; nested elements are skipped.
        text = (element.text or "") + "".join(child.tail or "" for child in element)
        self._decode_markup(text, "element")

    def encode_xml_attr(self, name: str) -> XmlAttr:
        if not self.valid:
            return XmlAttr()
        return XmlAttr(name=name, value=self._attr_text())

    def decode_xml_attr(self, attr: Union[XmlAttr, str]) -> None:
        text = attr.value if isinstance(attr, XmlAttr) else attr
        self._decode_markup(text, "attribute")

    def _decode_markup(self, text: str, source: str) -> None:
        if text == "" or text == NULL_LITERAL:
            self.valid = False
            return
        try:
            parsed = self._parse_markup(text)
        except FormatParseError as e:
            log.debug("nulls.markup.decode_failed", kind=self.kind, source=source, error=str(e))
            raise
        self.value, self.valid = parsed, True

    # === pydantic ===

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, info_arg=True
            ),
        )

    @classmethod
    def _validate(cls, raw: Any) -> "Nullable":
        if isinstance(raw, cls):
            return raw
        result = cls()
        if raw is None:
            return result
        if isinstance(raw, cls.python_types) and not (
            isinstance(raw, bool) and bool not in cls.python_types
        ):
            return cls.of(raw)
        if isinstance(raw, (str, bytes)):
            result._decode_markup(as_text(raw), "text")
            return result
        raise ValueError(f"cannot build {cls.__name__} from {type(raw).__name__}")

    @staticmethod
    def _serialize(instance: "Nullable", info: Any) -> Any:
        if not instance.valid:
            return None
        if info.mode_is_json():
            return json.loads(instance.encode_json())
        return instance.value
