from typing import Any, NoReturn

from urlparams.core.errors import UnsupportedError
from urlparams.core.models.shape import Shape
from urlparams.core.ports.serializer import Serializer


class MapKeySerializer(Serializer):
    """
    Restricted serializer reducing a map key to a plain string.

    Only strings and characters are accepted; every other shape, containers
    included, is rejected with an UnsupportedError whose reason is the
    shape name. The returned key is not percent-encoded.
    """

    def serialize_str(self, value: str) -> str:
        return value

    def serialize_char(self, value: str) -> str:
        return value

    def collect_str(self, value: Any) -> str:
        return str(value)

    def serialize_bool(self, value: bool) -> NoReturn:
        raise UnsupportedError(Shape.bool)

    def serialize_int(self, value: int) -> NoReturn:
        raise UnsupportedError(Shape.int)

    def serialize_float(self, value: float) -> NoReturn:
        raise UnsupportedError(Shape.float)

    def serialize_bytes(self, value: bytes) -> NoReturn:
        raise UnsupportedError(Shape.bytes)

    def serialize_none(self) -> NoReturn:
        raise UnsupportedError(Shape.none)

    def serialize_some(self, value: Any) -> NoReturn:
        raise UnsupportedError(Shape.some)

    def serialize_unit(self) -> NoReturn:
        raise UnsupportedError(Shape.unit)

    def serialize_unit_struct(self, name: str) -> NoReturn:
        raise UnsupportedError(Shape.unit_struct)

    def serialize_unit_variant(self, name: str, index: int, variant: str) -> NoReturn:
        raise UnsupportedError(Shape.unit_variant)

    def serialize_newtype_struct(self, name: str, value: Any) -> NoReturn:
        raise UnsupportedError(Shape.newtype_struct)

    def serialize_newtype_variant(
        self,
        name: str,
        index: int,
        variant: str,
        value: Any
    ) -> NoReturn:
        raise UnsupportedError(Shape.newtype_variant)

    # Scopes fail on entry, before any element is visited.

    def begin_seq(self, length: int | None) -> NoReturn:
        raise UnsupportedError(Shape.seq)

    def begin_tuple(self, length: int) -> NoReturn:
        raise UnsupportedError(Shape.tuple)

    def begin_tuple_struct(self, name: str, length: int) -> NoReturn:
        raise UnsupportedError(Shape.tuple_struct)

    def begin_tuple_variant(
        self,
        name: str,
        index: int,
        variant: str,
        length: int
    ) -> NoReturn:
        raise UnsupportedError(Shape.tuple_variant)

    def begin_map(self, length: int | None) -> NoReturn:
        raise UnsupportedError(Shape.map)

    def begin_struct(self, name: str, length: int) -> NoReturn:
        raise UnsupportedError(Shape.struct)

    def begin_struct_variant(
        self,
        name: str,
        index: int,
        variant: str,
        length: int
    ) -> NoReturn:
        raise UnsupportedError(Shape.struct_variant)
