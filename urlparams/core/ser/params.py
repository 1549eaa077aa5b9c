import contextlib
from typing import Any, Iterator

from urlparams.core.errors import ExternError, UnsupportedError
from urlparams.core.helpers.utils import format_float
from urlparams.core.ports.encoder import Encoder
from urlparams.core.ports.serializer import (
    SerializeMap,
    SerializeSeq,
    SerializeStruct,
    Serializer,
)
from urlparams.core.ports.sink import Sink
from urlparams.core.reflect.driver import serialize
from urlparams.core.ser.key import MapKeySerializer


class ParamsSerializer(Serializer):
    """
    Serializer writing a value as a flat `key=value&key=value` list.

    The serializer tracks two pieces of state during one pass:
    - `current_key`: the field name the value being visited belongs to.
      It is set by struct fields and map keys, left untouched by sequences
      (so every element repeats the same key), and cleared when a struct
      scope ends.
    - `first_param`: whether the next pair is the first one written, i.e.
      whether the `&` separator must be omitted.

    Only leaves write anything. A leaf visited without a current key has no
    name to be written under and is rejected, as is a struct nested inside
    a field: a flat list has no way to represent nesting.

    An instance serves exactly one pass and must not be reused.
    """

    def __init__(self, writer: Sink, encoder: Encoder, encode_keys: bool = False) -> None:
        self._writer = writer
        self._encoder = encoder
        self._encode_keys = encode_keys
        self._current_key: str | None = None
        self._first_param = True

    @property
    def current_key(self) -> str | None:
        return self._current_key

    @property
    def first_param(self) -> bool:
        return self._first_param

    def write_key_value(self, value: str) -> None:
        """
        Write `value` under the current key. `value` must already be safe
        for a query string.
        """
        key = self._current_key
        if key is None:
            raise UnsupportedError("cannot serialize top level value")

        if self._encode_keys:
            key = self._encode(key)

        separator = "" if self._first_param else "&"
        try:
            self._writer.write(f"{separator}{key}={value}".encode("utf-8"))
        except (OSError, TypeError, ValueError) as ex:
            raise ExternError(ex) from ex

        self._first_param = False

    def _encode(self, value: str) -> str:
        try:
            return self._encoder.encode(value)
        except UnicodeEncodeError as ex:
            raise ExternError(ex) from ex

    def serialize_bool(self, value: bool) -> None:
        self.write_key_value("true" if value else "false")

    def serialize_int(self, value: int) -> None:
        try:
            text = str(int(value))
        except ValueError as ex:
            # Beyond the interpreter int to str digit limit
            raise ExternError(ex) from ex
        self.write_key_value(text)

    def serialize_float(self, value: float) -> None:
        self.write_key_value(format_float(value))

    def serialize_char(self, value: str) -> None:
        self.write_key_value(self._encode(value))

    def serialize_str(self, value: str) -> None:
        self.write_key_value(self._encode(value))

    def serialize_bytes(self, value: bytes) -> None:
        # One pair per byte, not a base64 or hex block
        with self.begin_seq(len(value)) as seq:
            for byte in value:
                seq.serialize_element(byte)

    def serialize_none(self) -> None:
        pass

    def serialize_some(self, value: Any) -> None:
        serialize(value, self)

    def serialize_unit(self) -> None:
        pass

    def serialize_unit_struct(self, name: str) -> None:
        pass

    def serialize_unit_variant(self, name: str, index: int, variant: str) -> None:
        self.serialize_str(variant)

    def serialize_newtype_struct(self, name: str, value: Any) -> None:
        serialize(value, self)

    def serialize_newtype_variant(
        self,
        name: str,
        index: int,
        variant: str,
        value: Any
    ) -> None:
        serialize(value, self)

    def collect_str(self, value: Any) -> None:
        self.serialize_str(str(value))

    @contextlib.contextmanager
    def begin_seq(self, length: int | None) -> Iterator[SerializeSeq]:
        yield _Elements(self)

    def begin_tuple(self, length: int) -> contextlib.AbstractContextManager[SerializeSeq]:
        return self.begin_seq(length)

    def begin_tuple_struct(
        self,
        name: str,
        length: int
    ) -> contextlib.AbstractContextManager[SerializeSeq]:
        return self.begin_seq(length)

    def begin_tuple_variant(
        self,
        name: str,
        index: int,
        variant: str,
        length: int
    ) -> contextlib.AbstractContextManager[SerializeSeq]:
        return self.begin_seq(length)

    @contextlib.contextmanager
    def begin_map(self, length: int | None) -> Iterator[SerializeMap]:
        outer_key = self._current_key
        try:
            yield _Entries(self)
        finally:
            self._current_key = outer_key

    @contextlib.contextmanager
    def begin_struct(self, name: str, length: int) -> Iterator[SerializeStruct]:
        if self._current_key is not None:
            raise UnsupportedError("serialization of nested struct is not supported")

        try:
            yield _Fields(self)
        finally:
            self._current_key = None

    @contextlib.contextmanager
    def begin_struct_variant(
        self,
        name: str,
        index: int,
        variant: str,
        length: int
    ) -> Iterator[SerializeStruct]:
        if self._current_key is not None:
            raise UnsupportedError("serialization of nested struct variant is not supported")

        try:
            yield _Fields(self)
        finally:
            self._current_key = None


class _Elements(SerializeSeq):
    __slots__ = ("_ser",)

    def __init__(self, ser: ParamsSerializer) -> None:
        self._ser = ser

    def serialize_element(self, value: Any) -> None:
        serialize(value, self._ser)


class _Entries(SerializeMap):
    __slots__ = ("_ser",)

    def __init__(self, ser: ParamsSerializer) -> None:
        self._ser = ser

    def serialize_key(self, key: Any) -> None:
        self._ser._current_key = serialize(key, MapKeySerializer())

    def serialize_value(self, value: Any) -> None:
        serialize(value, self._ser)

    def serialize_entry(self, key: Any, value: Any) -> None:
        self.serialize_key(key)
        self.serialize_value(value)


class _Fields(SerializeStruct):
    __slots__ = ("_ser",)

    def __init__(self, ser: ParamsSerializer) -> None:
        self._ser = ser

    def serialize_field(self, key: str, value: Any) -> None:
        self._ser._current_key = key
        serialize(value, self._ser)

    def skip_field(self, key: str) -> None:
        pass
