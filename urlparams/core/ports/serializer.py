from contextlib import AbstractContextManager
from typing import Any, Protocol, runtime_checkable


class SerializeSeq(Protocol):
    """Visitor for the elements of a sequence, tuple or tuple-like variant."""

    def serialize_element(self, value: Any) -> None:
        ...


class SerializeMap(Protocol):
    """Visitor for the entries of a map."""

    def serialize_key(self, key: Any) -> None:
        ...

    def serialize_value(self, value: Any) -> None:
        ...

    def serialize_entry(self, key: Any, value: Any) -> None:
        ...


class SerializeStruct(Protocol):
    """Visitor for the named fields of a struct or struct variant."""

    def serialize_field(self, key: str, value: Any) -> None:
        ...

    def skip_field(self, key: str) -> None:
        ...


class Serializer(Protocol):
    """
    Defines the contract a value is driven through, one method per shape of
    the data model.

    A traversal visits a value depth-first: leaf shapes are single calls,
    container shapes open a scope with one of the `begin_*` context managers
    and visit their children through the yielded compound visitor. Leaving
    the `with` block ends the scope.

    Implementations report failures by raising; the first exception aborts
    the whole traversal.
    """

    def serialize_bool(self, value: bool) -> Any:
        ...

    def serialize_int(self, value: int) -> Any:
        ...

    def serialize_float(self, value: float) -> Any:
        ...

    def serialize_char(self, value: str) -> Any:
        ...

    def serialize_str(self, value: str) -> Any:
        ...

    def serialize_bytes(self, value: bytes) -> Any:
        ...

    def serialize_none(self) -> Any:
        """An absent optional."""

    def serialize_some(self, value: Any) -> Any:
        """A present optional wrapping `value`."""

    def serialize_unit(self) -> Any:
        ...

    def serialize_unit_struct(self, name: str) -> Any:
        ...

    def serialize_unit_variant(self, name: str, index: int, variant: str) -> Any:
        """A variant carrying no data, e.g. a member of a plain enum."""

    def serialize_newtype_struct(self, name: str, value: Any) -> Any:
        """A named wrapper around exactly one value."""

    def serialize_newtype_variant(
        self,
        name: str,
        index: int,
        variant: str,
        value: Any
    ) -> Any:
        ...

    def collect_str(self, value: Any) -> Any:
        """Serialize the `str()` rendering of `value` as a string."""

    def begin_seq(self, length: int | None) -> AbstractContextManager[SerializeSeq]:
        ...

    def begin_tuple(self, length: int) -> AbstractContextManager[SerializeSeq]:
        ...

    def begin_tuple_struct(
        self,
        name: str,
        length: int
    ) -> AbstractContextManager[SerializeSeq]:
        ...

    def begin_tuple_variant(
        self,
        name: str,
        index: int,
        variant: str,
        length: int
    ) -> AbstractContextManager[SerializeSeq]:
        ...

    def begin_map(self, length: int | None) -> AbstractContextManager[SerializeMap]:
        ...

    def begin_struct(
        self,
        name: str,
        length: int
    ) -> AbstractContextManager[SerializeStruct]:
        ...

    def begin_struct_variant(
        self,
        name: str,
        index: int,
        variant: str,
        length: int
    ) -> AbstractContextManager[SerializeStruct]:
        ...


@runtime_checkable
class Serializable(Protocol):
    """
    Implemented by types that know how to drive themselves through a
    Serializer. Use it for shapes plain Python values cannot express:
    newtype structs, tuple or struct variants, custom renderings.

    Raise CustomError to signal a violation of the type's own invariants.
    """

    def serialize(self, serializer: Serializer) -> Any:
        ...
