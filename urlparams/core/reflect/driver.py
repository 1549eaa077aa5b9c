import datetime
import enum
import ipaddress
import uuid
from collections.abc import Iterable, Mapping
from decimal import Decimal
from pathlib import PurePath
from typing import Any

from urlparams.core.errors import UnsupportedError
from urlparams.core.ports.serializer import SerializeStruct, Serializable, Serializer
from urlparams.core.reflect.fields import is_record, record_fields
from urlparams.core.ser.key import MapKeySerializer

# Values written through their str() form
_DISPLAY_TYPES = (
    Decimal,
    uuid.UUID,
    PurePath,
    ipaddress.IPv4Address,
    ipaddress.IPv6Address,
    ipaddress.IPv4Network,
    ipaddress.IPv6Network,
)

_ISO_TYPES = (datetime.datetime, datetime.date, datetime.time)


def serialize(value: Any, serializer: Serializer) -> Any:
    """
    Drive `value` through `serializer`, choosing the shape from its Python
    type, and return whatever the serializer returns.

    Types implementing Serializable drive themselves. Dataclasses and
    pydantic models are records, NamedTuples tuple structs, mappings maps
    and any other non-string iterable a sequence.
    """
    if isinstance(value, Serializable) and not isinstance(value, type):
        return value.serialize(serializer)

    if value is None:
        return serializer.serialize_none()

    if isinstance(value, bool):
        return serializer.serialize_bool(value)

    if isinstance(value, enum.Enum):
        # Combined Flag values are not canonical members and get no index
        index = next((i for i, m in enumerate(type(value)) if m is value), -1)
        return serializer.serialize_unit_variant(
            type(value).__name__,
            index,
            value.name,
        )

    if isinstance(value, int):
        return serializer.serialize_int(value)

    if isinstance(value, float):
        return serializer.serialize_float(value)

    if isinstance(value, str):
        return serializer.serialize_str(value)

    if isinstance(value, (bytes, bytearray, memoryview)):
        return serializer.serialize_bytes(bytes(value))

    if isinstance(value, _DISPLAY_TYPES):
        return serializer.collect_str(value)

    if isinstance(value, _ISO_TYPES):
        return serializer.collect_str(value.isoformat())

    if is_record(value):
        return _serialize_record(value, serializer)

    if isinstance(value, tuple):
        if hasattr(type(value), "_fields"):
            cm = serializer.begin_tuple_struct(type(value).__name__, len(value))
        else:
            cm = serializer.begin_tuple(len(value))
        with cm as seq:
            for element in value:
                seq.serialize_element(element)
        return None

    if isinstance(value, Mapping):
        with serializer.begin_map(len(value)) as entries:
            for key, item in value.items():
                entries.serialize_entry(key, item)
        return None

    if isinstance(value, Iterable):
        length = len(value) if hasattr(value, "__len__") else None
        with serializer.begin_seq(length) as seq:
            for element in value:
                seq.serialize_element(element)
        return None

    raise UnsupportedError(f"values of type {type(value).__name__} cannot be serialized")


def _serialize_record(record: Any, serializer: Serializer) -> None:
    fields = list(record_fields(record))

    with serializer.begin_struct(type(record).__name__, len(fields)) as struct:
        _serialize_fields(fields, struct)


def _serialize_fields(fields: list, struct: SerializeStruct) -> None:
    for field in fields:
        if field.skipped:
            struct.skip_field(field.key)
            continue

        if not field.options.flatten:
            struct.serialize_field(field.key, field.value)
            continue

        # Flattened values contribute their own fields under their own keys
        inner = field.value
        if inner is None:
            continue
        if is_record(inner):
            _serialize_fields(list(record_fields(inner)), struct)
        elif isinstance(inner, Mapping):
            for key, item in inner.items():
                struct.serialize_field(serialize(key, MapKeySerializer()), item)
        else:
            raise UnsupportedError(
                f"cannot flatten field '{field.name}' of type {type(inner).__name__}"
            )
