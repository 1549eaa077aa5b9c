"""urlparams

Serialize Python data structures into flat URL parameter strings.

Records (dataclasses, pydantic models) become `key=value` pairs joined by
`&`, in field declaration order. Sequences repeat their field's key for every
element, optionals are omitted when None, enum members are written by name
and every string is percent-encoded.

Example::

    from dataclasses import dataclass
    from enum import Enum

    import urlparams

    class Filter(Enum):
        Horror = 1
        Thriller = 2
        Drama = 3

    @dataclass
    class SearchRequest:
        film: str
        per_page: int | None
        next: int | None
        filter: list[Filter]

    request = SearchRequest(
        film="Fight Club",
        per_page=20,
        next=None,
        filter=[Filter.Thriller, Filter.Drama],
    )

    # film=Fight+Club&per_page=20&filter=Thriller&filter=Drama
    print(urlparams.to_string(request))

Values without a key cannot be represented: a bare top level scalar, a
record nested inside a field (unless flattened with `param(flatten=True)`)
and a map whose keys are not strings raise UnsupportedError.
"""

from urlparams.api import to_bytes, to_string, to_writer
from urlparams.core.errors import CustomError, ExternError, UnsupportedError, UrlParamsError
from urlparams.core.models.config import SerializerConfig, SpaceEncoding
from urlparams.core.ports.serializer import Serializable, Serializer
from urlparams.core.reflect.fields import Param, param

__version__ = "0.1.0"

__all__ = [
    "to_string",
    "to_bytes",
    "to_writer",
    "Param",
    "param",
    "Serializable",
    "Serializer",
    "SerializerConfig",
    "SpaceEncoding",
    "UrlParamsError",
    "ExternError",
    "UnsupportedError",
    "CustomError",
]
