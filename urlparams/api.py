import io
import logging
from typing import Any

from urlparams.core.errors import ExternError
from urlparams.core.models.config import SerializerConfig
from urlparams.core.ports.sink import Sink
from urlparams.core.reflect.driver import serialize
from urlparams.core.ser.params import ParamsSerializer
from urlparams.infra.percent import QueryEncoder

logger = logging.getLogger("urlparams.api")


def to_writer(writer: Sink, value: Any, config: SerializerConfig | None = None) -> None:
    """
    Serialize `value` as URL parameters directly into `writer`.

    The writer is not closed. On error, the pairs written so far stay in
    the writer and must not be treated as a valid query string.
    """
    config = config or SerializerConfig()
    serializer = ParamsSerializer(
        writer,
        QueryEncoder(config.space),
        encode_keys=config.encode_keys,
    )
    serialize(value, serializer)
    logger.debug(f"Serialized {type(value).__name__} into URL parameters")


def to_bytes(value: Any, config: SerializerConfig | None = None) -> bytes:
    """Serialize `value` as URL parameters into a byte string."""
    with io.BytesIO() as buffer:
        to_writer(buffer, value, config)
        return buffer.getvalue()


def to_string(value: Any, config: SerializerConfig | None = None) -> str:
    """
    Serialize `value` as a URL parameters string, e.g.
    `film=Fight+Club&per_page=20&filter=Thriller&filter=Drama`.
    """
    data = to_bytes(value, config)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as ex:
        raise ExternError(ex) from ex
