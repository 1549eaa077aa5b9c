from urllib.parse import quote, quote_plus

from urlparams.core.models.config import SpaceEncoding
from urlparams.core.ports.encoder import Encoder


class QueryEncoder(Encoder):
    """
    urllib based implementation of the Encoder interface.

    Every character except the RFC 3986 unreserved set (ALPHA / DIGIT / "-" /
    "." / "_" / "~") is escaped as UTF-8 `%XX` sequences. Spaces become `+`
    or `%20` depending on the configured SpaceEncoding.
    """

    def __init__(self, space: SpaceEncoding = SpaceEncoding.plus) -> None:
        self._quote = quote_plus if space == SpaceEncoding.plus else quote

    def encode(self, value: str) -> str:
        return self._quote(value, safe="")
