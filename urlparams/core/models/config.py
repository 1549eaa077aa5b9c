from dataclasses import dataclass
from enum import StrEnum


class SpaceEncoding(StrEnum):
    plus = "plus"
    percent = "percent"


@dataclass(frozen=True)
class SerializerConfig:
    """
    Static configuration for one serialization pass.

    The defaults produce `application/x-www-form-urlencoded` style output:
    spaces become `+` and keys are written exactly as declared.
    """

    space: SpaceEncoding = SpaceEncoding.plus
    """
    How a space inside a string value is escaped:
    - plus    → `+`
    - percent → `%20`
    """

    encode_keys: bool = False
    """
    Percent-encode field and map keys with the same rules as values.
    Disabled by default: keys are field names and are written verbatim.
    """
