from typing import Protocol


class Encoder(Protocol):
    """
    Percent-encoding primitive applied to every string written into the
    query.

    Implementations must be pure: the same input always yields the same
    output, and the output must only contain characters that are safe inside
    a query component (no bare `&`, `=`, `#` or space).
    """

    def encode(self, value: str) -> str:
        ...
