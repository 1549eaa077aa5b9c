from typing import Protocol


class Sink(Protocol):
    """
    A writable byte sink: `io.BytesIO`, a file opened in binary mode,
    `sys.stdout.buffer`, a socket file, etc.

    The serializer only writes to it. Opening, flushing and closing remain
    the responsibility of whoever created the sink.
    """

    def write(self, data: bytes, /) -> int | None:
        ...
