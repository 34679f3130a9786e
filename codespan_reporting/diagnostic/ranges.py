# Byte ranges for labels: the half-open interval model and conversion from range-like values.

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field


class ByteRange(BaseModel):
    """
    A half-open byte interval ``[start, end)`` into a file's content.

    Nothing here checks that start <= end or that the offsets fall inside the
    file; that needs the file content and is left to whoever renders the label.
    """

    start: int = Field(..., ge=0, description="0-based byte offset, inclusive")
    end: int = Field(..., ge=0, description="0-based byte offset, exclusive")

    @property
    def length(self) -> int:
        """Number of bytes covered (0 for empty or inverted ranges)."""
        return max(self.end - self.start, 0)

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start

    def as_range(self) -> range:
        return range(self.start, self.end)

    def as_slice(self) -> slice:
        """Slice usable directly on the file's ``bytes``."""
        return slice(self.start, self.end)


def to_byte_range(value: Any) -> ByteRange:
    """
    Convert a range-like value into a ByteRange.

    Accepted forms:
    - ByteRange: returned unchanged
    - range(start, stop): step must be 1; range(10, 5) keeps start=10, end=5
    - slice(start, stop): stop is required, a missing start means 0
    - (start, end): any two-item sequence of ints

    Raises:
        TypeError: if value is not one of the forms above.
    """
    if isinstance(value, ByteRange):
        return value

    if isinstance(value, range):
        if value.step != 1:
            raise TypeError(f"Label ranges must have step 1, got: {value!r}")
        return ByteRange(start=value.start, end=value.stop)

    if isinstance(value, slice):
        if value.step not in (None, 1):
            raise TypeError(f"Label ranges must have step 1, got: {value!r}")
        if value.stop is None:
            raise TypeError(f"Label ranges need an explicit end, got: {value!r}")
        start = 0 if value.start is None else value.start
        return ByteRange(start=start, end=value.stop)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if len(value) != 2:
            raise TypeError(f"Expected a (start, end) pair, got {len(value)} item(s)")
        start, end = value
        return ByteRange(start=start, end=end)

    raise TypeError(f"Cannot convert {type(value).__name__} to a byte range")
