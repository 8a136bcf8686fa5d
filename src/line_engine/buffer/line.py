"""Single bounded line of single-byte characters."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Line:
    """Byte storage that never grows past ``capacity``.

    Characters are raw bytes (``0..255``). Mutators report whether they
    changed anything so callers can tell a capacity no-op from an edit.
    """

    capacity: int
    data: bytearray = field(default_factory=bytearray)

    def __post_init__(self) -> None:
        if len(self.data) > self.capacity:
            raise ValueError(
                f"line of length {len(self.data)} exceeds capacity {self.capacity}"
            )

    @classmethod
    def from_bytes(cls, raw: bytes, *, capacity: int) -> "Line":
        return cls(capacity=capacity, data=bytearray(raw))

    @property
    def length(self) -> int:
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    @property
    def is_full(self) -> bool:
        return len(self.data) >= self.capacity

    def insert(self, pos: int, byte: int) -> bool:
        if self.is_full:
            return False
        self.data.insert(pos, byte)
        return True

    def remove(self, start: int, count: int) -> bool:
        if count <= 0:
            return False
        del self.data[start : start + count]
        return True

    def to_bytes(self) -> bytes:
        return bytes(self.data)

    @property
    def text(self) -> str:
        return self.data.decode("latin-1")

    def count_tabs(self, end: int) -> int:
        return self.data.count(b"\t", 0, min(end, len(self.data)))


__all__ = ["Line"]
