from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class Codec:
    """
    Basic codec interface.

    Numeric codecs map a value to an integer code and back. They can't
    be extended, and they don't do streaming.
    """

    name: str | None = None

    def __init__(self, ext=None):
        if ext is not None:
            raise ValueError(f"You can't extend the {self.name} codec")

    def encode(self, obj: Any) -> int:
        raise NotImplementedError

    def decode(self, data: int) -> Any:
        raise NotImplementedError

    def feed(self, data, final: bool = False) -> list[Any]:
        raise NotImplementedError
