"""IPv4 addresses that can be parsed, printed, compared and stepped."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, fields
from typing import Optional, Sequence, Tuple

__all__ = ["IPv4", "main"]

_ADDRESS = re.compile(r"\s*(\d+)\s*\.\s*(\d+)\s*\.\s*(\d+)\s*\.\s*(\d+)\s*")
_SPACE = 1 << 32


@dataclass(frozen=True, order=True)
class IPv4:
    """An address as four octets; ordering follows the numeric value."""

    first: int = 0
    second: int = 0
    third: int = 0
    fourth: int = 0

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"octet out of range [0, 255]: {value!r}")

    @property
    def octets(self) -> Tuple[int, int, int, int]:
        return self.first, self.second, self.third, self.fourth

    @classmethod
    def parse(cls, text: str) -> "IPv4":
        """Read a dotted-quad address such as ``"192.168.1.1"``."""
        match = _ADDRESS.fullmatch(text)
        if match is None:
            raise ValueError(f"invalid IPv4 address: {text!r}")
        return cls(*(int(group) for group in match.groups()))

    @classmethod
    def from_int(cls, value: int) -> "IPv4":
        """Build an address from its 32-bit unsigned value."""
        if not 0 <= value < _SPACE:
            raise ValueError(f"value out of 32-bit range: {value}")
        return cls(*value.to_bytes(4, "big"))

    def __int__(self) -> int:
        return int.from_bytes(bytes(self.octets), "big")

    def next(self) -> "IPv4":
        """Return the following address, wrapping from 255.255.255.255 to 0.0.0.0."""
        return IPv4.from_int((int(self) + 1) % _SPACE)

    def previous(self) -> "IPv4":
        """Return the preceding address, wrapping from 0.0.0.0 to 255.255.255.255."""
        return IPv4.from_int((int(self) - 1) % _SPACE)

    def __str__(self) -> str:
        return ".".join(str(octet) for octet in self.octets)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read an address and show it stepped up and back down."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        text = args[0] if args else input("input IP address (e.g. 192.168.1.1): ")
        ip = IPv4.parse(text)
    except (ValueError, EOFError):
        print("incorrect input", file=sys.stderr)
        return 1
    print(f"Enter address: {ip}")
    old, ip = ip, ip.next()
    print(f"After postfix inc: {ip} (old val: {old})")
    ip = ip.next()
    print(f"After prefix inc: {ip}")
    ip = ip.previous()
    print(f"After postfix dec: {ip}")
    ip = ip.previous()
    print(f"After prefix dec: {ip}")
    return 0


if __name__ == "__main__":
    sys.exit(main())