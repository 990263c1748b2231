"""Bit-level framing for messages carried by SIGUSR1 and SIGUSR2.

Each byte is sent most significant bit first, one signal per bit: SIGUSR1
for a zero bit and SIGUSR2 for a one bit. A message ends with a zero byte.
The receiver acknowledges each byte with SIGUSR1 and the end of the message
with SIGUSR2.
"""

from __future__ import annotations

import signal
from typing import Iterator, Optional

ZERO_SIGNAL = signal.SIGUSR1
ONE_SIGNAL = signal.SIGUSR2
ACK_SIGNAL = signal.SIGUSR1
END_SIGNAL = signal.SIGUSR2

BITS_PER_BYTE = 8
TERMINATOR = 0


def encode_bits(data: bytes) -> Iterator[int]:
    """Yield the bits of *data*, most significant first, then a zero byte.

    The zero byte marks the end of the message, so *data* may not hold one.
    """
    payload = bytes(data)
    if TERMINATOR in payload:
        raise ValueError("message may not contain a NUL byte")
    for byte in payload + bytes([TERMINATOR]):
        for shift in reversed(range(BITS_PER_BYTE)):
            yield (byte >> shift) & 1


def bit_to_signal(bit: int) -> int:
    """Return the signal that carries *bit*."""
    if bit == 0:
        return ZERO_SIGNAL
    if bit == 1:
        return ONE_SIGNAL
    raise ValueError(f"a bit must be 0 or 1, got {bit!r}")


def signal_to_bit(signum: int) -> int:
    """Return the bit carried by the signal *signum*."""
    if signum == ZERO_SIGNAL:
        return 0
    if signum == ONE_SIGNAL:
        return 1
    raise ValueError(f"signal {signum} does not carry a bit")


class FrameDecoder:
    """Assemble bytes from a stream of bits, most significant bit first."""

    def __init__(self) -> None:
        self._count = 0
        self._value = 0

    def feed(self, bit: int) -> Optional[int]:
        """Add one bit; return the completed byte, or None while one is in progress.

        A returned 0 is the end-of-message marker.
        """
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._value = (self._value << 1) | bit
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self.reset()
        return byte

    def reset(self) -> None:
        """Drop any partially assembled byte."""
        self._count = 0
        self._value = 0