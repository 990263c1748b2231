"""Send a message to a server process one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Optional, Sequence

from sigtalk.chars import atoi
from sigtalk.protocol import ACK_SIGNAL, END_SIGNAL, bit_to_signal, encode_bits

DEFAULT_DELAY = 0.0001


def transmit(pid: int, data: bytes, delay: float = DEFAULT_DELAY) -> int:
    """Signal every bit of *data* and the end marker to *pid*; return the signal count."""
    sent = 0
    for bit in encode_bits(data):
        os.kill(pid, bit_to_signal(bit))
        time.sleep(delay)
        sent += 1
    return sent


class _Finished(Exception):
    """Raised by the handler when the server reports the end of the message."""


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send ``MESSAGE`` to ``PID`` and report how many bytes were acknowledged.

    Takes exactly two arguments, the server's process id and a non-empty
    message; anything else returns 1 without output.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        return 1
    message = os.fsencode(args[1])
    if not message:
        return 1

    out = sys.stdout
    out.write(f"Sent    : {len(message)}\n")
    out.write("Received: ")
    out.flush()

    received = 0

    def on_ack(signum, frame):
        nonlocal received
        received += 1

    def on_end(signum, frame):
        raise _Finished

    previous_ack = signal.signal(ACK_SIGNAL, on_ack)
    previous_end = signal.signal(END_SIGNAL, on_end)
    try:
        try:
            transmit(atoi(args[0]), message)
            while True:
                signal.pause()
        except _Finished:
            pass
    finally:
        signal.signal(ACK_SIGNAL, previous_ack)
        signal.signal(END_SIGNAL, previous_end)

    out.write(f"{received}\n")
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())