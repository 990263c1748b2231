"""Receive messages sent bit by bit over SIGUSR1 and SIGUSR2."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, NamedTuple, Optional, Sequence

from sigtalk.protocol import (
    ACK_SIGNAL,
    END_SIGNAL,
    ONE_SIGNAL,
    TERMINATOR,
    ZERO_SIGNAL,
    FrameDecoder,
    signal_to_bit,
)


class Reply(NamedTuple):
    """A signal to send back to a client."""

    pid: int
    signum: int


class Server:
    """Decode incoming bit signals and write the received bytes to *stdout*.

    The first sender of a message is its client until the message ends;
    each completed byte is acknowledged to that client with SIGUSR1 and the
    end of the message with SIGUSR2.
    """

    def __init__(self, stdout: Optional[BinaryIO] = None) -> None:
        self.stdout = stdout if stdout is not None else sys.stdout.buffer
        self.client: Optional[int] = None
        self._decoder = FrameDecoder()

    def handle(self, signum: int, sender: int) -> Optional[Reply]:
        """Process one signal from *sender*; return the reply due, if any."""
        bit = signal_to_bit(signum)
        if self.client is None:
            self.client = sender
        byte = self._decoder.feed(bit)
        if byte is None:
            return None
        client = self.client
        if byte == TERMINATOR:
            self.client = None
            return Reply(client, END_SIGNAL)
        self.stdout.write(bytes([byte]))
        self.stdout.flush()
        return Reply(client, ACK_SIGNAL)

    def serve_forever(self) -> None:
        """Wait for bit signals and answer them until interrupted."""
        signals = {ZERO_SIGNAL, ONE_SIGNAL}
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        try:
            while True:
                info = signal.sigwaitinfo(signals)
                reply = self.handle(info.si_signo, info.si_pid)
                if reply is not None:
                    try:
                        os.kill(reply.pid, reply.signum)
                    except ProcessLookupError:
                        pass
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the process id and serve until interrupted; arguments are ignored."""
    out = sys.stdout.buffer
    out.write(f"Server PID: {os.getpid()}\n".encode())
    out.flush()
    try:
        Server(out).serve_forever()
    except KeyboardInterrupt:
        out.write(b"\nServer shutting down...\n")
        out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())