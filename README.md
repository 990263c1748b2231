# sigtalk

sigtalk passes text from one process to another using only the POSIX user
signals. Each byte is sent as eight bits, most significant bit first:
`SIGUSR1` carries a 0 and `SIGUSR2` carries a 1. A zero byte ends the
message.

Each time the server has received a full byte, it sends `SIGUSR1` back to
the client. When the terminating zero byte arrives, it answers with
`SIGUSR2`. The client counts the acknowledgements and prints the count once
the server reports the end of the message.

It needs a POSIX system. The server waits with `signal.sigwaitinfo`, so it
runs only where Python provides that call (Linux, for example, but not
macOS).

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id:

```
$ sigtalk-server
Server PID: 4242
```

From another terminal, send it a message:

```
$ sigtalk-client 4242 "hello there"
Sent    : 11
Received: 11
```

The server writes each byte to its standard output as it arrives. Press
Ctrl-C to stop it; it prints `Server shutting down...` on the way out.

The client takes exactly two arguments: the server's process id and a
message that is not empty. With anything else it exits with status 1 and
prints nothing. The process id is read like C's `atoi`: leading whitespace
and a sign are accepted, and reading stops at the first non-digit.

## As a library

The wire format lives in `sigtalk.protocol`:

```python
from sigtalk.protocol import encode_bits, FrameDecoder, bit_to_signal, signal_to_bit

bits = list(encode_bits(b"hi"))   # 8 bits per byte, then 8 zero bits
decoder = FrameDecoder()
received = [b for b in map(decoder.feed, bits) if b is not None]
# received == [ord("h"), ord("i"), 0]; the 0 is the end marker
```

`encode_bits` raises `ValueError` if the message holds a NUL byte.
`bit_to_signal` and `signal_to_bit` map between bits and signal numbers.

`sigtalk.server.Server` does the receiving side. `Server.handle(signum,
sender)` takes one signal and returns a `Reply(pid, signum)` when an
acknowledgement is due, writing completed bytes to the stream given to the
constructor; `Server.serve_forever()` runs it on real signals.
`sigtalk.client.transmit(pid, data, delay=0.0001)` sends every bit of
`data` and the end marker to `pid`, pausing `delay` seconds after each
signal, and returns the number of signals sent.

The package also holds a few small helpers:

- `sigtalk.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper` (each taking an int code or a
  one-character string), `atoi` and `itoa`
- `sigtalk.strings`: `split`, `trim`, `substr`, `find_bounded`,
  `bounded_copy`, `bounded_concat`, `compare_n`, `find_char`,
  `rfind_char` and `map_indexed`
- `sigtalk.printf`: `format_printf` and `printf` with the conversions
  `%c %s %p %d %i %u %x %X %%`, plus `put_number` and `put_line`;
  `printf` writes to `stream` (stdout by default) and returns the length
  written
- `sigtalk.linereader`: `LineReader`, which reads a file descriptor one
  line at a time as bytes (and can be iterated), and `get_next_line(fd)`,
  which keeps separate state for each descriptor below 1024

## Limits

The server serves one client at a time: the process that sends the first
bit of a message is the one acknowledged until that message ends, and bits
from any other process in the meantime are mixed into the same bytes. There
is no retransmission; a lost signal corrupts the rest of the message.

## Tests

```
pip install .[test]
pytest
```