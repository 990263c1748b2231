import signal

import pytest

from sigtalk.protocol import (
    ACK_SIGNAL,
    END_SIGNAL,
    FrameDecoder,
    bit_to_signal,
    encode_bits,
    signal_to_bit,
)


def _decode(bits):
    decoder = FrameDecoder()
    out = []
    for bit in bits:
        byte = decoder.feed(bit)
        if byte is not None:
            out.append(byte)
    return out


def test_encode_single_byte_msb_first_with_terminator():
    assert list(encode_bits(b"A")) == [0, 1, 0, 0, 0, 0, 0, 1] + [0] * 8


def test_encode_length_is_whole_bytes_plus_terminator():
    message = b"hello world"
    bits = list(encode_bits(message))
    assert len(bits) == 8 * len(message) + 8
    assert bits[-8:] == [0] * 8


def test_encode_rejects_nul():
    with pytest.raises(ValueError):
        list(encode_bits(b"a\0b"))


@pytest.mark.parametrize("message", [b"x", b"Hello, world!", bytes(range(1, 256))])
def test_round_trip(message):
    decoded = _decode(encode_bits(message))
    assert bytes(decoded[:-1]) == message
    assert decoded[-1] == 0


def test_bit_signal_mapping():
    assert bit_to_signal(0) == signal.SIGUSR1
    assert bit_to_signal(1) == signal.SIGUSR2
    assert signal_to_bit(signal.SIGUSR1) == 0
    assert signal_to_bit(signal.SIGUSR2) == 1


def test_ack_and_end_signals_share_the_bit_signals():
    assert signal_to_bit(ACK_SIGNAL) == 0
    assert signal_to_bit(END_SIGNAL) == 1
    assert bit_to_signal(0) == ACK_SIGNAL
    assert bit_to_signal(1) == END_SIGNAL


@pytest.mark.parametrize("bit", [0, 1])
def test_bit_signal_round_trip(bit):
    assert signal_to_bit(bit_to_signal(bit)) == bit


def test_bad_bit_rejected():
    with pytest.raises(ValueError):
        bit_to_signal(2)


def test_bad_signal_rejected():
    with pytest.raises(ValueError):
        signal_to_bit(signal.SIGINT)


def test_decoder_returns_none_until_full_byte():
    decoder = FrameDecoder()
    results = [decoder.feed(b) for b in [0, 1, 0, 0, 0, 0, 0, 1]]
    assert results[:7] == [None] * 7
    assert results[7] == ord("A")


def test_decoder_reset_discards_partial_byte():
    decoder = FrameDecoder()
    for bit in [1, 1, 1]:
        decoder.feed(bit)
    decoder.reset()
    assert _decode_with(decoder, encode_bits(b"Z"))[0] == ord("Z")


def _decode_with(decoder, bits):
    return [b for b in (decoder.feed(bit) for bit in bits) if b is not None]


def test_decoder_rejects_bad_bit():
    with pytest.raises(ValueError):
        FrameDecoder().feed(3)