import os

import pytest

from sigtalk.linereader import BUFFER_SIZE, LineReader, get_next_line


@pytest.fixture
def open_data(tmp_path):
    opened = []

    def _open(data: bytes, name: str = "data.txt") -> int:
        path = tmp_path / name
        path.write_bytes(data)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield _open
    for fd in opened:
        try:
            os.close(fd)
        except OSError:
            pass


def test_reads_lines_keeping_newlines(open_data):
    fd = open_data(b"first\nsecond\nthird\n")
    reader = LineReader(fd)
    assert reader.read_line() == b"first\n"
    assert reader.read_line() == b"second\n"
    assert reader.read_line() == b"third\n"
    assert reader.read_line() is None


def test_last_line_without_newline(open_data):
    fd = open_data(b"alpha\nomega")
    assert list(LineReader(fd)) == [b"alpha\n", b"omega"]


def test_empty_input_yields_none(open_data):
    fd = open_data(b"")
    reader = LineReader(fd)
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_blank_lines_are_returned(open_data):
    fd = open_data(b"\n\nx\n")
    assert list(LineReader(fd)) == [b"\n", b"\n", b"x\n"]


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 7, BUFFER_SIZE, 10000])
def test_round_trip_for_any_buffer_size(open_data, buffer_size):
    data = b"short\n" + b"y" * 100 + b"\n\nlast line without end"
    fd = open_data(data)
    lines = list(LineReader(fd, buffer_size))
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert all(line.count(b"\n") <= 1 for line in lines)


def test_line_longer_than_buffer(open_data):
    long_line = b"z" * (BUFFER_SIZE * 3 + 5) + b"\n"
    fd = open_data(long_line + b"tail\n")
    reader = LineReader(fd)
    assert reader.read_line() == long_line
    assert reader.read_line() == b"tail\n"


def test_reads_from_pipe():
    read_end, write_end = os.pipe()
    try:
        os.write(write_end, b"one\ntwo")
        os.close(write_end)
        write_end = -1
        assert list(LineReader(read_end, 3)) == [b"one\n", b"two"]
    finally:
        os.close(read_end)
        if write_end >= 0:
            os.close(write_end)


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


@pytest.mark.parametrize("buffer_size", [0, -5])
def test_non_positive_buffer_rejected(buffer_size):
    with pytest.raises(ValueError):
        LineReader(0, buffer_size)


def test_closed_fd_raises_oserror(tmp_path):
    path = tmp_path / "gone.txt"
    path.write_bytes(b"data\n")
    fd = os.open(path, os.O_RDONLY)
    os.close(fd)
    with pytest.raises(OSError):
        LineReader(fd).read_line()


def test_get_next_line_reads_to_end(open_data):
    fd = open_data(b"a\nb\n")
    assert get_next_line(fd) == b"a\n"
    assert get_next_line(fd) == b"b\n"
    assert get_next_line(fd) is None


def test_get_next_line_keeps_state_per_fd(open_data):
    fd1 = open_data(b"1a\n1b\n", "one.txt")
    fd2 = open_data(b"2a\n2b\n2c", "two.txt")
    results = [get_next_line(fd1), get_next_line(fd2), get_next_line(fd1), get_next_line(fd2)]
    assert results == [b"1a\n", b"2a\n", b"1b\n", b"2b\n"]
    assert get_next_line(fd1) is None
    assert get_next_line(fd2) == b"2c"
    assert get_next_line(fd2) is None


def test_get_next_line_rejects_negative_fd():
    with pytest.raises(ValueError):
        get_next_line(-3)


def test_get_next_line_rejects_fd_out_of_table():
    with pytest.raises(ValueError):
        get_next_line(1024)


def test_get_next_line_closed_fd_raises(tmp_path):
    path = tmp_path / "closed.txt"
    path.write_bytes(b"x\n")
    fd = os.open(path, os.O_RDONLY)
    os.close(fd)
    with pytest.raises(OSError):
        get_next_line(fd)