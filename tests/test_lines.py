import os

import pytest

from pipex.lines import LineReader, read_lines


@pytest.fixture
def open_fd(tmp_path):
    opened = []

    def _open(content: bytes) -> int:
        path = tmp_path / f"f{len(opened)}.txt"
        path.write_bytes(content)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield _open
    for fd in opened:
        os.close(fd)


def test_lines_keep_newlines(open_fd):
    fd = open_fd(b"a\nb\nc")
    assert list(read_lines(fd)) == ["a\n", "b\n", "c"]


def test_empty_file_gives_none(open_fd):
    reader = LineReader(open_fd(b""))
    assert reader.next_line() is None


def test_none_repeats_after_end(open_fd):
    reader = LineReader(open_fd(b"only\n"))
    assert reader.next_line() == "only\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 7, 42, 1000])
def test_round_trip_any_buffer(open_fd, buffer_size):
    content = "first line\n\nthird\nlast without newline"
    fd = open_fd(content.encode())
    lines = list(LineReader(fd, buffer_size))
    assert "".join(lines) == content
    assert all(line.endswith("\n") for line in lines[:-1])


def test_blank_lines_are_returned(open_fd):
    assert list(read_lines(open_fd(b"\n\n"))) == ["\n", "\n"]


def test_reads_from_pipe():
    read_end, write_end = os.pipe()
    os.write(write_end, b"x\ny\n")
    os.close(write_end)
    try:
        assert list(read_lines(read_end, 1)) == ["x\n", "y\n"]
    finally:
        os.close(read_end)


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


def test_zero_buffer_rejected(open_fd):
    with pytest.raises(ValueError):
        LineReader(open_fd(b"x"), 0)


def test_closed_fd_raises(tmp_path):
    path = tmp_path / "c.txt"
    path.write_bytes(b"data\n")
    fd = os.open(path, os.O_RDONLY)
    os.close(fd)
    with pytest.raises(OSError):
        LineReader(fd).next_line()