import pytest

from kitext.files import BUFSIZE, FileReader, FileWriter, Logger


def test_reader_reads_contents(tmp_path):
    p = tmp_path / "a.bin"
    p.write_bytes(b"hello\x00world")
    r = FileReader()
    r.open(p)
    assert r.data == b"hello\x00world"
    assert r.size == len(b"hello\x00world")
    assert r.is_open


def test_reader_empty_file(tmp_path):
    p = tmp_path / "empty"
    p.write_bytes(b"")
    with FileReader() as r:
        r.open(p)
        assert r.size == 0
        assert r.data == b""


def test_reader_missing_file_raises(tmp_path):
    r = FileReader()
    with pytest.raises(FileNotFoundError):
        r.open(tmp_path / "missing.txt")
    assert not r.is_open


def test_reader_always_creates(tmp_path):
    p = tmp_path / "new.txt"
    r = FileReader()
    r.open(p, always=True)
    assert p.exists()
    assert r.size == 0


def test_reader_close_releases(tmp_path):
    p = tmp_path / "x"
    p.write_bytes(b"abc")
    r = FileReader()
    with r:
        r.open(p)
        assert r.data == b"abc"
    assert r.data == b""
    assert not r.is_open


def test_writer_round_trip(tmp_path):
    p = tmp_path / "out.bin"
    with FileWriter() as w:
        w.open(p)
        w.write(b"abc")
        w.write_byte(0x41)
    assert p.read_bytes() == b"abcA"


def test_writer_large_data_crosses_buffer(tmp_path):
    p = tmp_path / "big.bin"
    data = bytes(range(256)) * ((3 * BUFSIZE) // 256 + 7)
    w = FileWriter()
    w.open(p)
    w.write(data[:100])
    w.write(data[100:])
    assert w.buffered < BUFSIZE
    w.close()
    assert p.read_bytes() == data


def test_writer_exact_buffer_flushes(tmp_path):
    p = tmp_path / "exact.bin"
    w = FileWriter()
    w.open(p)
    w.write(b"z" * BUFSIZE)
    assert w.buffered == 0
    assert p.read_bytes() == b"z" * BUFSIZE
    w.close()


def test_write_byte_many(tmp_path):
    p = tmp_path / "bytes.bin"
    with FileWriter() as w:
        w.open(p)
        for i in range(BUFSIZE + 10):
            w.write_byte(i % 256)
    assert p.read_bytes() == bytes(i % 256 for i in range(BUFSIZE + 10))


def test_write_byte_out_of_range(tmp_path):
    with FileWriter() as w:
        w.open(tmp_path / "b")
        with pytest.raises(ValueError):
            w.write_byte(256)


def test_write_encoded_round_trip(tmp_path):
    p = tmp_path / "enc.txt"
    text = "héllo wörld"
    with FileWriter() as w:
        w.open(p)
        w.write_encoded("utf-8", text)
    assert p.read_bytes().decode("utf-8") == text


def test_write_encoded_replaces_unencodable(tmp_path):
    p = tmp_path / "enc.txt"
    with FileWriter() as w:
        w.open(p)
        w.write_encoded("ascii", "a\u3042b")
    assert p.read_bytes() == b"a?b"


def test_writer_without_create_keeps_tail(tmp_path):
    p = tmp_path / "keep.txt"
    p.write_bytes(b"abcdef")
    with FileWriter() as w:
        w.open(p, create=False)
        w.write(b"XY")
    assert p.read_bytes() == b"XYcdef"


def test_writer_without_create_missing_raises(tmp_path):
    w = FileWriter()
    with pytest.raises(FileNotFoundError):
        w.open(tmp_path / "none.txt", create=False)
    assert not w.is_open


def test_writer_create_truncates(tmp_path):
    p = tmp_path / "t.txt"
    p.write_bytes(b"old contents")
    with FileWriter() as w:
        w.open(p)
        w.write(b"new")
    assert p.read_bytes() == b"new"


def test_writer_not_open_raises():
    w = FileWriter()
    with pytest.raises(ValueError):
        w.write(b"x")
    with pytest.raises(ValueError):
        w.write_byte(1)


def test_logger_first_line_has_bom(tmp_path):
    p = tmp_path / "app.log"
    Logger(p).write_line("start")
    assert p.read_bytes() == b"\xff\xfe" + "start\r\n".encode("utf-16-le")


def test_logger_appends_later_lines(tmp_path):
    p = tmp_path / "app2.log"
    p.write_bytes(b"stale")
    Logger(p).write_line("one")
    Logger(p).write_line("two")
    data = p.read_bytes()
    assert data.startswith(b"\xff\xfe")
    assert data[2:].decode("utf-16-le") == "one\r\ntwo\r\n"