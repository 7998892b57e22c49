import os
import stat

import pytest

from kitext import paths


def test_name_after_last_separator():
    assert paths.name("a/b\\c.txt") == "c.txt"
    assert paths.name("plain") == "plain"
    assert paths.name("dir\\") == ""


def test_ext_and_ext_all():
    assert paths.ext("dir/x.tar.gz") == "gz"
    assert paths.ext_all("dir/x.tar.gz") == "tar.gz"
    assert paths.ext("dir.d/noext") == ""
    assert paths.ext_all("dir.d/noext") == ""


def test_body_and_body_all():
    assert paths.body("dir/x.tar.gz") == "x.tar"
    assert paths.body_all("dir/x.tar.gz") == "x"
    assert paths.body("dir/readme") == "readme"


def test_body_plus_ext_rebuilds_name():
    for p in ["a/b.c.d", "x\\y.txt", "q/.hidden"]:
        assert paths.body(p) + "." + paths.ext(p) == paths.name(p)
        assert paths.body_all(p) + "." + paths.ext_all(p) == paths.name(p)


def test_with_backslash():
    assert paths.with_backslash("C:\\dir", True) == "C:\\dir\\"
    assert paths.with_backslash("C:\\dir\\", True) == "C:\\dir\\"
    assert paths.with_backslash("C:\\dir\\", False) == "C:\\dir"
    assert paths.with_backslash("C:/dir/", False) == "C:/dir"
    assert paths.with_backslash("", True) == ""
    assert paths.with_backslash("C:\\dir", False) == "C:\\dir"


def test_dir_only():
    assert paths.dir_only("C:\\dir\\file.txt") == "C:\\dir\\"
    assert paths.dir_only("file.txt") == ""


def test_drive_only():
    assert paths.drive_only("C:\\dir\\file") == "C:\\"
    assert paths.drive_only("C:") == "C:"
    assert paths.drive_only("abcdef") == "abcdef"


def test_compact_leaves_short_path():
    assert paths.compact("C:\\a\\b.txt", 50) == "C:\\a\\b.txt"


@pytest.mark.parametrize("limit", [30, 20, 16])
def test_compact_keeps_name_and_limit(limit):
    path = "C:\\very\\long\\directory\\tree\\here\\file.txt"
    out = paths.compact(path, limit)
    assert len(out) == limit
    assert out.endswith("file.txt")
    assert "..." in out
    assert out.startswith(path[:3])


def test_compact_cuts_long_name():
    path = "C:\\dir\\" + "n" * 40
    out = paths.compact(path, 20)
    assert len(out) == 20
    assert out[3:6] == "..."


def test_compact_too_small_limit():
    with pytest.raises(ValueError):
        paths.compact("C:\\dir\\" + "n" * 40, 4)
    with pytest.raises(ValueError):
        paths.compact("abc", -1)


def test_file_queries(tmp_path):
    f = tmp_path / "a.txt"
    f.write_text("x")
    assert paths.exists(str(f)) is True
    assert paths.is_file(str(f)) is True
    assert paths.is_directory(str(f)) is False
    assert paths.is_directory(str(tmp_path)) is True
    assert paths.is_file(str(tmp_path)) is False
    assert paths.is_file(str(f) + "/") is False
    missing = str(tmp_path / "missing")
    assert paths.exists(missing) is False
    assert paths.is_file(missing) is False
    assert paths.is_read_only(missing) is False


def test_read_only(tmp_path):
    f = tmp_path / "ro.txt"
    f.write_text("x")
    assert paths.is_read_only(str(f)) is False
    os.chmod(f, stat.S_IRUSR)
    try:
        assert paths.is_read_only(str(f)) is True
    finally:
        os.chmod(f, stat.S_IRUSR | stat.S_IWUSR)


def test_last_write_time(tmp_path):
    f = tmp_path / "t.txt"
    f.write_text("x")
    os.utime(f, (1_000_000, 1_000_000))
    assert paths.last_write_time(str(f)) == 1_000_000
    assert paths.last_write_time(str(tmp_path / "nope")) == 0.0


def test_find_files(tmp_path):
    for n in ["b.txt", "a.txt", "c.log"]:
        (tmp_path / n).write_text("x")
    pattern = str(tmp_path) + "/*.txt"
    assert list(paths.find_files(pattern)) == ["a.txt", "b.txt"]
    assert paths.find_first(pattern) == "a.txt"
    all_names = list(paths.find_files(str(tmp_path) + "/*"))
    assert "." not in all_names and ".." not in all_names
    assert sorted(all_names) == ["a.txt", "b.txt", "c.log"]


def test_find_nothing(tmp_path):
    assert paths.find_first(str(tmp_path) + "/*.none") is None
    assert list(paths.find_files(str(tmp_path / "nodir") + "/*")) == []