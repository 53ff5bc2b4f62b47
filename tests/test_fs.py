import pytest

from ginlet.fs import NeuteredFile, OnlyFilesFS, directory


@pytest.fixture
def root(tmp_path):
    (tmp_path / "a.txt").write_bytes(b"hello")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.txt").write_bytes(b"nested")
    return tmp_path


def test_listing_filesystem_reads_and_lists(root):
    fs = directory(str(root), True)
    with fs.open("/a.txt") as f:
        assert f.read() == b"hello"
    with fs.open("/") as d:
        names = d.readdir(0)
    assert "a.txt" in names and "sub" in names


def test_readdir_count_limits_entries(root):
    fs = directory(str(root), True)
    with fs.open("/") as d:
        assert len(d.readdir(1)) == 1


def test_only_files_hides_directory_listing(root):
    fs = directory(str(root), False)
    assert isinstance(fs, OnlyFilesFS)
    with fs.open("/") as d:
        assert d.readdir(0) == []
    with fs.open("/sub/b.txt") as f:
        assert f.read() == b"nested"


def test_traversal_stays_in_root(root):
    fs = directory(str(root), False)
    with fs.open("../../a.txt") as f:
        assert f.read() == b"hello"


def test_missing_file_raises(root):
    fs = directory(str(root), False)
    with pytest.raises(FileNotFoundError):
        fs.open("/missing.txt")


def test_invalid_character_raises(root):
    fs = directory(str(root), True)
    with pytest.raises(ValueError):
        fs.open("/a\x00.txt")


def test_neutered_file_close_delegates(root):
    inner = directory(str(root), True).open("/a.txt")
    wrapped = NeuteredFile(inner)
    assert wrapped.read() == b"hello"
    wrapped.close()
    with pytest.raises(ValueError):
        inner.read()


def test_reading_directory_raises(root):
    fs = directory(str(root), True)
    with fs.open("/sub") as d:
        with pytest.raises(IsADirectoryError):
            d.read()