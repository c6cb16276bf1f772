import pytest

from psxcdimg.listing import FileInfo, file_info, iter_dir, list_dir_sorted


@pytest.fixture
def sample_dir(tmp_path):
    (tmp_path / "b.txt").write_bytes(b"hello")
    (tmp_path / "a.bin").write_bytes(b"\x00\x01")
    (tmp_path / "noext").write_bytes(b"x")
    (tmp_path / "sub").mkdir()
    return tmp_path


def test_iter_dir_lists_all_entries(sample_dir):
    names = {info.name for info in iter_dir(str(sample_dir))}
    assert names == {".", "..", "a.bin", "b.txt", "noext", "sub"}


def test_iter_dir_reports_kinds_and_paths(sample_dir):
    by_name = {info.name: info for info in iter_dir(str(sample_dir))}
    assert by_name["sub"].is_dir and not by_name["sub"].is_reg
    assert by_name["a.bin"].is_reg and not by_name["a.bin"].is_dir
    assert by_name["a.bin"].path == f"{sample_dir}/a.bin"


def test_trailing_slash_is_ignored(sample_dir):
    with_slash = {info.path for info in iter_dir(f"{sample_dir}/")}
    without = {info.path for info in iter_dir(str(sample_dir))}
    assert with_slash == without


def test_list_dir_sorted_puts_directories_first(sample_dir):
    names = [info.name for info in list_dir_sorted(str(sample_dir))]
    assert names == [".", "..", "sub", "a.bin", "b.txt", "noext"]


def test_extension():
    assert FileInfo("x/a.tar.gz", "a.tar.gz", False, True).extension == "gz"
    assert FileInfo("x/noext", "noext", False, True).extension == ""
    assert FileInfo("x/trail.", "trail.", False, True).extension == ""


def test_file_info_finds_file(sample_dir):
    info = file_info(str(sample_dir / "b.txt"))
    assert info.name == "b.txt"
    assert info.is_reg
    assert info.extension == "txt"


def test_file_info_on_directory(sample_dir):
    info = file_info(str(sample_dir / "sub"))
    assert info.is_dir
    assert info.name == "sub"


def test_file_info_root():
    info = file_info("/")
    assert info.is_dir and not info.is_reg
    assert info.path == "/"


def test_file_info_missing(sample_dir):
    with pytest.raises(FileNotFoundError):
        file_info(str(sample_dir / "missing.dat"))


def test_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(iter_dir(str(tmp_path / "nope")))


def test_empty_path_rejected():
    with pytest.raises(ValueError):
        list(iter_dir(""))
    with pytest.raises(ValueError):
        file_info("")


def test_overlong_path_rejected():
    with pytest.raises(OSError):
        list(iter_dir("a" * 5000))