import pytest

from mysh.environment import Environment
from mysh.lookup import (
    ELF_MAGIC,
    CommandError,
    check_executable,
    find_all,
    has_valid_header,
    is_direct_path,
    path_directories,
    resolve,
    search_path,
)


def _write(path, data, mode=0o755):
    path.write_bytes(data)
    path.chmod(mode)
    return path


def test_is_direct_path():
    assert is_direct_path("./a.out") is True
    assert is_direct_path("ls") is False


def test_elf_header_is_valid(tmp_path):
    binary = _write(tmp_path / "bin", ELF_MAGIC + bytes(60))
    assert has_valid_header(str(binary)) is True


def test_full_header_without_magic_is_invalid(tmp_path):
    script = _write(tmp_path / "script", b"#" * 64)
    assert has_valid_header(str(script)) is False


def test_short_file_is_accepted(tmp_path):
    short = _write(tmp_path / "short", b"#!/bin/sh\n")
    assert has_valid_header(str(short)) is True


def test_missing_file_has_no_header(tmp_path):
    assert has_valid_header(str(tmp_path / "missing")) is False


def test_check_executable_missing(tmp_path):
    with pytest.raises(CommandError, match="Command not found."):
        check_executable(str(tmp_path / "missing"))


def test_check_executable_directory(tmp_path):
    with pytest.raises(CommandError, match="Permission denied."):
        check_executable(str(tmp_path))


def test_check_executable_not_executable(tmp_path):
    plain = _write(tmp_path / "plain", b"x", mode=0o644)
    with pytest.raises(CommandError, match="Permission denied."):
        check_executable(str(plain))


def test_path_directories():
    env = Environment(["PATH=/usr/bin:/bin"])
    assert path_directories(env) == ["/usr/bin", "/bin"]


def test_path_directories_without_path():
    assert path_directories(Environment(["HOME=/home/user"])) == []


def test_search_path_returns_first_match(tmp_path):
    first, second = tmp_path / "one", tmp_path / "two"
    first.mkdir()
    second.mkdir()
    _write(second / "tool", b"short")
    _write(first / "other", b"short")
    assert search_path("tool", [str(first), str(second)]) == f"{second}/tool"
    assert search_path("nothing", [str(first), str(second)]) is None


def test_find_all_returns_every_match(tmp_path):
    dirs = []
    for name in ("one", "two"):
        directory = tmp_path / name
        directory.mkdir()
        _write(directory / "tool", b"short")
        dirs.append(str(directory))
    assert find_all("tool", dirs) == [f"{d}/tool" for d in dirs]


def test_resolve_through_path(tmp_path):
    _write(tmp_path / "tool", b"short")
    env = Environment([f"PATH={tmp_path}"])
    assert resolve("tool", env) == f"{tmp_path}/tool"


def test_resolve_unknown_command(tmp_path):
    env = Environment([f"PATH={tmp_path}"])
    with pytest.raises(CommandError, match="Command not found."):
        resolve("nothing", env)


def test_resolve_direct_executable(tmp_path):
    binary = _write(tmp_path / "prog", ELF_MAGIC + bytes(60))
    assert resolve(str(binary), Environment()) == str(binary)


def test_resolve_direct_bad_format(tmp_path):
    script = _write(tmp_path / "prog", b"#" * 64)
    with pytest.raises(CommandError, match="Exec format error"):
        resolve(str(script), Environment())