import os

import pytest

from pipex.pipeline import (
    child_error,
    main,
    resolve_command,
    run_child,
    run_pipex,
)


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("hello\nfoo world\nbar\n")
    return path


def test_resolve_command_prefixes_bin_dir():
    assert resolve_command(["ls", "-l"]) == "/usr/bin/ls"


def test_resolve_command_without_args():
    assert resolve_command([]) is None


def test_child_error_without_args(capsys):
    assert child_error([], None) == 127
    assert capsys.readouterr().err == "pipex: : command not found\n"


def test_child_error_missing_command(capsys, tmp_path):
    missing = str(tmp_path / "nosuchcmd")
    assert child_error(["nosuchcmd"], missing) == 127
    assert capsys.readouterr().err == "pipex: nosuchcmd: command not found\n"


def test_child_error_not_executable(capsys, tmp_path):
    target = tmp_path / "plain"
    target.write_text("data")
    os.chmod(target, 0o644)
    assert child_error(["plain"], str(target)) == 1
    assert capsys.readouterr().err.startswith("pipex: ")


def test_run_child_copies_stream(tmp_path, infile):
    out = tmp_path / "out.txt"
    with open(infile, "rb") as src, open(out, "wb") as dst:
        status = run_child("cat", src, dst, None)
    assert status == 0
    assert out.read_text() == infile.read_text()


def test_run_child_unknown_command(capfd, tmp_path, infile):
    out = tmp_path / "out.txt"
    with open(infile, "rb") as src, open(out, "wb") as dst:
        status = run_child("nosuchcommand_xyz", src, dst, None)
    assert status == 127
    assert "pipex: nosuchcommand_xyz: command not found" in capfd.readouterr().err


def test_pipeline_filters(tmp_path, infile):
    out = tmp_path / "out.txt"
    assert run_pipex(str(infile), "cat", "grep bar", str(out)) == 0
    assert out.read_text() == "bar\n"


def test_pipeline_quoted_argument(tmp_path, infile):
    out = tmp_path / "out.txt"
    assert run_pipex(str(infile), "cat", "grep 'o w'", str(out)) == 0
    assert out.read_text() == "foo world\n"


def test_pipeline_missing_infile(capfd, tmp_path):
    missing = tmp_path / "absent.txt"
    out = tmp_path / "out.txt"
    assert run_pipex(str(missing), "cat", "cat", str(out)) == 0
    assert out.read_text() == ""
    assert f"{missing}: " in capfd.readouterr().err


def test_pipeline_unknown_second_command(capfd, tmp_path, infile):
    out = tmp_path / "out.txt"
    assert run_pipex(str(infile), "cat", "nosuchcommand_xyz", str(out)) == 127
    assert "nosuchcommand_xyz: command not found" in capfd.readouterr().err


def test_pipeline_empty_second_command(capfd, tmp_path, infile):
    out = tmp_path / "out.txt"
    assert run_pipex(str(infile), "cat", "   ", str(out)) == 127
    assert "pipex: : command not found" in capfd.readouterr().err


def test_pipeline_unwritable_outfile(tmp_path, infile):
    out = tmp_path / "no_dir" / "out.txt"
    assert run_pipex(str(infile), "cat", "cat", str(out)) == 1
    assert not out.exists()


def test_pipeline_truncates_outfile(tmp_path, infile):
    out = tmp_path / "out.txt"
    out.write_text("old content that is longer than the result\n" * 10)
    assert run_pipex(str(infile), "cat", "cat", str(out)) == 0
    assert out.read_text() == infile.read_text()


def test_main_wrong_argument_count(capsys):
    assert main(["a", "b"]) == 1
    assert capsys.readouterr().out == "Input error: not enough arguments\n"


def test_main_runs_pipeline(tmp_path, infile):
    out = tmp_path / "out.txt"
    assert main([str(infile), "cat", "grep hello", str(out)]) == 0
    assert out.read_text() == "hello\n"