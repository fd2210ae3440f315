import io
import logging

import pytest

from generator import cli


def test_interactive_run(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("bad\nout.txt\n-1\n0.000001\n"))

    assert cli.main([]) == 0

    out = capsys.readouterr().out
    assert "Invalid file name." in out
    assert "Invalid size." in out
    assert out.rstrip().endswith("File generated: out.txt (1e-06 GB)")
    assert (tmp_path / "out.txt").stat().st_size >= 1073


def test_flags_skip_prompts(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    assert cli.main(["--output", "data.txt", "--size", "0.000001", "--seed", "1"]) == 0

    out = capsys.readouterr().out
    assert "Enter" not in out
    assert "File generated: data.txt (1e-06 GB)" in out


def test_seed_is_reproducible(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cli.main(["--output", "a.txt", "--size", "0.000002", "--seed", "11"])
    cli.main(["--output", "b.txt", "--size", "0.000002", "--seed", "11"])
    assert (tmp_path / "a.txt").read_bytes() == (tmp_path / "b.txt").read_bytes()


def test_exhausted_input_exits_with_1(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("out.txt\n"))

    assert cli.main([]) == 1
    assert not (tmp_path / "out.txt").exists()


def test_max_attempts_exits_with_1(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("a\nb\nc\n"))
    assert cli.main(["--max-attempts", "2"]) == 1


@pytest.mark.parametrize("argv", [
    ["--output", "bad/name.txt"],
    ["--size", "0"],
    ["--max-attempts", "0"],
])
def test_bad_flags_are_usage_errors(argv):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    assert exc.value.code == 2


class InterruptingStdin:
    def readline(self):
        raise KeyboardInterrupt


def test_whole_size_prints_without_decimal(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("generator.random_file.gb_to_bytes", lambda size_in_gb: 100)

    assert cli.main(["--output", "out.txt", "--size", "10"]) == 0

    out = capsys.readouterr().out
    assert "File generated: out.txt (10 GB)" in out
    assert "10.0" not in out


def test_fractional_size_keeps_decimals(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("generator.random_file.gb_to_bytes", lambda size_in_gb: 100)

    assert cli.main(["--output", "out.txt", "--size", "0.5"]) == 0
    assert "(0.5 GB)" in capsys.readouterr().out


def test_interrupt_at_prompt_exits_with_130(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", InterruptingStdin())

    assert cli.main([]) == 130
    assert list(tmp_path.iterdir()) == []


def test_interrupt_during_generation_exits_with_130(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    def interrupt(self):
        raise KeyboardInterrupt

    monkeypatch.setattr("generator.random_file.RandomDataFileGenerator.generate_file", interrupt)
    assert cli.main(["--output", "out.txt", "--size", "1"]) == 130


def test_log_level_reaches_every_module(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cli.main(["--output", "out.txt", "--size", "0.000001", "--log-level", "DEBUG"])

    for name in ("generator.cli", "generator.prompts", "generator.random_file"):
        assert logging.getLogger(name).getEffectiveLevel() == logging.DEBUG

    cli.main(["--output", "out.txt", "--size", "0.000001"])
    assert logging.getLogger("generator.random_file").getEffectiveLevel() == logging.WARNING
