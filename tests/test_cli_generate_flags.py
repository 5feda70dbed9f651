import json
import logging
import sys
from pathlib import Path

import tttgen.cli as cli
import tttgen.export as export
from tttgen.export import GenerateArgs, run_generate, sha256_file
from tttgen.generator import GenerationStats


def _fake_generate(stream, target, auto_symbol):
    stream.write("print('stub')\n")
    return GenerationStats(branches=1, decisions=1)


def test_run_generate_verbose_configures_debug_logging(tmp_path: Path, monkeypatch):
    calls = []
    monkeypatch.setattr(export, "generate_program", _fake_generate)
    monkeypatch.setattr(export.logging, "basicConfig", lambda **kw: calls.append(kw))

    out = run_generate(GenerateArgs(out=tmp_path / "p.py", verbose=True))
    assert calls and calls[0]["level"] == logging.DEBUG
    manifest = json.loads((tmp_path / "manifest.json").read_text())
    assert manifest["checksums"]["program"] == sha256_file(out)

    calls.clear()
    run_generate(GenerateArgs(out=tmp_path / "q.py"))
    assert calls[0]["level"] == logging.INFO


def test_generate_value_error_returns_two(monkeypatch, caplog):
    def _bad(args):
        raise ValueError("Unknown target: 'rust'")

    monkeypatch.setattr(cli, "run_generate", _bad)
    with caplog.at_level(logging.ERROR):
        assert cli.main(["generate", "--out", "x.py"]) == 2
    assert "Unknown target" in caplog.text


def test_generate_records_cli_argv(tmp_path: Path, monkeypatch):
    seen = []

    def _capture(args):
        seen.append(args)
        return args.out

    monkeypatch.setattr(cli, "run_generate", _capture)
    argv = ["generate", "--target", "c", "--out", str(tmp_path / "p.c")]
    assert cli.main(argv) == 0
    assert seen[-1].cli_argv == argv

    # Console-script entry: main() with no argv falls back to sys.argv.
    monkeypatch.setattr(sys, "argv", ["tttgen"] + argv)
    assert cli.main() == 0
    assert seen[-1].cli_argv == argv
    assert seen[-1].target == "c"
