import io
import json
from pathlib import Path

from nbib_csl import cli


def test_cli_writes_json_output(tmp_path: Path, sample_nbib_path: Path):
    json_out = tmp_path / "citations.json"

    exit_code = cli.main([str(sample_nbib_path), "--json-output", str(json_out)])

    assert exit_code == 0
    items = json.loads(json_out.read_text(encoding="utf-8"))
    assert len(items) == 2
    assert items[0]["note"] == "PMID: 12345"
    assert items[0]["author"] == [
        {"family": "Blachly", "given": "James S"},
        {"family": "Gregory", "given": "Charles Thomas"},
    ]
    assert items[0]["issued"] == {"raw": "2020 Mar 15"}


def test_cli_prints_json_and_report(capsys, sample_nbib_path: Path):
    exit_code = cli.main([str(sample_nbib_path), "--report", "--indent", "0"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert len(json.loads(captured.out)) == 2
    assert "Conversion Report" in captured.err
    assert "Records converted: 2" in captured.err


def test_cli_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("PMID- 1\nTI  - From stdin\n"))

    exit_code = cli.main(["-"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out)[0]["title"] == "From stdin"


def test_cli_strict_mode_fails_on_malformed_block(capsys, tmp_path: Path):
    source = tmp_path / "broken.nbib"
    source.write_text("PMID- 1\n      \nAB\n", encoding="utf-8")

    exit_code = cli.main([str(source), "--strict"])

    assert exit_code == 1
    assert "error:" in capsys.readouterr().err


def test_cli_lenient_mode_skips_malformed_block(capsys, tmp_path: Path):
    source = tmp_path / "mixed.nbib"
    source.write_text("PMID- 1\nAB\n\nPMID- 2\n", encoding="utf-8")

    exit_code = cli.main([str(source), "--report"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert json.loads(captured.out)[0]["note"] == "PMID: 2"
    assert "MALFORMED_LINE" in captured.err


def test_cli_uses_environment_defaults(monkeypatch, capsys, sample_nbib_path: Path):
    created = {}

    class FakeApp:
        def __init__(self, strict=False, indent=2):
            created["strict"] = strict
            created["indent"] = indent

        def convert_file(self, *_args, **_kwargs):
            from nbib_csl.models import ConversionResult

            return ConversionResult()

        def to_json(self, _result):
            return "[]"

    monkeypatch.setenv("NBIB_CSL_STRICT", "1")
    monkeypatch.setenv("NBIB_CSL_INDENT", "4")
    monkeypatch.setattr(cli, "NbibConverterApp", FakeApp)

    exit_code = cli.main([str(sample_nbib_path)])

    assert exit_code == 0
    assert created == {"strict": True, "indent": 4}
    assert capsys.readouterr().out.strip() == "[]"
