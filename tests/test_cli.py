"""Tests du point d'entrée ligne de commande."""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path

import pytest

from dialogsync.app.main import main


def test_cli_aligns_local_files(fixtures_dir: Path, capsys) -> None:
    code = main([str(fixtures_dir / "en_us.xml"), str(fixtures_dir / "es_es.xml"), "-q"])

    assert code == 0
    rows = json.loads(capsys.readouterr().out)
    assert len(rows) == 4
    assert rows[0]["phrases"] == {"en": "Where are we going?", "es": "¿Adónde vamos?"}
    assert rows[1]["phrases"]["es"] == "Lo que siento hoy, no tiene explicación."


def test_cli_csv_output(fixtures_dir: Path, capsys) -> None:
    code = main([str(fixtures_dir / "pt_br.xml"), str(fixtures_dir / "en_us.xml"), "--format", "csv", "-q"])

    assert code == 0
    rows = list(csv.reader(io.StringIO(capsys.readouterr().out)))
    assert rows[0] == ["begin", "end", "pt", "en"]
    assert rows[1] == ["00:00:01.100", "00:00:03.400", "Para onde vamos?", "Where are we going?"]
    assert len(rows) == 3


def test_cli_transcripts_dump(fixtures_dir: Path, capsys) -> None:
    code = main([str(fixtures_dir / "es_es.xml"), "--transcripts", "-q"])

    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert list(data) == ["es"]
    assert data["es"]["duration"] == pytest.approx(9.9)
    assert len(data["es"]["dialogs"]) == 3


def test_cli_zero_tolerance_leaves_only_base(fixtures_dir: Path, capsys) -> None:
    code = main(
        [str(fixtures_dir / "en_us.xml"), str(fixtures_dir / "es_es.xml"), "--tolerance", "0", "-q"]
    )

    assert code == 0
    rows = json.loads(capsys.readouterr().out)
    assert all(list(row["phrases"]) == ["en"] for row in rows)


def test_cli_returns_1_when_nothing_parses(fixtures_dir: Path, tmp_path: Path) -> None:
    code = main([str(fixtures_dir / "unsupported_lang.xml"), str(tmp_path / "missing.xml"), "-q"])
    assert code == 1


def test_cli_lenient_language(fixtures_dir: Path, capsys) -> None:
    code = main([str(fixtures_dir / "unsupported_lang.xml"), "--lenient-language", "-q"])

    assert code == 0
    rows = json.loads(capsys.readouterr().out)
    assert rows == [{"begin": 1.0, "end": 2.0, "phrases": {"xx": "Blorp."}}]


def test_cli_reads_config_file(fixtures_dir: Path, tmp_path: Path, capsys) -> None:
    config = tmp_path / "dialogsync.toml"
    config.write_text("strict_language = false\n", encoding="utf-8")

    code = main([str(fixtures_dir / "unsupported_lang.xml"), "--config", str(config), "-q"])

    assert code == 0
    assert "xx" in capsys.readouterr().out


def test_cli_rejects_invalid_config(tmp_path: Path) -> None:
    config = tmp_path / "bad.toml"
    config.write_text("tolerance_s = 'wide'\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["whatever.xml", "--config", str(config)])
    assert exc_info.value.code == 2
