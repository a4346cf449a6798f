"""Tests for the threatscan-analyze command."""

from __future__ import annotations

import json
import logging

import pytest

from threatscan import cli
from threatscan.utils.logging import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "STORAGE_BACKEND",
        "TRANSLATION_ENGINE",
        "LOG_FILE",
        "LOG_LEVEL",
        "THREAT_DICTIONARY_PATH",
    ):
        monkeypatch.delenv(name, raising=False)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(package_logger.handlers), package_logger.level
    yield
    package_logger.handlers = handlers
    package_logger.setLevel(level)


def _write(tmp_path, data):
    path = tmp_path / "session.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


def test_json_output(tmp_path, capsys):
    path = _write(
        tmp_path,
        [
            {"segmentId": "a", "text": "bomb now", "language": "english", "startTime": 0.0},
            {"segmentId": "b", "text": "see you", "language": "english", "startTime": 5.0},
        ],
    )

    exit_code = cli.main(["s1", "--input", str(path), "--json"])

    assert exit_code == 0
    captured = capsys.readouterr()
    data = json.loads(captured.out)
    assert "Analyzing threats for session: s1" in captured.err
    assert data["session_id"] == "s1"
    assert data["score"] == 4
    assert data["severity"] == "SUSPICIOUS"
    assert [kw["word"] for kw in data["triggered_keywords"]] == ["bomb", "now"]


def test_text_output(tmp_path, capsys):
    path = _write(tmp_path, [{"segment_id": "a", "text": "gun gun", "language": "english"}])

    assert cli.main(["s1", "--input", str(path)]) == 0

    out = capsys.readouterr().out
    assert "Severity:  HIGH_RISK" in out
    assert "gun [Weapon] x2" in out


def test_translations_from_file(tmp_path, capsys):
    path = _write(
        tmp_path,
        {
            "segments": [{"segmentId": "a", "text": "کل ملتے ہیں", "language": "urdu"}],
            "translations": {"a": "attack the army"},
        },
    )

    assert cli.main(["s1", "--input", str(path), "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["score"] == 6
    assert data["category_counts"]["targets"] == 1


def test_translate_flag_adds_translated_matches(tmp_path, capsys):
    path = _write(tmp_path, [{"segmentId": "a", "text": "बम अभी", "language": "hindi"}])

    assert cli.main(["s1", "--input", str(path), "--json"]) == 0
    plain = json.loads(capsys.readouterr().out)

    assert cli.main(["s1", "--input", str(path), "--json", "--translate"]) == 0
    translated = json.loads(capsys.readouterr().out)

    assert plain["score"] == 4
    assert translated["score"] == 8
    assert translated["severity"] == "HIGH_RISK"


def test_empty_session_exits_not_found(tmp_path, capsys):
    path = _write(tmp_path, [])

    assert cli.main(["s1", "--input", str(path)]) == cli.EXIT_NOT_FOUND
    assert "No transcripts found for session s1" in capsys.readouterr().err


def test_bad_configuration_exits(monkeypatch, capsys):
    monkeypatch.setenv("STORAGE_BACKEND", "postgres")

    assert cli.main(["s1"]) == cli.EXIT_CONFIG
    assert "Configuration error" in capsys.readouterr().err


def test_load_session_file_assigns_session(tmp_path):
    path = _write(
        tmp_path,
        {
            "segments": [{"segmentId": "a", "text": "x", "language": "hindi", "startTime": 2}],
            "translations": {"a": "y", "missing": "z"},
        },
    )

    segments, translations = cli.load_session_file(path, "s9")

    assert segments[0].session_id == "s9"
    assert segments[0].start_time == 2.0
    assert {t.segment_id: t.source_language for t in translations} == {
        "a": "hindi",
        "missing": "",
    }


def test_segments_without_ids_are_all_analyzed(tmp_path, capsys):
    path = _write(
        tmp_path,
        [
            {"text": "bomb the camp", "language": "english", "startTime": 0.0},
            {"text": "gun now", "language": "english", "startTime": 3.0},
            {"text": "hello", "language": "english", "startTime": 6.0},
        ],
    )

    assert cli.main(["s1", "--input", str(path), "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    # bomb 3 + camp 2 + gun 3 + now 1
    assert data["score"] == 9
    assert data["chunks_involved"] == 2


def test_load_session_file_assigns_positional_ids(tmp_path):
    path = _write(
        tmp_path,
        [
            {"text": "a", "language": "english"},
            {"segmentId": "named", "text": "b", "language": "english"},
            {"text": "c", "language": "english"},
        ],
    )

    segments, _ = cli.load_session_file(path, "s")

    assert [s.segment_id for s in segments] == ["seg-0", "named", "seg-2"]


def test_missing_input_file_exits(tmp_path, capsys):
    exit_code = cli.main(["s1", "--input", str(tmp_path / "absent.json")])

    assert exit_code == cli.EXIT_INPUT
    assert "Cannot read" in capsys.readouterr().err


@pytest.mark.parametrize("content", ["{not json", "42", '["just a string"]'])
def test_malformed_input_file_exits(tmp_path, capsys, content):
    path = tmp_path / "session.json"
    path.write_text(content, encoding="utf-8")

    assert cli.main(["s1", "--input", str(path)]) == cli.EXIT_INPUT
    assert "Cannot read" in capsys.readouterr().err
