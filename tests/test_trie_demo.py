"""Tests for the ``trie_demo`` command line demonstration."""

from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

import pytest

import trie_demo
from trie_demo import DemoConfig, DemoConfigError, build_trie, load_config, main

ROOT = Path(__file__).resolve().parents[1]


def test_cli_outputs_expected_demo_lines(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines == [
        "TrieNode({'a': TrieNode(...), 'b': TrieNode(...)}, is_end_of_word=False)",
        "Words with prefix 'ap': ['ape', 'apple']",
    ]


def test_cli_custom_words_prefixes_and_checks(
    capsys: pytest.CaptureFixture[str],
) -> None:
    argv = [
        "--word", "Car",
        "--word", "cart",
        "--word", "dog",
        "--prefix", "ca",
        "--prefix", "x",
        "--check", "cart",
        "--check", "ca-rt",
    ]
    assert main(argv) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[1:] == [
        "Words with prefix 'ca': ['car', 'cart']",
        "Words with prefix 'x': []",
        "Contains 'cart'? Yes",
        "Contains 'ca-rt'? No",
    ]


def test_cli_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--output-format", "json", "--check", "ape"]) == 0
    payload = json.loads(capsys.readouterr().out)

    assert payload["prefixes"] == {"ap": ["ape", "apple"]}
    assert payload["checks"] == {"ape": True}
    assert payload["root"].startswith("TrieNode({'a'")


def test_load_config_reads_yaml_and_resolves_paths(tmp_path: Path) -> None:
    config_path = tmp_path / "demo.yaml"
    config_path.write_text(
        "words: [melon]\nwords_files: [lists/fruit.txt]\nprefixes: [m]\n",
        encoding="utf-8",
    )

    config = load_config(config_path)

    assert config.words == ("melon",)
    assert config.words_files == (tmp_path / "lists" / "fruit.txt",)
    assert config.prefixes == ("m",)
    assert config.checks == ()


def test_load_config_none_and_empty_document(tmp_path: Path) -> None:
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")

    assert load_config(None) == DemoConfig()
    assert load_config(empty) == DemoConfig()


@pytest.mark.parametrize(
    "document",
    [
        "- just\n- a list\n",
        "words: apple\n",
        "words: [1, 2]\n",
        "colour: blue\n",
        "words: [unterminated\n",
    ],
)
def test_load_config_rejects_invalid_documents(tmp_path: Path, document: str) -> None:
    config_path = tmp_path / "bad.yaml"
    config_path.write_text(document, encoding="utf-8")

    with pytest.raises(DemoConfigError):
        load_config(config_path)


def test_cli_config_and_word_files(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "fruit.txt").write_text("mango\nmelon\n# berries\n", encoding="utf-8")
    config_path = tmp_path / "demo.yaml"
    config_path.write_text(
        "words_files: [fruit.txt]\nprefixes: [me]\n", encoding="utf-8"
    )

    assert main(["--config", str(config_path), "--word", "medal"]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[1] == "Words with prefix 'me': ['medal', 'melon']"


def test_cli_reports_configuration_errors(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    missing = tmp_path / "nope.yaml"

    assert main(["--config", str(missing)]) == 2
    assert "Unable to read configuration" in caplog.text


def test_cli_reports_missing_word_list(tmp_path: Path) -> None:
    assert main(["--words-file", str(tmp_path / "absent.txt")]) == 2


def test_build_trie_falls_back_to_sample_words() -> None:
    trie = build_trie(DemoConfig(prefixes=("b",)))

    assert trie.words("") == ["ape", "apple", "ball"]
    assert trie_demo.DEFAULT_WORDS == ("apple", "ape'", "ball")


def test_script_entry_point() -> None:
    completed = subprocess.run(
        [sys.executable, str(ROOT / "trie_demo.py"), "--prefix", "b"],
        check=False,
        capture_output=True,
        text=True,
        cwd=ROOT,
    )

    assert completed.returncode == 0
    assert completed.stdout.splitlines()[-1] == "Words with prefix 'b': ['ball']"
