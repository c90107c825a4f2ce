# tests/test_cli.py
"""
Smoke tests for the docextract CLI.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from docextract.cli.cli import app
from docextract.cli.utils import output_file_name, unique_file_name
from tests.conftest import make_zip

pytestmark = pytest.mark.tier2

runner = CliRunner()


class TestExtract:
    def test_text_file(self, tmp_path: Path) -> None:
        path = tmp_path / "a.txt"
        path.write_text("hello world", encoding="utf-8")

        result = runner.invoke(app, ["extract", str(path)])

        assert result.exit_code == 0, result.output
        assert "hello world" in result.output

    def test_merge_zip(self, bundle_zip: Path) -> None:
        result = runner.invoke(app, ["extract", str(bundle_zip), "--merge"])

        assert result.exit_code == 0, result.output
        assert "hello from notes" in result.output
        assert "deep down text" in result.output
        assert "==>" not in result.output

    def test_split_zip_sections(self, bundle_zip: Path) -> None:
        result = runner.invoke(app, ["extract", str(bundle_zip), "--split"])

        assert result.exit_code == 0, result.output
        assert f"==> {bundle_zip}!inner.zip!deep.txt [generic] <==" in result.output

    def test_output_dir(self, bundle_zip: Path, tmp_path: Path) -> None:
        out = tmp_path / "out"

        result = runner.invoke(app, ["extract", str(bundle_zip), "--split", "-o", str(out)])

        assert result.exit_code == 0, result.output
        names = sorted(p.name for p in out.iterdir())
        assert names == [
            "bundle.zip!inner.zip!deep.txt.txt",
            "bundle.zip!inner.zip.txt",
            "bundle.zip!notes.txt.txt",
            "bundle.zip!page.html.txt",
            "bundle.zip.txt",
        ]
        assert (out / "bundle.zip!notes.txt.txt").read_text(encoding="utf-8") == "hello from notes\n"

    def test_output_dir_name_clash(self, tmp_path: Path) -> None:
        path = tmp_path / "x.zip"
        path.write_bytes(make_zip({"docs/b.txt": b"first file", "docs_b.txt": b"second file"}))
        out = tmp_path / "out"

        result = runner.invoke(app, ["extract", str(path), "--split", "-o", str(out)])

        assert result.exit_code == 0, result.output
        assert (out / "x.zip!docs_b.txt.txt").read_text(encoding="utf-8") == "first file\n"
        assert (out / "x.zip!docs_b.txt-2.txt").read_text(encoding="utf-8") == "second file\n"

    def test_ignore_option(self, tmp_path: Path) -> None:
        path = tmp_path / "a.txt"
        path.write_text("hello world", encoding="utf-8")

        result = runner.invoke(app, ["extract", str(path), "--ignore", "text/.*"])

        assert result.exit_code == 0, result.output
        assert "hello world" not in result.output

    def test_invalid_ignore_pattern(self, tmp_path: Path) -> None:
        path = tmp_path / "a.txt"
        path.write_text("hello world", encoding="utf-8")

        result = runner.invoke(app, ["extract", str(path), "--ignore", "text/("])

        assert result.exit_code == 1

    def test_broken_document_fails(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.zip"
        path.write_bytes(b"PK\x03\x04this is not really a zip")

        result = runner.invoke(app, ["extract", str(path)])

        assert result.exit_code == 1

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["extract", str(tmp_path / "nope.txt")])

        assert result.exit_code != 0


class TestDetect:
    def test_wordperfect(self, tmp_path: Path) -> None:
        path = tmp_path / "letter.wpd"
        path.write_bytes(b"\xffWPC" + b"\x00" * 60)

        result = runner.invoke(app, ["detect", str(path)])

        assert result.exit_code == 0, result.output
        assert "Content type: application/wordperfect" in result.output
        assert "Extractor: wordperfect" in result.output


class TestConfig:
    def test_show_defaults(self) -> None:
        result = runner.invoke(app, ["config"])

        assert result.exit_code == 0, result.output
        assert "split_embedded" in result.output

    def test_save(self, tmp_path: Path) -> None:
        user = tmp_path / "user.yaml"
        user.write_text("extraction:\n  split_embedded: true\n", encoding="utf-8")
        saved = tmp_path / "saved.yaml"

        result = runner.invoke(app, ["config", "-c", str(user), "--save", str(saved)])

        assert result.exit_code == 0, result.output
        assert "split_embedded: true" in saved.read_text(encoding="utf-8")

    def test_invalid_config(self, tmp_path: Path) -> None:
        user = tmp_path / "user.yaml"
        user.write_text("extraction:\n  bogus: 1\n", encoding="utf-8")

        result = runner.invoke(app, ["config", "-c", str(user)])

        assert result.exit_code == 1


def test_output_file_name() -> None:
    assert output_file_name("/tmp/a.zip!docs/b.pdf", "/tmp/a.zip", "a.zip") == "a.zip!docs_b.pdf.txt"


def test_unique_file_name() -> None:
    used: set = set()

    assert unique_file_name("a.txt", used) == "a.txt"
    assert unique_file_name("a.txt", used) == "a-2.txt"
    assert unique_file_name("a.txt", used) == "a-3.txt"
    assert unique_file_name("README", used) == "README"
    assert unique_file_name("README", used) == "README-2"
