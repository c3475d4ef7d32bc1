from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner
from pypdf import PdfReader

from pdf_combiner.cli import cli

from conftest import A4_LANDSCAPE, A4_PORTRAIT


@pytest.fixture()
def runner(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> CliRunner:
    monkeypatch.setenv("PDF_COMBINER_OPEN_BROWSER", "false")
    monkeypatch.setenv("PDF_COMBINER_DOWNLOAD_DIR", str(tmp_path / "downloads"))
    monkeypatch.delenv("PDF_COMBINER_OUTPUT_MODE", raising=False)
    return CliRunner()


def test_merge_command_writes_file(runner: CliRunner, tmp_path: Path, sample_pdfs: list[Path]) -> None:
    output = tmp_path / "out.pdf"

    result = runner.invoke(
        cli,
        ["merge", *map(str, sample_pdfs), "-o", str(output), "--title", "CLI bundle"],
    )

    assert result.exit_code == 0, result.output
    reader = PdfReader(str(output))
    assert len(reader.pages) == 5
    assert reader.metadata.title == "CLI bundle"


def test_merge_command_pages_and_duplex(runner: CliRunner, tmp_path: Path, sample_pdfs: list[Path]) -> None:
    output = tmp_path / "duplex.pdf"

    result = runner.invoke(
        cli,
        ["merge", *map(str, sample_pdfs), "-r", "1", "-r", "all", "--duplex", "-o", str(output)],
    )

    assert result.exit_code == 0, result.output
    # 1 page + blank, then 2 pages
    assert len(PdfReader(str(output)).pages) == 4


def test_merge_command_rejects_mismatched_pages(runner: CliRunner, tmp_path: Path, pdf_factory) -> None:
    pdfs = [pdf_factory(f"{name}.pdf") for name in ("a", "b", "c")]

    result = runner.invoke(cli, ["merge", *map(str, pdfs), "-r", "1", "-r", "1", "-o", str(tmp_path / "x.pdf")])

    assert result.exit_code == 1
    assert not (tmp_path / "x.pdf").exists()


def test_merge_command_reports_missing_page(runner: CliRunner, tmp_path: Path, pdf_factory) -> None:
    source = pdf_factory("short.pdf", sizes=[A4_PORTRAIT] * 2)

    result = runner.invoke(cli, ["merge", str(source), "-r", "5", "-o", str(tmp_path / "x.pdf")])

    assert result.exit_code == 1
    assert "Error" in result.output
    assert not (tmp_path / "x.pdf").exists()


def test_merge_command_string_mode(runner: CliRunner, tmp_path: Path, pdf_factory) -> None:
    source = pdf_factory("doc.pdf")

    result = runner.invoke(cli, ["merge", str(source), "-m", "string", "-o", str(tmp_path / "x.pdf")])

    assert result.exit_code == 0
    assert b"%PDF-" in result.stdout_bytes
    assert not (tmp_path / "x.pdf").exists()


def test_merge_command_download_mode(runner: CliRunner, tmp_path: Path, pdf_factory) -> None:
    source = pdf_factory("doc.pdf")

    result = runner.invoke(cli, ["merge", str(source), "-m", "download", "-o", "bundle.pdf"])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "downloads" / "bundle.pdf").exists()


def test_info_command(runner: CliRunner, pdf_factory) -> None:
    source = pdf_factory("mixed.pdf", sizes=[A4_PORTRAIT, A4_LANDSCAPE])

    result = runner.invoke(cli, ["info", str(source)])

    assert result.exit_code == 0, result.output
    assert "Portrait" in result.output
    assert "Landscape" in result.output


def test_pages_command(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["pages", "1,3,6,12-16"])

    assert result.exit_code == 0
    assert "1, 3, 6, 12, 13, 14, 15, 16" in result.output
    assert "8" in result.output


def test_pages_command_invalid(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["pages", "5-3"])

    assert result.exit_code == 1
    assert "greater than ending page" in result.output
