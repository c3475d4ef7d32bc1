from __future__ import annotations

from pathlib import Path

from pdf_combiner.config import CombinerSettings


def test_defaults_without_environment() -> None:
    settings = CombinerSettings.from_env({})

    assert settings.download_dir == Path("~/Downloads").expanduser()
    assert settings.open_browser is True
    assert settings.output_mode == "file"
    assert settings.log_level == "WARNING"


def test_values_from_environment(tmp_path: Path) -> None:
    settings = CombinerSettings.from_env(
        {
            "PDF_COMBINER_DOWNLOAD_DIR": str(tmp_path),
            "PDF_COMBINER_OPEN_BROWSER": "off",
            "PDF_COMBINER_OUTPUT_MODE": " String ",
            "PDF_COMBINER_LOG_LEVEL": "debug",
        }
    )

    assert settings.download_dir == tmp_path
    assert settings.open_browser is False
    assert settings.output_mode == "string"
    assert settings.log_level == "DEBUG"


def test_process_environment_is_read(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PDF_COMBINER_OPEN_BROWSER", "yes")
    monkeypatch.setenv("PDF_COMBINER_DOWNLOAD_DIR", str(tmp_path))

    settings = CombinerSettings.from_env()

    assert settings.open_browser is True
    assert settings.download_dir == tmp_path
