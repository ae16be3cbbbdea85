from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Callable

import pytest

from docpipe import SourceFile
from docpipe.cli.main import main


@pytest.fixture()
def report_path(tmp_path: Path, ten_page_pdf: SourceFile) -> Path:
    path = tmp_path / ten_page_pdf.name
    path.write_bytes(ten_page_pdf.data)
    return path


def test_merge_command(tmp_path: Path, pdf_factory: Callable, widths_of: Callable) -> None:
    first = tmp_path / "a.pdf"
    second = tmp_path / "b.pdf"
    first.write_bytes(pdf_factory("a.pdf", [100, 110]).data)
    second.write_bytes(pdf_factory("b.pdf", [120]).data)
    output = tmp_path / "out" / "merged.pdf"

    assert main(["merge", str(first), str(second), str(output)]) == 0
    assert widths_of(output.read_bytes()) == [100, 110, 120]


def test_split_command(tmp_path: Path, report_path: Path, widths_of: Callable) -> None:
    output = tmp_path / "pages.pdf"

    assert main(["split", str(report_path), str(output), "--ranges", "5-3, 8, 2"]) == 0
    assert widths_of(output.read_bytes()) == [102, 108]


def test_split_with_no_pages_selected_exits_with_error(
    tmp_path: Path, report_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    output = tmp_path / "pages.pdf"

    assert main(["split", str(report_path), str(output), "--ranges", "0, 11"]) == 1
    assert "NoPagesSelected" in capsys.readouterr().err
    assert not output.exists()


def test_unreadable_input_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    broken = tmp_path / "broken.pdf"
    broken.write_bytes(b"not a pdf at all")

    assert main(["compress", str(broken), str(tmp_path / "small.pdf")]) == 1
    assert "UnreadableSource" in capsys.readouterr().err


def test_missing_input_file(tmp_path: Path) -> None:
    assert main(["compress", str(tmp_path / "absent.pdf"), str(tmp_path / "small.pdf")]) == 2


def test_images_command(tmp_path: Path, png_image: Callable, widths_of: Callable) -> None:
    image = tmp_path / "photo.png"
    image.write_bytes(png_image("photo.png", 40, 80).data)
    output = tmp_path / "photos.pdf"

    assert main(["images", str(image), str(output)]) == 0
    assert len(widths_of(output.read_bytes())) == 1


def test_rasterize_command(tmp_path: Path, pdf_factory: Callable) -> None:
    source = tmp_path / "Slides.pdf"
    source.write_bytes(pdf_factory("Slides.pdf", [100, 100]).data)
    output = tmp_path / "slides.zip"

    assert main(["rasterize", str(source), str(output), "--scale", "1"]) == 0
    with zipfile.ZipFile(output) as archive:
        assert archive.namelist() == ["Slides_page_001.png", "Slides_page_002.png"]


def test_rasterize_rejects_scale_below_one(tmp_path: Path, report_path: Path) -> None:
    assert main(["rasterize", str(report_path), str(tmp_path / "out.zip"), "--scale", "0.5"]) == 2


def test_malformed_setting_exits_with_usage_error(
    tmp_path: Path,
    report_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("DOCPIPE_PAGE_SIZE", "A0")

    assert main(["split", str(report_path), str(tmp_path / "pages.pdf"), "--ranges", "1"]) == 2
    assert "DOCPIPE_PAGE_SIZE" in capsys.readouterr().err
