from __future__ import annotations

import sys
from io import BytesIO
from pathlib import Path
from typing import Callable, Iterator, Sequence

import pytest
from PIL import Image
from pypdf import PdfReader, PdfWriter
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

PROJECT_ROOT = Path(__file__).resolve().parents[1]
for candidate in (PROJECT_ROOT, PROJECT_ROOT / "packages"):
    if str(candidate) not in sys.path:
        sys.path.insert(0, str(candidate))

from docpipe import RasterFrame, SourceFile  # noqa: E402


def build_pdf(widths: Sequence[int], height: int = 200, title: str | None = None) -> bytes:
    """Create a PDF whose page ``n`` is ``widths[n]`` points wide."""

    writer = PdfWriter()
    for width in widths:
        writer.add_blank_page(width=width, height=height)
    if title is not None:
        writer.add_metadata({"/Title": title})
    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def page_widths(data: bytes) -> list[int]:
    reader = PdfReader(BytesIO(data))
    return [round(float(page.mediabox.width)) for page in reader.pages]


def build_image(width: int, height: int, fmt: str = "PNG", color: str = "red") -> bytes:
    buffer = BytesIO()
    mode = "RGBA" if fmt == "PNG" else "RGB"
    Image.new(mode, (width, height), color).save(buffer, format=fmt)
    return buffer.getvalue()


def build_content_pdf(labels: Sequence[str]) -> bytes:
    """Create a PDF whose page ``n`` shows ``labels[n]`` and a ``10 + n`` pixel wide JPEG."""

    buffer = BytesIO()
    pdf_canvas = canvas.Canvas(buffer, pagesize=(300, 200))
    for index, label in enumerate(labels):
        pdf_canvas.drawString(20, 150, label)
        picture = ImageReader(BytesIO(build_image(10 + index, 8, "JPEG", "green")))
        pdf_canvas.drawImage(picture, 20, 20, width=40 + 4 * index, height=32)
        pdf_canvas.showPage()
    pdf_canvas.save()
    return buffer.getvalue()


def page_contents(data: bytes) -> list[tuple[str, list[int]]]:
    """Return each page's extracted text and the pixel widths of its image XObjects."""

    reader = PdfReader(BytesIO(data))
    contents = []
    for page in reader.pages:
        resources = page["/Resources"]
        widths = []
        if "/XObject" in resources:
            xobjects = resources["/XObject"]
            for key in xobjects:
                xobject = xobjects[key]
                if xobject["/Subtype"] == "/Image":
                    widths.append(int(xobject["/Width"]))
        contents.append((page.extract_text().strip(), sorted(widths)))
    return contents


@pytest.fixture()
def pdf_factory() -> Callable[..., SourceFile]:
    def _create(name: str, widths: Sequence[int], title: str | None = None) -> SourceFile:
        return SourceFile(name=name, data=build_pdf(widths, title=title), mime_type="application/pdf")

    return _create


@pytest.fixture()
def ten_page_pdf(pdf_factory: Callable[..., SourceFile]) -> SourceFile:
    return pdf_factory("report.pdf", [101 + index for index in range(10)], title="Report")


@pytest.fixture()
def png_image() -> Callable[[str, int, int], SourceFile]:
    def _create(name: str, width: int, height: int) -> SourceFile:
        return SourceFile(name=name, data=build_image(width, height, "PNG"), mime_type="image/png")

    return _create


@pytest.fixture()
def jpeg_image() -> Callable[[str, int, int], SourceFile]:
    def _create(name: str, width: int, height: int) -> SourceFile:
        return SourceFile(name=name, data=build_image(width, height, "JPEG"), mime_type="image/jpeg")

    return _create


class FakeBackend:
    """Rendering backend that emits one tiny PNG per page without pdfium."""

    name = "fake"

    def __init__(
        self,
        page_count: int,
        *,
        reverse: bool = False,
        on_render: Callable[[int], None] | None = None,
    ) -> None:
        self.page_count = page_count
        self.reverse = reverse
        self.on_render = on_render
        self.scales: list[float] = []
        self.rendered: list[int] = []

    def render(self, source: SourceFile, *, scale: float) -> Iterator[RasterFrame]:
        self.scales.append(scale)
        order = range(self.page_count)
        if self.reverse:
            order = reversed(order)
        for index in order:
            self.rendered.append(index)
            if self.on_render is not None:
                self.on_render(index)
            yield RasterFrame(index=index, width=2, height=2, data=build_image(2, 2, "PNG"))


@pytest.fixture()
def fake_backend_factory() -> Callable[..., FakeBackend]:
    return FakeBackend


@pytest.fixture()
def widths_of() -> Callable[[bytes], list[int]]:
    return page_widths


@pytest.fixture()
def content_pdf_factory() -> Callable[[str, Sequence[str]], SourceFile]:
    def _create(name: str, labels: Sequence[str]) -> SourceFile:
        return SourceFile(name=name, data=build_content_pdf(labels), mime_type="application/pdf")

    return _create


@pytest.fixture()
def contents_of() -> Callable[[bytes], list[tuple[str, list[int]]]]:
    return page_contents
