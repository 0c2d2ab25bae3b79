"""Rendering options and their translation into Gotenberg form fields."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

PaperSize = Literal["A4", "Letter", "Legal", "A3"]

# Paper dimensions in inches as ``(width, height)`` strings.
PAPER_SIZES: dict[str, tuple[str, str]] = {
    "A4": ("8.27", "11.7"),
    "Letter": ("8.5", "11"),
    "Legal": ("8.5", "14"),
    "A3": ("11.7", "16.5"),
}
DEFAULT_PAPER_SIZE = "A4"


def paper_dimensions(size: str | None) -> tuple[str, str]:
    """Return ``(width, height)`` in inches, falling back to A4 for unknown sizes."""

    return PAPER_SIZES.get(size or DEFAULT_PAPER_SIZE, PAPER_SIZES[DEFAULT_PAPER_SIZE])


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


class Margins(BaseModel):
    """Page margins in inches; unset sides are sent as zero."""

    top: float | None = None
    bottom: float | None = None
    left: float | None = None
    right: float | None = None

    model_config = ConfigDict(extra="ignore")

    def form_fields(self) -> dict[str, str]:
        return {
            "marginTop": _number(self.top) if self.top is not None else "0",
            "marginBottom": _number(self.bottom) if self.bottom is not None else "0",
            "marginLeft": _number(self.left) if self.left is not None else "0",
            "marginRight": _number(self.right) if self.right is not None else "0",
        }


class ConversionOptions(BaseModel):
    """Options accepted by the office document conversion routes."""

    paper_size: PaperSize | None = Field(None, alias="paperSize")
    orientation: Literal["portrait", "landscape"] | None = None
    margins: Margins | None = None
    image_quality: int | None = Field(None, alias="imageQuality", ge=1, le=100)
    lossless_image_compression: bool | None = Field(None, alias="losslessImageCompression")
    reduce_image_resolution: bool | None = Field(None, alias="reduceImageResolution")
    max_image_resolution: Literal["75", "150", "300", "600", "1200"] | None = Field(
        None, alias="maxImageResolution"
    )
    single_page_sheets: bool | None = Field(None, alias="singlePageSheets")
    export_form_fields: bool | None = Field(None, alias="exportFormFields")
    native_page_ranges: str | None = Field(None, alias="nativePageRanges")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("max_image_resolution", mode="before")
    @classmethod
    def _resolution_as_text(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def form_fields(self) -> dict[str, str]:
        """Return the LibreOffice route form fields for the options that are set."""

        fields: dict[str, str] = {}
        if self.paper_size:
            fields["paperWidth"], fields["paperHeight"] = paper_dimensions(self.paper_size)
        if self.orientation == "landscape":
            fields["landscape"] = "true"
        if self.margins is not None:
            fields.update(self.margins.form_fields())
        if self.image_quality is not None:
            fields["quality"] = str(self.image_quality)
        if self.lossless_image_compression is not None:
            fields["losslessImageCompression"] = _flag(self.lossless_image_compression)
        if self.reduce_image_resolution is not None:
            fields["reduceImageResolution"] = _flag(self.reduce_image_resolution)
        if self.max_image_resolution is not None:
            fields["maxImageResolution"] = self.max_image_resolution
        if self.single_page_sheets is not None:
            fields["singlePageSheets"] = _flag(self.single_page_sheets)
        if self.export_form_fields is not None:
            fields["exportFormFields"] = _flag(self.export_form_fields)
        if self.native_page_ranges:
            fields["nativePageRanges"] = self.native_page_ranges
        return fields


class HtmlRenderOptions(BaseModel):
    """Options accepted by the HTML, URL and Markdown routes."""

    paper_size: PaperSize | None = Field(None, alias="paperSize")
    margins: Margins | None = None
    landscape: bool | None = None
    scale: float | None = Field(None, gt=0)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def form_fields(self) -> dict[str, str]:
        """Return the Chromium route form fields for the options that are set."""

        fields: dict[str, str] = {}
        if self.paper_size:
            fields["paperWidth"], fields["paperHeight"] = paper_dimensions(self.paper_size)
        if self.landscape:
            fields["landscape"] = "true"
        if self.margins is not None:
            fields.update(self.margins.form_fields())
        if self.scale:
            fields["scale"] = _number(self.scale)
        return fields


__all__ = [
    "ConversionOptions",
    "DEFAULT_PAPER_SIZE",
    "HtmlRenderOptions",
    "Margins",
    "PAPER_SIZES",
    "PaperSize",
    "paper_dimensions",
]
