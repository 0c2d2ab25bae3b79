"""Pydantic request models describing each local PDF transform."""

from __future__ import annotations

import json
from typing import Any, ClassVar, Literal, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import InvalidOptionError


class TransformRequest(BaseModel):
    """Base class for transform payloads; ``tool`` names the consuming tool."""

    tool: ClassVar[str]

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def tool_config(self) -> dict[str, Any]:
        """Return the configuration mapping handed to the registered tool."""

        return self.model_dump()


class SplitRequest(TransformRequest):
    tool: ClassVar[str] = "split"

    page_ranges: list[str] = Field(..., alias="pageRanges", min_length=1)


class RotateRequest(TransformRequest):
    tool: ClassVar[str] = "rotate"

    angle: Literal["90", "180", "270"]
    pages: str | None = None

    @field_validator("angle", mode="before")
    @classmethod
    def _angle_as_text(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def tool_config(self) -> dict[str, Any]:
        return {"angle": int(self.angle), "pages": self.pages}


class Permissions(BaseModel):
    """Switches controlling what a user-password holder may do."""

    allow_print: bool = Field(True, alias="print")
    allow_copy: bool = Field(True, alias="copy")
    allow_modify: bool = Field(True, alias="modify")

    model_config = ConfigDict(populate_by_name=True)


class EncryptRequest(TransformRequest):
    tool: ClassVar[str] = "encrypt"

    user_password: str = Field(..., alias="userPassword", min_length=1)
    owner_password: str | None = Field(None, alias="ownerPassword")
    permissions: Permissions | None = None

    def tool_config(self) -> dict[str, Any]:
        permissions = self.permissions.model_dump(by_alias=True) if self.permissions else None
        return {
            "user_password": self.user_password,
            "owner_password": self.owner_password or None,
            "permissions": permissions,
        }


class DecryptRequest(TransformRequest):
    tool: ClassVar[str] = "decrypt"

    password: str = Field(..., min_length=1)


class WatermarkOptions(BaseModel):
    opacity: float | None = Field(None, ge=0.0, le=1.0)
    font_size: float | None = Field(None, alias="fontSize", gt=0)
    rotation: float | None = None
    position: Literal["center", "top", "bottom", "diagonal"] | None = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class WatermarkRequest(TransformRequest):
    tool: ClassVar[str] = "watermark"

    text: str = Field(..., min_length=1)
    options: WatermarkOptions | None = None

    def tool_config(self) -> dict[str, Any]:
        options = self.options.model_dump(exclude_none=True) if self.options else None
        return {"text": self.text, "options": options}


class CompressRequest(TransformRequest):
    tool: ClassVar[str] = "compress"


class InfoRequest(TransformRequest):
    tool: ClassVar[str] = "info"


RequestT = TypeVar("RequestT", bound=BaseModel)


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "request"
    return f"Invalid {location}: {first.get('msg', 'invalid value')}"


def parse_request(model: Type[RequestT], raw: str | bytes | dict[str, Any]) -> RequestT:
    """Validate ``raw`` (a JSON document or mapping) into ``model``.

    Malformed JSON and validation failures are reported as
    :class:`~pdfrelay.exceptions.InvalidOptionError`.
    """

    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise InvalidOptionError(f"Invalid JSON payload: {exc.msg}") from exc
    if not isinstance(raw, dict):
        raise InvalidOptionError("Request payload must be a JSON object")
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        raise InvalidOptionError(_describe(exc)) from exc


__all__ = [
    "CompressRequest",
    "DecryptRequest",
    "EncryptRequest",
    "InfoRequest",
    "Permissions",
    "RotateRequest",
    "SplitRequest",
    "TransformRequest",
    "WatermarkOptions",
    "WatermarkRequest",
    "parse_request",
]
