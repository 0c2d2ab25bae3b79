"""Plugin exposing PDF encryption utilities."""

from __future__ import annotations

from ...core.utils import get_logger
from ...exceptions import MissingInputError
from ...security import protect_pdf, unprotect_pdf
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfrelay.tools.encrypt")


@register_tool("encrypt")
class EncryptTool(BaseTool):
    name = "encrypt"

    def run(self) -> bytes:
        context = self.context
        if not context.data:
            raise MissingInputError("Encryption requires a PDF document")

        password = context.config.get("user_password")
        owner_password = context.config.get("owner_password")
        permissions = context.config.get("permissions")

        LOGGER.debug(
            "Encrypting %d byte(s) with owner password %s and permissions %s",
            len(context.data),
            "<provided>" if owner_password else "<default>",
            permissions or "<default>",
        )
        result = protect_pdf(
            context.data,
            password,
            owner_password=owner_password,
            permissions=permissions,
        )
        context.resources["result"] = result
        return result


@register_tool("decrypt")
class DecryptTool(BaseTool):
    name = "decrypt"

    def run(self) -> bytes:
        context = self.context
        if not context.data:
            raise MissingInputError("Decryption requires a PDF document")

        password = context.config.get("password")
        if not password:
            raise MissingInputError("Password is required")

        LOGGER.debug("Decrypting %d byte(s)", len(context.data))
        result = unprotect_pdf(context.data, password)
        context.resources["result"] = result
        return result
