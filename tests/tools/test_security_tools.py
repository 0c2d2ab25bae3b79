from __future__ import annotations

from io import BytesIO

import pytest
from pypdf import PdfReader
from pypdf.constants import UserAccessPermissions

from pdfrelay.exceptions import (
    EncryptionError,
    InvalidOptionError,
    InvalidPasswordError,
    MissingInputError,
    PdfLoadError,
)
from pdfrelay.security import build_permissions, is_pdf_encrypted, protect_pdf, unprotect_pdf
from pdfrelay.tools import load_builtin_plugins
from pdfrelay.tools.common.interfaces import TransformContext
from pdfrelay.tools.common.pipeline import registry


def setup_module(module):
    load_builtin_plugins()


def _geometry(data: bytes, password: str | None = None) -> list[tuple[float, float]]:
    reader = PdfReader(BytesIO(data))
    if password is not None:
        reader.decrypt(password)
    return [(float(page.mediabox.width), float(page.mediabox.height)) for page in reader.pages]


def test_encrypt_and_decrypt_round_trip(ten_page_pdf: bytes) -> None:
    encrypt_context = TransformContext(data=ten_page_pdf, config={"user_password": "x"})
    encrypted = registry.create("encrypt", encrypt_context).run()
    assert is_pdf_encrypted(encrypted) is True

    decrypt_context = TransformContext(data=encrypted, config={"password": "x"})
    decrypted = registry.create("decrypt", decrypt_context).run()

    assert is_pdf_encrypted(decrypted) is False
    assert _geometry(decrypted) == _geometry(ten_page_pdf)


def test_decrypt_with_wrong_password_fails(sample_pdf: bytes) -> None:
    encrypted = protect_pdf(sample_pdf, "x")

    with pytest.raises(InvalidPasswordError) as excinfo:
        unprotect_pdf(encrypted, "y")
    assert isinstance(excinfo.value, PdfLoadError)


def test_owner_password_also_opens_document(sample_pdf: bytes) -> None:
    encrypted = protect_pdf(sample_pdf, "user", owner_password="owner")

    reader = PdfReader(BytesIO(encrypted))
    assert reader.decrypt("owner") != 0
    assert len(unprotect_pdf(encrypted, "owner")) > 0


def test_encrypting_encrypted_document_fails(sample_pdf: bytes) -> None:
    encrypted = protect_pdf(sample_pdf, "secret")

    with pytest.raises(EncryptionError):
        protect_pdf(encrypted, "another")


def test_encrypting_corrupt_document_fails() -> None:
    with pytest.raises(EncryptionError):
        protect_pdf(b"%PDF-1.7 garbage", "secret")


def test_encrypt_requires_password(sample_pdf: bytes) -> None:
    with pytest.raises(InvalidOptionError):
        protect_pdf(sample_pdf, "")


def test_decrypt_tool_requires_password(sample_pdf: bytes) -> None:
    with pytest.raises(MissingInputError):
        registry.create("decrypt", TransformContext(data=sample_pdf, config={})).run()


def test_decrypting_plain_document_returns_it_unchanged(sample_pdf: bytes) -> None:
    result = unprotect_pdf(sample_pdf, "anything")

    assert is_pdf_encrypted(result) is False
    assert _geometry(result) == _geometry(sample_pdf)


def test_permissions_default_to_everything_allowed() -> None:
    flags = build_permissions()

    assert flags & UserAccessPermissions.PRINT
    assert flags & UserAccessPermissions.PRINT_TO_REPRESENTATION
    assert flags & UserAccessPermissions.EXTRACT
    assert flags & UserAccessPermissions.MODIFY
    assert flags & UserAccessPermissions.ADD_OR_MODIFY
    assert flags & UserAccessPermissions.FILL_FORM_FIELDS
    assert flags & UserAccessPermissions.EXTRACT_TEXT_AND_GRAPHICS
    assert flags & UserAccessPermissions.ASSEMBLE_DOC


def test_permissions_can_be_revoked() -> None:
    flags = build_permissions({"print": False, "copy": False, "modify": False})

    assert not flags & UserAccessPermissions.PRINT
    assert not flags & UserAccessPermissions.PRINT_TO_REPRESENTATION
    assert not flags & UserAccessPermissions.EXTRACT
    assert not flags & UserAccessPermissions.MODIFY
    assert flags & UserAccessPermissions.ADD_OR_MODIFY
    assert flags & UserAccessPermissions.ASSEMBLE_DOC
