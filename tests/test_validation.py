import pytest

from script_ai_core.domain_models import (
    MAX_DOCUMENT_BYTES,
    MEDIA_TYPE_DOC,
    MEDIA_TYPE_DOCX,
    MEDIA_TYPE_PDF,
    DocumentBlob,
    ErrorCategory,
)
from script_ai_core.errors import DocumentTooLargeError, UnsupportedFormatError
from script_ai_core.validation import media_type_for_filename, validate_document


def _blob(media_type: str, size: int) -> DocumentBlob:
    return DocumentBlob(filename="doc", media_type=media_type, size=size, source=b"")


@pytest.mark.parametrize("media_type", [MEDIA_TYPE_PDF, MEDIA_TYPE_DOC, MEDIA_TYPE_DOCX])
def test_accepts_supported_types_at_limit(media_type):
    blob = _blob(media_type, MAX_DOCUMENT_BYTES)
    validated = validate_document(blob)
    assert validated.blob is blob
    assert validated.media_type == media_type


@pytest.mark.parametrize(
    "declared, accepted",
    [
        ("Application/PDF; charset=binary", MEDIA_TYPE_PDF),
        (" application/msword ", MEDIA_TYPE_DOC),
        (MEDIA_TYPE_DOCX.upper(), MEDIA_TYPE_DOCX),
    ],
)
def test_validated_media_type_is_normalized(declared, accepted):
    blob = _blob(declared, 1024)
    validated = validate_document(blob)
    assert validated.media_type == accepted
    assert validated.blob.media_type == declared


@pytest.mark.parametrize("media_type", [MEDIA_TYPE_PDF, "image/png", "text/plain", ""])
def test_too_large_regardless_of_type(media_type):
    with pytest.raises(DocumentTooLargeError) as exc:
        validate_document(_blob(media_type, MAX_DOCUMENT_BYTES + 1))
    assert exc.value.category is ErrorCategory.TOO_LARGE
    assert "50MB" in exc.value.message


@pytest.mark.parametrize("media_type", ["image/png", "text/plain", "application/zip", ""])
def test_unsupported_type_with_valid_size(media_type):
    with pytest.raises(UnsupportedFormatError) as exc:
        validate_document(_blob(media_type, 1024))
    assert exc.value.category is ErrorCategory.UNSUPPORTED_FORMAT


def test_limit_is_fifty_mebibytes():
    assert MAX_DOCUMENT_BYTES == 52_428_800


def test_media_type_for_filename():
    assert media_type_for_filename("materi.PDF") == MEDIA_TYPE_PDF
    assert media_type_for_filename("materi.doc") == MEDIA_TYPE_DOC
    assert media_type_for_filename("materi.docx") == MEDIA_TYPE_DOCX
    assert media_type_for_filename("sin_extension") == "application/octet-stream"


def test_from_path_infers_media_type(tmp_path):
    path = tmp_path / "bab1.docx"
    path.write_bytes(b"PK\x03\x04 docx")
    blob = DocumentBlob.from_path(path)
    assert blob.media_type == MEDIA_TYPE_DOCX
    assert blob.size == len(b"PK\x03\x04 docx")
    assert validate_document(blob).filename == "bab1.docx"
