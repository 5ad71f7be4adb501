import base64
import os

import pytest

from script_ai_core.domain_models import MEDIA_TYPE_PDF, DocumentBlob, ErrorCategory
from script_ai_core.encoding import decode_payload, encode_document
from script_ai_core.errors import DocumentReadError
from script_ai_core.llm_client import build_messages
from script_ai_core.script_engine import build_script_request
from script_ai_core.validation import validate_document


def test_encode_round_trip_preserves_bytes():
    content = os.urandom(4096) + b"\x00\xff" * 300
    doc = validate_document(DocumentBlob.from_bytes("a.pdf", MEDIA_TYPE_PDF, content))

    payload = encode_document(doc)

    assert payload.mime_type == MEDIA_TYPE_PDF
    assert payload.filename == "a.pdf"
    assert "\n" not in payload.data
    assert payload.data == base64.b64encode(content).decode("ascii")
    assert decode_payload(payload) == content


def test_encode_reads_from_path(tmp_path):
    path = tmp_path / "materi.pdf"
    path.write_bytes(b"%PDF-1.7 contenido")
    payload = encode_document(validate_document(DocumentBlob.from_path(path)))
    assert decode_payload(payload) == b"%PDF-1.7 contenido"


def test_encode_missing_file_is_io_error(tmp_path):
    path = tmp_path / "materi.pdf"
    path.write_bytes(b"%PDF")
    doc = validate_document(DocumentBlob.from_path(path))
    path.unlink()

    with pytest.raises(DocumentReadError) as exc:
        encode_document(doc)
    assert exc.value.category is ErrorCategory.IO_ERROR


def test_encode_short_read_is_io_error():
    blob = DocumentBlob(filename="a.pdf", media_type=MEDIA_TYPE_PDF, size=100, source=b"%PDF")
    with pytest.raises(DocumentReadError):
        encode_document(validate_document(blob))


def test_encoded_payload_carries_normalized_media_type():
    blob = DocumentBlob.from_bytes("a.pdf", "Application/PDF; charset=binary", b"%PDF")
    payload = encode_document(validate_document(blob))
    assert payload.mime_type == MEDIA_TYPE_PDF

    request = build_script_request(payload, "Budi")
    file_part = build_messages(request)[1]["content"][0]["file"]
    assert file_part["file_data"] == "data:application/pdf;base64,JVBERg=="
