from __future__ import annotations

import pytest

from services.io import is_pdf_upload, resolve_upload, store_upload


@pytest.mark.parametrize(
    ("filename", "content_type", "expected"),
    [
        ("contract.pdf", "application/pdf", True),
        ("contract.bin", "application/pdf", True),
        ("CONTRACT.PDF", None, True),
        ("contract.pdf", "application/octet-stream", True),
        ("contract.docx", "application/octet-stream", False),
        ("contract.pdf", "text/plain", False),
        (None, None, False),
    ],
)
def test_is_pdf_upload(filename, content_type, expected) -> None:
    assert is_pdf_upload(filename, content_type) is expected


def test_store_upload_prefixes_timestamp(tmp_path) -> None:
    path = store_upload(b"%PDF-1.7", "nested/dir/lease.pdf", tmp_path / "uploads")

    assert path.parent == tmp_path / "uploads"
    stamp, _, name = path.name.partition("-")
    assert stamp.isdigit()
    assert name == "lease.pdf"
    assert path.read_bytes() == b"%PDF-1.7"


def test_store_upload_defaults_missing_name(tmp_path) -> None:
    path = store_upload(b"%PDF", None, tmp_path)

    assert path.name.endswith("-document.pdf")


def test_resolve_upload_round_trip(tmp_path) -> None:
    stored = store_upload(b"%PDF", "nda.pdf", tmp_path)

    assert resolve_upload(stored.name, tmp_path) == stored.resolve()


def test_resolve_upload_rejects_missing_and_traversal(tmp_path) -> None:
    (tmp_path / "outside.pdf").write_bytes(b"%PDF")
    uploads = tmp_path / "uploads"
    uploads.mkdir()

    with pytest.raises(FileNotFoundError):
        resolve_upload("missing.pdf", uploads)
    with pytest.raises(FileNotFoundError):
        resolve_upload("../outside.pdf", uploads)
