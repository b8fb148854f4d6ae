from __future__ import annotations

from app.application.exceptions import InvalidUploadError

DEFAULT_DOCUMENT_REQUEST = "Please analyze this document and provide a summary."


def document_request(message: str | None) -> str:
    return (message or "").strip() or DEFAULT_DOCUMENT_REQUEST


def decode_document(raw: bytes) -> str:
    """Decode an uploaded document as UTF-8 text (a leading BOM is dropped)."""
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise InvalidUploadError("Could not read file. Please ensure it is a text file.") from e


def check_upload_size(size: int, max_bytes: int) -> None:
    if size > max_bytes:
        raise InvalidUploadError(
            f"File size ({format_file_size(size)}) exceeds the {format_file_size(max_bytes)} limit. "
            "Please choose a smaller file."
        )


def format_file_size(num_bytes: int) -> str:
    if num_bytes == 0:
        return "0 Bytes"
    size = float(num_bytes)
    for unit in ("Bytes", "KB", "MB"):
        if size < 1024:
            return f"{round(size, 2):g} {unit}"
        size /= 1024
    return f"{round(size, 2):g} GB"
