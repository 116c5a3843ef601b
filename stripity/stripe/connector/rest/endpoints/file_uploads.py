"""File upload endpoint definitions and adapter.

Uploads go to the files host as ``multipart/form-data`` with two parts:
``purpose`` and ``file``.
"""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Any

import aiohttp

from stripity.stripe.connector.config import FILES_BASE_URL
from stripity.stripe.models import FileUpload
from stripity.stripe.runtime.rest import ModelAdapter, RestEndpointSpec

PURPOSES = (
    "business_logo",
    "dispute_evidence",
    "identity_document",
    "incorporation_article",
    "incorporation_document",
)


def build_form(params: dict[str, Any]) -> aiohttp.FormData:
    """Build the multipart body from ``purpose`` and ``file``.

    ``file`` is a path or raw bytes; raw bytes need a ``filename``.
    """
    purpose = params["purpose"]
    if purpose not in PURPOSES:
        raise ValueError(f"purpose must be one of {list(PURPOSES)}, got {purpose!r}")

    content = params["file"]
    filename = params.get("filename")
    if isinstance(content, (str, Path)):
        path = Path(content)
        filename = filename or path.name
        content = path.read_bytes()
    if not filename:
        raise ValueError("filename is required when uploading raw bytes")

    content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
    form = aiohttp.FormData()
    form.add_field("purpose", purpose)
    form.add_field("file", content, filename=filename, content_type=content_type)
    return form


CREATE_SPEC = RestEndpointSpec(
    id="create_file_upload",
    method="POST",
    build_path=lambda params: f"{FILES_BASE_URL}files",
    build_form=build_form,
)

RETRIEVE_SPEC = RestEndpointSpec(
    id="retrieve_file_upload",
    method="GET",
    build_path=lambda params: f"{FILES_BASE_URL}files/{params['id']}",
)


class Adapter(ModelAdapter):
    model = FileUpload
