"""FastAPI application exposing the merge and convert operations."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Callable, List

from fastapi import FastAPI, File, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from pdfforge import service
from pdfforge.config import get_settings
from pdfforge.convert.fonts import download_font
from pdfforge.core.model import InputFile, OperationResult
from pdfforge.exceptions import FontDownloadError

LOGGER = logging.getLogger("pdfforge.backend")


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Fetch the text font once at startup; stay up when offline."""

    try:
        await run_in_threadpool(download_font)
    except (FontDownloadError, OSError) as exc:
        LOGGER.warning("Font download skipped, text pages will use the builtin font: %s", exc)
    yield


app = FastAPI(title="pdfforge API", version="0.1.0", lifespan=lifespan)


def _safe_filename(filename: str | None, default: str) -> str:
    """Return a filesystem-safe filename derived from user input."""

    if not filename:
        return default

    candidate = Path(filename).name
    return candidate or default


def _respond(result: OperationResult) -> JSONResponse:
    return JSONResponse(result.as_dict(), status_code=200 if result.success else 400)


async def _read_uploads(files: List[UploadFile]) -> list[InputFile] | OperationResult:
    """Read every upload into memory, enforcing the total size limit."""

    limit = get_settings().max_upload_bytes
    stored: list[InputFile] = []
    total = 0
    for index, upload in enumerate(files, start=1):
        contents = await upload.read()
        total += len(contents)
        if total > limit:
            LOGGER.warning("Rejected upload batch larger than %d bytes", limit)
            return OperationResult.failed(
                f"Uploaded files exceed the {get_settings().max_upload_mb} MB limit."
            )
        stored.append(
            InputFile(
                name=_safe_filename(upload.filename, f"file_{index}"),
                data=contents,
                media_type=upload.content_type or "",
            )
        )
    return stored


async def _run(
    operation: Callable[[list[InputFile]], OperationResult],
    files: List[UploadFile],
) -> JSONResponse:
    uploads = await _read_uploads(files)
    if isinstance(uploads, OperationResult):
        return _respond(uploads)
    result = await run_in_threadpool(operation, uploads)
    return _respond(result)


@app.get("/health", response_class=JSONResponse)
async def health() -> dict[str, str]:
    """Lightweight health endpoint for uptime checks."""
    return {"status": "ok"}


@app.post("/merge", response_class=JSONResponse)
async def merge_documents(
    files: List[UploadFile] = File(..., description="PDF files to merge, in order"),
) -> JSONResponse:
    """Merge the uploaded PDFs and return the result as a data URI."""

    return await _run(service.merge, files)


@app.post("/convert", response_class=JSONResponse)
async def convert_documents(
    files: List[UploadFile] = File(..., description="Images and Office documents, in page order"),
) -> JSONResponse:
    """Convert the uploads into a single PDF returned as a data URI."""

    return await _run(service.convert, files)


__all__ = ["app"]
