"""Admin endpoints for CSV question imports."""

from fastapi import APIRouter, File, Request, Response, UploadFile, status

from app.core.app_exceptions import AppError, bad_request
from app.core.config import settings
from app.core.etag import check_if_none_match, compute_etag, create_not_modified_response
from app.schemas.exam_import import ImportErrorOut, ImportPreviewOut
from app.services.importer import SAMPLE_CSV, TEMPLATE_FILENAME, CSVParseError, ImportOutcome, run_import

router = APIRouter(prefix="/admin/exams/import", tags=["Admin - Exam Import"])


async def read_import_file(file: UploadFile) -> bytes:
    """Read an uploaded file, rejecting anything over the import size cap."""
    max_bytes = settings.MAX_BODY_BYTES_IMPORT
    file.file.seek(0, 2)
    file_size = file.file.tell()
    file.file.seek(0)

    if file_size > max_bytes:
        raise AppError(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            code="PAYLOAD_TOO_LARGE",
            message="File too large",
            details={"limit": max_bytes},
        )
    return await file.read()


def csv_parse_error(exc: CSVParseError) -> AppError:
    return bad_request("CSV_PARSE_ERROR", str(exc))


def preview_from_outcome(outcome: ImportOutcome, file_name: str | None) -> ImportPreviewOut:
    return ImportPreviewOut(
        valid=outcome.valid,
        file_name=file_name,
        total_rows=outcome.total_rows,
        errors=outcome.messages,
        error_details=[ImportErrorOut(**e.to_dict()) for e in outcome.errors],
        questions=outcome.questions,
    )


@router.get("/template")
async def download_template(request: Request) -> Response:
    """Download the sample question CSV. Supports ETag/If-None-Match for caching."""
    etag = compute_etag(SAMPLE_CSV)
    if check_if_none_match(request, etag):
        return create_not_modified_response(etag)

    return Response(
        content=SAMPLE_CSV,
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{TEMPLATE_FILENAME}"',
            "ETag": etag,
        },
    )


@router.post("/preview", response_model=ImportPreviewOut)
async def preview_import(file: UploadFile = File(...)) -> ImportPreviewOut:
    """Tokenize and validate a CSV without keeping any state.

    Row errors are returned with ``valid=false`` rather than as an HTTP error.
    """
    content = await read_import_file(file)
    try:
        outcome = run_import(content)
    except CSVParseError as e:
        raise csv_parse_error(e) from e
    return preview_from_outcome(outcome, file.filename)
