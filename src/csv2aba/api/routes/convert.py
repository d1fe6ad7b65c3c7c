"""Conversion endpoints: CSV body or JSON rows in, ABA text out."""

from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from csv2aba.core.config import AppSettings
from csv2aba.core.exceptions import Csv2AbaError
from csv2aba.encoders.document import encode_document
from csv2aba.ingestion.csv_reader import check_columns, decode, read_rows
from csv2aba.models.outputs import AbaDocument
from csv2aba.persistence.paths import aba_filename

router = APIRouter(tags=["convert"])


class RowsRequest(BaseModel):
    """JSON conversion request: rows keyed by BSB, Reference, Name, Account, Amount."""

    rows: list[dict[str, Optional[str]]] = Field(default_factory=list)
    processing_date: Optional[date] = None
    filename: Optional[str] = None


class ConvertResponse(BaseModel):
    filename: str
    aba: str
    record_count: int
    skipped_count: int
    total_cents: int


def _settings(request: Request) -> AppSettings:
    return getattr(request.app.state, "settings", None) or AppSettings()


def _encode(request: Request, rows: list, processing_date: date | None) -> AbaDocument:
    sender = _settings(request).sender.to_profile()
    try:
        return encode_document(rows, processing_date, sender)
    except Csv2AbaError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.post("/convert", response_class=PlainTextResponse)
async def convert_csv(
    request: Request,
    filename: Optional[str] = None,
    processing_date: Optional[date] = None,
) -> PlainTextResponse:
    """Convert a raw CSV request body and return the ABA file as an attachment."""
    body = await request.body()
    try:
        rows = read_rows(decode(body))
    except UnicodeDecodeError as exc:
        raise HTTPException(status_code=400, detail=f"Body is not UTF-8 text: {exc}") from exc
    except Csv2AbaError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    document = _encode(request, rows, processing_date)
    out_name = aba_filename(filename)
    return PlainTextResponse(
        document.text,
        headers={
            "Content-Disposition": f'attachment; filename="{out_name}"',
            "X-Record-Count": str(document.batch.count),
            "X-Total-Cents": str(document.batch.total_cents),
        },
    )


@router.post("/convert/rows")
async def convert_rows(request: Request, payload: RowsRequest) -> ConvertResponse:
    """Convert JSON rows; the required columns are checked against the first row."""
    if payload.rows:
        try:
            check_columns(payload.rows[0].keys())
        except Csv2AbaError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    document = _encode(request, payload.rows, payload.processing_date)
    return ConvertResponse(
        filename=aba_filename(payload.filename),
        aba=document.text,
        record_count=document.batch.count,
        skipped_count=document.batch.skipped,
        total_cents=document.batch.total_cents,
    )
