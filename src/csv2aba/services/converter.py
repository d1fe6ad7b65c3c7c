"""AbaConversionService: CSV files in a file store to ABA files beside them."""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

from csv2aba.core.config import AppSettings
from csv2aba.core.protocols import IFileStore
from csv2aba.core.types import ProcessingDate
from csv2aba.encoders.document import encode_document
from csv2aba.ingestion.csv_reader import read_rows
from csv2aba.models.outputs import ConversionResult
from csv2aba.persistence.paths import aba_filename, join_key

logger = logging.getLogger(__name__)


class AbaConversionService:
    """Reads payment CSVs from a file store and writes ABA files back.

    Each call is an independent conversion; nothing is shared between calls.
    """

    def __init__(self, *, settings: AppSettings, file_store: IFileStore) -> None:
        self._settings = settings
        self._files = file_store
        self._sender = settings.sender.to_profile()

    def convert_file(
        self,
        src_path: str,
        dst_path: str | None = None,
        processing_date: ProcessingDate | None = None,
    ) -> ConversionResult:
        """Convert one CSV object; the output defaults to the same folder with an ``.aba`` name."""
        document = encode_document(read_rows(self._files.read_csv(src_path)), processing_date, self._sender)

        if dst_path is None:
            dst_path = str(PurePosixPath(src_path).with_name(aba_filename(src_path)))
        self._files.write_aba(dst_path, document)
        logger.info("Wrote %s from %s (%d records)", dst_path, src_path, document.batch.count)

        return ConversionResult(
            filename=PurePosixPath(dst_path).name,
            path=dst_path,
            record_count=document.batch.count,
            skipped_count=document.batch.skipped,
            total_cents=document.batch.total_cents,
            source_path=src_path,
        )

    def convert_prefix(
        self,
        prefix: str,
        output_prefix: str,
        archive_prefix: str | None = None,
        processing_date: ProcessingDate | None = None,
    ) -> list[ConversionResult]:
        """Convert every ``.csv`` under ``prefix`` into ``output_prefix``.

        When ``archive_prefix`` is given, each source file is moved there
        once its ABA file has been written. A failing file stops the run;
        files already converted stay converted.
        """
        results: list[ConversionResult] = []
        for src in self._files.list_csv(prefix):
            dst = join_key(output_prefix, aba_filename(src))
            results.append(self.convert_file(src, dst, processing_date))
            if archive_prefix is not None:
                self._files.move(src, join_key(archive_prefix, PurePosixPath(src).name))
        return results
