"""S3 payment file store: CSVs in, ABA files out."""

from __future__ import annotations

from pathlib import PurePosixPath

import boto3
from botocore.exceptions import ClientError

from csv2aba.core.exceptions import FileStoreError
from csv2aba.models.outputs import ABA_CONTENT_TYPE, CSV_ENCODING, AbaDocument
from csv2aba.persistence.paths import is_csv


class S3FileStore:
    """Production IFileStore backed by one S3 bucket.

    ABA objects are written as US-ASCII ``text/plain`` with an attachment
    disposition so a browser download keeps the ``.aba`` name.
    """

    def __init__(self, bucket: str, region: str = "ap-southeast-2",
                 endpoint_url: str | None = None) -> None:
        self._bucket = bucket
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    @property
    def bucket(self) -> str:
        return self._bucket

    def read_csv(self, path: str) -> str:
        try:
            resp = self._client.get_object(Bucket=self._bucket, Key=path)
            return resp["Body"].read().decode(CSV_ENCODING)
        except ClientError as exc:
            raise FileStoreError(f"Cannot fetch payment file s3://{self._bucket}/{path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise FileStoreError(f"Payment file {path!r} is not UTF-8 text: {exc}") from exc

    def write_aba(self, path: str, document: AbaDocument) -> str:
        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=path,
                Body=document.encode(),
                ContentType=ABA_CONTENT_TYPE,
                ContentDisposition=f'attachment; filename="{PurePosixPath(path).name}"',
                Metadata={
                    "record-count": str(document.batch.count),
                    "total-cents": str(document.batch.total_cents),
                },
            )
            return path
        except ClientError as exc:
            raise FileStoreError(f"Cannot store ABA file s3://{self._bucket}/{path}: {exc}") from exc

    def move(self, src: str, dst: str) -> None:
        """Archive a processed source file (S3 has no rename: copy then delete)."""
        try:
            self._client.copy_object(
                Bucket=self._bucket,
                CopySource={"Bucket": self._bucket, "Key": src},
                Key=dst,
            )
            self._client.delete_object(Bucket=self._bucket, Key=src)
        except ClientError as exc:
            raise FileStoreError(f"Cannot archive {src!r} to {dst!r}: {exc}") from exc

    def list_csv(self, prefix: str) -> list[str]:
        """Payment CSV keys under ``prefix``, sorted, across all result pages."""
        try:
            keys: list[str] = []
            paginator = self._client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self._bucket, Prefix=prefix):
                keys.extend(obj["Key"] for obj in page.get("Contents", []) if is_csv(obj["Key"]))
            return sorted(keys)
        except ClientError as exc:
            raise FileStoreError(f"Cannot list payment files under {prefix!r}: {exc}") from exc
