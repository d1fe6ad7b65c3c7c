"""Create the payment-file bucket and upload the sample CSV to its dropzone.

Usage:
    python scripts/setup_s3_bucket.py --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

import boto3

SAMPLES_DIR = Path(__file__).resolve().parent.parent / "samples"
DROPZONE_PREFIX = "dropzone/"


def create_bucket(s3: Any, bucket: str, region: str) -> None:
    """Create the bucket. Skips if it already exists."""
    existing = [b["Name"] for b in s3.list_buckets().get("Buckets", [])]
    if bucket in existing:
        print(f"  Bucket {bucket} already exists, skipping")
        return
    kwargs: dict[str, Any] = {"Bucket": bucket}
    if region != "us-east-1":
        kwargs["CreateBucketConfiguration"] = {"LocationConstraint": region}
    s3.create_bucket(**kwargs)
    print(f"  Created bucket {bucket}")


def upload_samples(s3: Any, bucket: str, prefix: str = DROPZONE_PREFIX) -> list[str]:
    """Upload every samples/*.csv under ``prefix``. Returns the written keys."""
    keys: list[str] = []
    for path in sorted(SAMPLES_DIR.glob("*.csv")):
        key = f"{prefix}{path.name}"
        s3.put_object(Bucket=bucket, Key=key, Body=path.read_bytes(), ContentType="text/csv")
        keys.append(key)
    print(f"  Uploaded {len(keys)} sample files")
    return keys


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the csv2aba S3 bucket")
    parser.add_argument("--endpoint-url", default=None, help="S3 endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--bucket", default="csv2aba-payment-files", help="Bucket name")
    parser.add_argument("--region", default="ap-southeast-2", help="AWS region")
    parser.add_argument("--no-samples", action="store_true", help="Skip uploading sample CSVs")
    args = parser.parse_args()

    kwargs: dict[str, Any] = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url

    s3 = boto3.client("s3", **kwargs)

    print("Creating bucket...")
    create_bucket(s3, args.bucket, args.region)

    if not args.no_samples:
        print("Uploading samples...")
        upload_samples(s3, args.bucket)

    print("Done!")


if __name__ == "__main__":
    main()
