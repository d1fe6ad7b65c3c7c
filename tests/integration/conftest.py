"""Integration test fixtures — LocalStack S3."""

from __future__ import annotations

import os
import sys

import boto3
import pytest
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

# Default LocalStack endpoint
LOCALSTACK_URL = os.environ.get("LOCALSTACK_URL", "http://localhost:4566")
REGION = "ap-southeast-2"
BUCKET = "csv2aba-inttest"


def _localstack_available() -> bool:
    """Check if LocalStack is reachable."""
    try:
        client = boto3.client(
            "s3", region_name=REGION, endpoint_url=LOCALSTACK_URL,
            config=Config(connect_timeout=1, retries={"max_attempts": 0}),
        )
        client.list_buckets()
        return True
    except (BotoCoreError, ClientError):
        return False


skip_no_localstack = pytest.mark.skipif(
    not _localstack_available(),
    reason="LocalStack not available",
)


@pytest.fixture(scope="session")
def localstack_s3():
    """S3 client pointing at LocalStack."""
    return boto3.client("s3", region_name=REGION, endpoint_url=LOCALSTACK_URL)


@pytest.fixture(scope="session")
def seeded_bucket(localstack_s3):
    """Create the bucket and upload samples via the setup script."""
    sys.path.insert(0, str(os.path.join(os.path.dirname(__file__), "..", "..", "scripts")))
    from setup_s3_bucket import create_bucket, upload_samples

    create_bucket(localstack_s3, BUCKET, REGION)
    upload_samples(localstack_s3, BUCKET)
    return BUCKET
