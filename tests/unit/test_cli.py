"""Tests for the csv2aba command line."""

from __future__ import annotations

import io

import boto3
import pytest
from moto import mock_aws

from csv2aba.cli import main

CSV = (
    "BSB,Reference,Name,Account,Amount\n"
    "000-000,TEST,R SMITH,157108231,$12.00\n"
    ",,,,\n"
)


class TestConvert:
    def test_writes_aba_beside_input(self, tmp_path):
        src = tmp_path / "payroll.csv"
        src.write_text(CSV)
        assert main(["convert", str(src), "--date", "2025-04-23"]) == 0
        out = (tmp_path / "payroll.aba").read_bytes()
        assert out.count(b"\n") == 3
        assert b"\r" not in out

    def test_explicit_output(self, tmp_path):
        src = tmp_path / "in.csv"
        src.write_text(CSV)
        dst = tmp_path / "batch.aba"
        assert main(["convert", str(src), "-o", str(dst), "--date", "2025-04-23"]) == 0
        assert dst.read_text().splitlines()[0][74:80] == "230425"

    def test_stdin_to_stdout(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(CSV))
        assert main(["convert", "-", "--stdout", "--date", "2025-04-23"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        assert lines[2][74:80] == "000001"

    def test_stdin_bom_is_dropped(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("\ufeff" + CSV))
        assert main(["convert", "-", "--stdout", "--date", "2025-04-23"]) == 0
        assert capsys.readouterr().out.count("\n") == 3

    def test_missing_columns_exit_code(self, tmp_path, capsys):
        src = tmp_path / "bad.csv"
        src.write_text("BSB,Name\n000-000,X\n")
        assert main(["convert", str(src)]) == 1
        assert "Missing required CSV columns" in capsys.readouterr().err
        assert not (tmp_path / "bad.aba").exists()

    def test_missing_input_file_exit_code(self, tmp_path, capsys):
        assert main(["convert", str(tmp_path / "absent.csv")]) == 1
        assert "cannot read" in capsys.readouterr().err

    def test_non_utf8_input_exit_code(self, tmp_path, capsys):
        src = tmp_path / "latin1.csv"
        src.write_bytes(CSV.replace("R SMITH", "José").encode("latin-1"))
        assert main(["convert", str(src)]) == 1
        assert "cannot read" in capsys.readouterr().err

    def test_out_of_range_amount_exit_code(self, tmp_path, capsys):
        src = tmp_path / "big.csv"
        src.write_text(CSV.replace("$12.00", "99999999999999999999999999999"))
        assert main(["convert", str(src)]) == 1
        assert "out of range" in capsys.readouterr().err


class TestConvertPrefix:
    @pytest.fixture
    def s3(self, monkeypatch):
        monkeypatch.setenv("CSV2ABA_S3_BUCKET", "cli-payments")
        monkeypatch.setenv("CSV2ABA_S3_REGION", "ap-southeast-2")
        with mock_aws():
            client = boto3.client("s3", region_name="ap-southeast-2")
            client.create_bucket(
                Bucket="cli-payments",
                CreateBucketConfiguration={"LocationConstraint": "ap-southeast-2"},
            )
            yield client

    def test_converts_dropzone_and_archives(self, s3, capsys):
        s3.put_object(Bucket="cli-payments", Key="dropzone/payroll.csv", Body=CSV.encode())
        code = main(["convert-prefix", "dropzone/", "outbox/", "--archive", "archive/",
                     "--date", "2025-04-23"])
        assert code == 0
        assert "dropzone/payroll.csv -> outbox/payroll.aba: 1 records" in capsys.readouterr().out
        body = s3.get_object(Bucket="cli-payments", Key="outbox/payroll.aba")["Body"].read()
        assert body.count(b"\n") == 3
        keys = [o["Key"] for o in s3.list_objects_v2(Bucket="cli-payments")["Contents"]]
        assert "archive/payroll.csv" in keys
        assert "dropzone/payroll.csv" not in keys

    def test_bad_file_exit_code(self, s3, capsys):
        s3.put_object(Bucket="cli-payments", Key="dropzone/bad.csv", Body=b"BSB\n000-000\n")
        assert main(["convert-prefix", "dropzone/", "outbox/"]) == 1
        assert "Missing required CSV columns" in capsys.readouterr().err
