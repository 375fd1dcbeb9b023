import boto3
import pytest
from botocore.stub import Stubber


@pytest.fixture
def s3():
    return boto3.client(
        "s3",
        region_name="us-west-2",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def stubber(s3):
    with Stubber(s3) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def report_csv(tmp_path, monkeypatch):
    """A 10-byte report.csv in the working directory, addressed by relative path."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "report.csv").write_bytes(b"a,b\n1,2\n3\n")
    return "report.csv"
