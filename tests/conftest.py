import os, sys
from pathlib import Path

import pytest
from botocore.exceptions import ClientError


def pytest_configure():
    # project root on sys.path for imports like 'lambdas.lambda_get_user'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # dummy credentials so no test can reach a real account
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ.pop("AWS_PROFILE", None)
    os.environ.pop("DDB_TABLE", None)
    os.environ.pop("DDB_REGION", None)


class FakeTable:
    """In-memory stand-in for a boto3 DynamoDB Table keyed on userId."""

    def __init__(self, items=None, error=None):
        self.items = items or {}
        self.error = error
        self.calls = []

    def get_item(self, Key):
        self.calls.append(Key)
        if self.error:
            raise self.error
        envelope = {"ResponseMetadata": {"HTTPStatusCode": 200}}
        if Key["userId"] in self.items:
            envelope["Item"] = dict(self.items[Key["userId"]])
        return envelope


def throttled():
    return ClientError(
        {"Error": {"Code": "ProvisionedThroughputExceededException",
                   "Message": "Rate of requests exceeds the allowed throughput"}},
        "GetItem",
    )


@pytest.fixture
def store():
    return FakeTable({"abc": {"userId": "abc", "name": "Alice"},
                      "123": {"userId": "123", "name": "Bob"}})
