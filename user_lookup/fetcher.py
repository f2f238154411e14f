import os, sys, json, boto3
from dataclasses import dataclass
from botocore.exceptions import ClientError

TABLE_NAME = os.environ.get("DDB_TABLE", "UserData")
REGION = os.environ.get("DDB_REGION", "ap-south-1")
KEY_FIELD = "userId"


def make_table(table_name=TABLE_NAME, region=REGION):
    return boto3.resource("dynamodb", region_name=region).Table(table_name)


def coerce_key(event, key_field=KEY_FIELD):
    # keys use the JSON spelling of scalars; an absent field becomes "undefined"
    if not isinstance(event, dict) or key_field not in event:
        return "undefined"
    value = event[key_field]
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def error_value(err):
    value = {"errorType": type(err).__name__, "errorMessage": str(err)}
    if isinstance(err, ClientError):
        value["errorCode"] = err.response.get("Error", {}).get("Code")
    return value


@dataclass(frozen=True)
class Found:
    key: str
    item: dict

    def to_response(self):
        return self.item


@dataclass(frozen=True)
class NotFound:
    key: str

    def to_response(self):
        return None


@dataclass(frozen=True)
class Failed:
    key: str
    error: Exception

    def as_value(self):
        return error_value(self.error)

    def to_response(self):
        return self.as_value()


class RecordFetcher:
    """
    Point-lookup of one record by primary key.

    The table resource is built once per process and handed in here;
    the fetcher only issues get_item calls through it.
    """

    def __init__(self, table, key_field=KEY_FIELD):
        self.table = table
        self.key_field = key_field

    def lookup(self, event):
        key = coerce_key(event, self.key_field)
        try:
            data = self.table.get_item(Key={self.key_field: key})
        except Exception as e:
            print("Unable to retrieve data:", repr(e), file=sys.stderr, flush=True)
            return Failed(key, e)

        print("DynamoDB Response:", json.dumps(data, default=str), flush=True)
        if "Item" in data:
            item = data["Item"]
            print("User data retrieved:", item, flush=True)
            return Found(key, item)

        print(f"No user data found for {self.key_field}:", key, flush=True)
        return NotFound(key)

    def fetch(self, event):
        # record dict, None, or an error value dict
        return self.lookup(event).to_response()
