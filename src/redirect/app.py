import json
import os
import sys

import boto3

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
from alphaid.config import from_env
from alphaid.errors import AlphaIdError

# 전역 변수 레벨에서 리소스 초기화 (Cold Start 성능 최적화)
_DYNAMO = boto3.resource("dynamodb")
_MAPPING_TABLE_NAME = os.environ.get("TABLE_NAME", "")
_MAPPING_TABLE = _DYNAMO.Table(_MAPPING_TABLE_NAME) if _MAPPING_TABLE_NAME else None

# create 함수와 같은 ALPHAID_* 설정을 사용해야 합니다
_CODEC = from_env()


def _canonical_code(short_code: str) -> str | None:
    """shortCode 디코딩 후 다시 인코딩. 문자셋/패딩 규칙에 맞지 않으면 None."""
    try:
        row_id = _CODEC.decode(short_code)
    except AlphaIdError as e:
        print(f"Invalid shortCode {short_code!r}: {e}")
        return None
    return _CODEC.encode_str(row_id)


def _get_mapping_item(short_code: str) -> dict | None:
    """DynamoDB에서 shortCode에 해당하는 매핑 아이템 조회."""
    if not _MAPPING_TABLE:
        raise ValueError("TABLE_NAME is not set in environment variables")
    resp = _MAPPING_TABLE.get_item(Key={"shortCode": short_code})
    return resp.get("Item")


def _response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def _redirect_response(location: str) -> dict:
    return {
        "statusCode": 302,
        "headers": {
            "Location": location,
            "Cache-Control": "no-cache",
        },
        "body": "",
    }


def handler(event, context):
    try:
        short_code = (event.get("pathParameters") or {}).get("shortCode", "").strip()
        if not short_code:
            return _response(400, {"error": "shortCode is required"})

        # 발급될 수 없는 코드는 DB 조회 없이 404
        short_code = _canonical_code(short_code)
        if short_code is None:
            return _response(404, {"error": "URL not found"})

        item = _get_mapping_item(short_code)
        if not item:
            return _response(404, {"error": "URL not found"})

        original_url = item.get("original_url")
        if not original_url:
            return _response(404, {"error": "URL not found"})

        return _redirect_response(original_url)

    except Exception as e:
        print(f"Handler Error: {e}")
        return _response(500, {"error": "Internal Server Error"})
