import json
import os
import sys
from datetime import datetime

import boto3
from botocore.exceptions import ClientError

# --- 공통 모듈 설정 ---
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
from alphaid.config import from_env

# --- 리소스 초기화 ---
DYNAMO = boto3.resource("dynamodb")
COUNTER_TABLE_NAME = os.environ.get("COUNTER_TABLE_NAME")
MAPPING_TABLE_NAME = os.environ.get("TABLE_NAME")
_COUNTER_KEY = "url_id"

# ALPHAID_* 환경 변수로 문자셋/최소 길이 설정 (Cold Start 시 한 번만 생성)
CODEC = from_env()


def _get_next_id() -> int:
    table = DYNAMO.Table(COUNTER_TABLE_NAME)
    resp = table.update_item(
        Key={"counter_name": _COUNTER_KEY},
        UpdateExpression="SET #seq = if_not_exists(#seq, :zero) + :inc",
        ExpressionAttributeNames={"#seq": "seq"},
        ExpressionAttributeValues={":zero": 0, ":inc": 1},
        ReturnValues="UPDATED_NEW",
    )
    return int(resp["Attributes"]["seq"])


def _save_mapping(short_code: str, row_id: int, original_url: str) -> None:
    """매핑 데이터 저장 (shortCode -> 원본 URL)"""
    table = DYNAMO.Table(MAPPING_TABLE_NAME)
    table.put_item(
        Item={
            "shortCode": short_code,
            "id": row_id,
            "original_url": original_url,
            "created_at": datetime.now().isoformat(),
        }
    )


def handler(event, context):
    try:
        body = json.loads(event.get("body") or "{}")
        original_url = (body.get("url") or "").strip()

        if not original_url:
            return _response(400, {"error": "url 필드가 필요합니다."})

        # 1. ID 생성 및 코드 변환
        short_id = _get_next_id()
        short_code = CODEC.encode_str(short_id)
        print(f"[AlphaId 인코딩] ID {short_id} -> shortCode \"{short_code}\"")

        # 2. DB 저장
        _save_mapping(short_code, short_id, original_url)

        return _response(200, {
            "shortCode": short_code,
            "originalUrl": original_url,
        })

    except ClientError as e:
        print(f"AWS Error: {e.response['Error']['Message']}")
        return _response(500, {"error": "Internal Database Error"})
    except Exception as e:
        print(f"Unexpected Error: {str(e)}")
        return _response(500, {"error": str(e)})


def _response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": "*"
        },
        "body": json.dumps(body, ensure_ascii=False),
    }
