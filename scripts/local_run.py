#!/usr/bin/env python3
"""
로컬 URL 단축 확인용 스크립트 (AWS 없이 SQLite + alphaid)
  python3 scripts/local_run.py create "https://긴주소.com"
  python3 scripts/local_run.py get <short_code>
코드 형식은 ALPHAID_* 환경 변수, DB 위치는 SURL_DB_PATH 로 변경
"""

import argparse
import os
import sqlite3
import sys
from contextlib import closing
from typing import Optional

_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(_PROJECT_ROOT, "src"))

from alphaid import AlphaIdError
from alphaid.config import from_env

DB_PATH = os.environ.get("SURL_DB_PATH", os.path.join(_PROJECT_ROOT, "local_links.db"))
CODEC = from_env()

_SCHEMA = "CREATE TABLE IF NOT EXISTS links (id INTEGER PRIMARY KEY AUTOINCREMENT, original_url TEXT NOT NULL)"


def _connect() -> sqlite3.Connection:
    conn = sqlite3.connect(DB_PATH)
    conn.execute(_SCHEMA)
    return conn


def create_short_url(url: str) -> str:
    """행 id를 AlphaId 코드로 변환해 반환"""
    url = (url or "").strip()
    if not url:
        raise ValueError("URL을 입력해 주세요.")

    with closing(_connect()) as conn, conn:
        row_id = conn.execute("INSERT INTO links (original_url) VALUES (?)", (url,)).lastrowid
    short_code = CODEC.encode_str(row_id)
    print(f"  [encode] id {row_id} -> {short_code!r}")
    return short_code


def get_original_url(short_code: str) -> Optional[str]:
    """코드 -> 원본 URL. 형식 오류나 미등록 코드는 None"""
    try:
        row_id = CODEC.decode((short_code or "").strip())
    except AlphaIdError as e:
        print(f"  [decode] {short_code!r}: {e}")
        return None
    print(f"  [decode] {short_code!r} -> id {row_id}")

    with closing(_connect()) as conn:
        row = conn.execute("SELECT original_url FROM links WHERE id = ?", (row_id,)).fetchone()
    return row[0] if row else None


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="로컬 URL 단축: create(저장) / get(조회)")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("create", help="URL 저장 후 short_code 출력").add_argument("url")
    sub.add_parser("get", help="short_code로 원본 URL 조회").add_argument("short_code")
    args = parser.parse_args(argv)

    if args.command == "create":
        try:
            print(f"short_code: {create_short_url(args.url)}")
        except ValueError as e:
            print(f"오류: {e}", file=sys.stderr)
            return 1
        return 0

    url = get_original_url(args.short_code)
    if url is None:
        print("찾을 수 없습니다.", file=sys.stderr)
        return 1
    print(url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
