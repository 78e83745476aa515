"""
AlphaId 명령줄 도구

사용법:
  alphaid encode 730087 1350997667
  alphaid decode 90F7qb --min-length 1
  alphaid encode 0 --min-length 5 --alphabet ABCDEFGHIJKLMNOPQRSTUVWXYZ
"""

import argparse
import logging
import sys

from alphaid.codec import AlphaId
from alphaid.config import settings_from_env


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alphaid",
        description="정수 <-> 짧은 ID 변환 (encode / decode)",
    )
    parser.add_argument("--alphabet", help="사용할 문자셋 (기본: ALPHAID_ALPHABET 또는 a-z0-9A-Z-_)")
    parser.add_argument("--min-length", type=int, help="코드 최소 길이 (기본: ALPHAID_MIN_LENGTH 또는 1)")
    parser.add_argument("--bits", type=int, help="정수 폭 (기본: ALPHAID_BITS 또는 128)")
    parser.add_argument("-v", "--verbose", action="store_true", help="디버그 로그 출력")
    sub = parser.add_subparsers(dest="command", required=True)

    p_encode = sub.add_parser("encode", help="정수를 코드로 변환합니다")
    p_encode.add_argument("numbers", nargs="+", type=int, help="변환할 정수")

    p_decode = sub.add_parser("decode", help="코드를 정수로 변환합니다")
    p_decode.add_argument("codes", nargs="+", help="변환할 코드")

    return parser


def _codec_from_args(args) -> AlphaId:
    # 명령줄 옵션이 환경 변수보다 우선 (검증은 합친 뒤 한 번만)
    settings = settings_from_env()
    builder = AlphaId.builder()
    builder.alphabet(settings["alphabet"] if args.alphabet is None else args.alphabet)
    builder.min_length(settings["min_length"] if args.min_length is None else args.min_length)
    builder.bits(settings["bits"] if args.bits is None else args.bits)
    return builder.build()


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        codec = _codec_from_args(args)
        if args.command == "encode":
            for num in args.numbers:
                print(codec.encode_str(num))
        else:
            for code in args.codes:
                print(codec.decode(code))
    except ValueError as e:  # AlphaIdError 포함
        print(f"오류: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
