"""
문항 은행 CLI.

사용 예:
  python -m quizbank.cli init-db
  python -m quizbank.cli save -i question.json
  python -m quizbank.cli find 3 --pretty
  python -m quizbank.cli search food
  python -m quizbank.cli update 3 -i question.json
  python -m quizbank.cli delete 3
로그는 stderr, JSON 결과는 stdout으로 출력된다.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from quizbank.core.config import settings
from quizbank.schema.models import QuestionRequest, Topic
from quizbank.services.question_bank import QuestionBankService

logger = logging.getLogger(__name__)


def load_payload(input_path: Path | None, use_stdin: bool) -> dict:
    if use_stdin:
        raw = sys.stdin.read()
        if not raw.strip():
            raise ValueError("stdin이 비어 있습니다.")
        return json.loads(raw)

    if not input_path:
        raise ValueError("--input 또는 --stdin 중 하나는 필요합니다.")

    if not input_path.exists():
        raise FileNotFoundError(f"파일을 찾을 수 없습니다: {input_path}")
    return json.loads(input_path.read_text(encoding="utf-8"))


def load_request(args: argparse.Namespace) -> QuestionRequest:
    input_path = Path(args.input).expanduser() if args.input else None
    return QuestionRequest.model_validate(load_payload(input_path, args.stdin))


def _add_input_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-i", "--input", help="문항 JSON 파일 경로 (topic, difficulty_rank, content, responses)")
    parser.add_argument("--stdin", action="store_true", help="표준 입력에서 JSON 읽기")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="퀴즈 문항 저장·조회·수정·삭제")
    parser.add_argument("--pretty", action="store_true", help="JSON 예쁘게 출력")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="테이블 생성 및 주제 행 준비")

    save = sub.add_parser("save", help="문항 저장")
    _add_input_args(save)

    find = sub.add_parser("find", help="id로 문항 조회")
    find.add_argument("question_id", type=int)

    search = sub.add_parser("search", help="주제로 문항 검색")
    search.add_argument("topic", help="주제 이름 (대소문자 무시)")

    sub.add_parser("list", help="전체 문항 조회")

    upd = sub.add_parser("update", help="id로 문항 수정")
    upd.add_argument("question_id", type=int)
    _add_input_args(upd)

    dele = sub.add_parser("delete", help="id로 문항 삭제")
    dele.add_argument("question_id", type=int)
    return parser


def run(args: argparse.Namespace, service: QuestionBankService) -> tuple[int, object]:
    """명령 실행. (종료 코드, 출력할 JSON 객체) 반환."""
    if args.command == "init-db":
        ok = service.init_catalog()
        return (0 if ok else 1), {"success": ok}

    if args.command == "save":
        question_id = service.save(load_request(args))
        if question_id is None:
            return 1, {"success": False}
        return 0, {"success": True, "id": question_id}

    if args.command == "find":
        record = service.find(args.question_id)
        if record is None:
            return 1, {"success": False, "message": f"문항 없음: {args.question_id}"}
        return 0, record.model_dump(mode="json")

    if args.command == "search":
        records = service.search(Topic.parse(args.topic))
        return 0, [r.model_dump(mode="json") for r in records]

    if args.command == "list":
        return 0, [r.model_dump(mode="json") for r in service.list_all()]

    if args.command == "update":
        ok = service.update(args.question_id, load_request(args))
        return (0 if ok else 1), {"success": ok}

    if args.command == "delete":
        ok = service.delete(args.question_id)
        return (0 if ok else 1), {"success": ok}

    raise ValueError(f"알 수 없는 명령: {args.command}")


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        code, out = run(args, QuestionBankService())
    except (ValueError, FileNotFoundError, json.JSONDecodeError, ValidationError) as exc:
        print(f"입력 처리 실패: {exc}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(out, ensure_ascii=False, indent=2 if args.pretty else None))
    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
