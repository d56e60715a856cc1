"""
question 테이블 접근: 저장, 조회, 주제 검색, 부분 수정, 삭제.

공개 메서드는 각각 하나의 트랜잭션으로 실행된다. 중간 단계가 실패하면 전체를 롤백하고
로그를 남긴 뒤 None / [] / False 를 반환한다 (예외를 밖으로 던지지 않음).
"""

import logging

from sqlalchemy import Select, delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from quizbank.db.aggregator import aggregate_rows
from quizbank.db.models import QuestionResponseLink, QuestionRow, ResponseRow, TopicRow
from quizbank.db.repositories.response import ResponseRepo, response_repo
from quizbank.db.repositories.topic import TOPIC_NOT_FOUND, TopicRepo, topic_repo
from quizbank.schema.models import QuestionRecord, QuestionRequest, Topic
from quizbank.schema.question_diff import QuestionField, find_changed_fields

logger = logging.getLogger(__name__)


class UnresolvedTopicError(LookupError):
    """topic 테이블에 해당 주제 행이 없음."""


def _question_select() -> Select:
    """문항 × 보기 조인. 보기가 없는 문항도 text/correct가 NULL인 한 행으로 나온다."""
    return (
        select(
            QuestionRow.id.label("question_id"),
            TopicRow.topic_name.label("topic"),
            QuestionRow.difficulty_rank_number.label("difficulty"),
            QuestionRow.content.label("content"),
            ResponseRow.text.label("text"),
            ResponseRow.correct.label("correct"),
        )
        .select_from(QuestionRow)
        .join(TopicRow, QuestionRow.topic_id == TopicRow.id)
        .outerjoin(QuestionResponseLink, QuestionResponseLink.question_id == QuestionRow.id)
        .outerjoin(ResponseRow, QuestionResponseLink.response_id == ResponseRow.id)
        .order_by(QuestionRow.id.asc(), ResponseRow.id.asc())
    )


class QuestionRepo:
    def __init__(self, topics: TopicRepo = topic_repo, responses: ResponseRepo = response_repo) -> None:
        self._topics = topics
        self._responses = responses

    # ----- 내부 단계 (예외 전파) -----

    def _fetch(self, session: Session, stmt: Select) -> list[QuestionRecord]:
        rows = session.execute(stmt).mappings().all()
        return aggregate_rows(rows)

    def _load(self, session: Session, question_id: int) -> QuestionRecord | None:
        records = self._fetch(session, _question_select().where(QuestionRow.id == question_id))
        return records[0] if records else None

    def _resolve_topic(self, session: Session, topic: Topic) -> int:
        topic_id = self._topics.resolve_id(session, topic)
        if topic_id == TOPIC_NOT_FOUND:
            raise UnresolvedTopicError(f"topic row not found: {topic.value}")
        return topic_id

    def _read(self, session: Session, stmt: Select, what: str) -> list[QuestionRecord]:
        try:
            return self._fetch(session, stmt)
        except ValueError:
            # 주제 이름을 해석할 수 없는 행이 하나라도 있으면 조회 결과 전체를 버린다
            logger.warning("알 수 없는 주제가 포함된 행 → 빈 결과 반환 (%s)", what, exc_info=True)
        except SQLAlchemyError:
            session.rollback()
            logger.exception("문항 조회 실패 (%s)", what)
        return []

    # ----- 공개 연산 -----

    def save(self, session: Session, request: QuestionRequest) -> int | None:
        """보기 저장 → 주제 id 조회 → 문항 insert → 연결. 생성된 문항 id, 실패 시 None."""
        try:
            response_ids = self._responses.save_responses(session, request.responses)
            topic_id = self._resolve_topic(session, request.topic)

            row = QuestionRow(
                difficulty_rank_number=request.difficulty_rank,
                content=request.content,
                topic_id=topic_id,
            )
            session.add(row)
            session.flush()
            question_id = row.id

            self._responses.link(session, question_id, response_ids)
            session.commit()
        except (SQLAlchemyError, UnresolvedTopicError):
            session.rollback()
            logger.exception("문항 저장 실패 topic=%s", request.topic.value)
            return None
        logger.info("문항 저장 완료 question_id=%s 보기 수=%d", question_id, len(response_ids))
        return question_id

    def find_by_id(self, session: Session, question_id: int) -> QuestionRecord | None:
        records = self._read(session, _question_select().where(QuestionRow.id == question_id), f"id={question_id}")
        return records[0] if records else None

    def search_by_topic(self, session: Session, topic: Topic) -> list[QuestionRecord]:
        """주제 이름이 정확히 일치하는 문항들. 없으면 빈 리스트."""
        stmt = _question_select().where(TopicRow.topic_name == topic.value)
        return self._read(session, stmt, f"topic={topic.value}")

    def list_all(self, session: Session) -> list[QuestionRecord]:
        return self._read(session, _question_select(), "all")

    def update_by_id(self, session: Session, question_id: int, request: QuestionRequest) -> bool:
        """
        저장된 문항과 비교해 필요한 부분만 수정.

        - difficulty_rank_number, content: 항상 새 값으로 쓴다.
        - topic_id: 주제가 바뀐 경우에만.
        - 연결: 보기 집합이 바뀐 경우에만 기존 연결 삭제 → 보기 저장 → 재연결.
        """
        try:
            current = self._load(session, question_id)
            if current is None:
                logger.info("수정 대상 문항 없음 question_id=%s", question_id)
                return False

            changed = find_changed_fields(request, current.to_request())
            values = {
                "difficulty_rank_number": request.difficulty_rank,
                "content": request.content,
            }
            if QuestionField.TOPIC in changed:
                values["topic_id"] = self._resolve_topic(session, request.topic)

            session.execute(update(QuestionRow).where(QuestionRow.id == question_id).values(**values))

            if QuestionField.RESPONSES in changed:
                self._responses.delete_links_for_question(session, question_id)
                response_ids = self._responses.save_responses(session, request.responses)
                self._responses.link(session, question_id, response_ids)
            session.commit()
        except (SQLAlchemyError, UnresolvedTopicError, ValueError):
            session.rollback()
            logger.exception("문항 수정 실패 question_id=%s", question_id)
            return False
        logger.info(
            "문항 수정 완료 question_id=%s 변경=%s",
            question_id,
            sorted(f.value for f in changed),
        )
        return True

    def delete_by_id(self, session: Session, question_id: int) -> bool:
        """
        연결 행 삭제 후 문항 삭제. 존재 여부는 확인하지 않으므로
        없는 id여도 문장 실행에 성공하면 True.
        """
        try:
            self._responses.delete_links_for_question(session, question_id)
            session.execute(delete(QuestionRow).where(QuestionRow.id == question_id))
            session.commit()
        except SQLAlchemyError:
            session.rollback()
            logger.exception("문항 삭제 실패 question_id=%s", question_id)
            return False
        return True


question_repo = QuestionRepo()
