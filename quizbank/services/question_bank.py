"""
문항 은행 오케스트레이션: 호출마다 세션을 열고 repository에 위임한다.
CLI와 API가 이 서비스를 통해 DB에 접근한다.
"""

import logging

from sqlalchemy.engine import Engine

from quizbank.db.connection import get_session, init_db
from quizbank.db.repositories.question import question_repo
from quizbank.db.repositories.topic import topic_repo
from quizbank.schema.models import QuestionRecord, QuestionRequest, Topic

logger = logging.getLogger(__name__)


class QuestionBankService:
    """engine을 주지 않으면 설정(DATABASE_URL) 기반 기본 엔진을 쓴다."""

    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine

    def init_catalog(self, topics: list[Topic] | None = None) -> bool:
        """테이블 생성 + 주제 행 준비."""
        logger.info("스키마·주제 초기화 중")
        init_db(self._engine)
        with get_session(self._engine) as session:
            return topic_repo.ensure_topics(session, topics)

    def save(self, request: QuestionRequest) -> int | None:
        with get_session(self._engine) as session:
            return question_repo.save(session, request)

    def find(self, question_id: int) -> QuestionRecord | None:
        with get_session(self._engine) as session:
            return question_repo.find_by_id(session, question_id)

    def search(self, topic: Topic) -> list[QuestionRecord]:
        with get_session(self._engine) as session:
            return question_repo.search_by_topic(session, topic)

    def list_all(self) -> list[QuestionRecord]:
        with get_session(self._engine) as session:
            return question_repo.list_all(session)

    def update(self, question_id: int, request: QuestionRequest) -> bool:
        with get_session(self._engine) as session:
            return question_repo.update_by_id(session, question_id, request)

    def delete(self, question_id: int) -> bool:
        with get_session(self._engine) as session:
            return question_repo.delete_by_id(session, question_id)
