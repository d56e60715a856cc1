"""
topic 테이블 접근: 주제 id 조회, 주제 일괄 생성.
"""

import logging

from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from quizbank.db.models import TopicRow
from quizbank.schema.models import Topic

logger = logging.getLogger(__name__)

TOPIC_NOT_FOUND = -1


class TopicRepo:
    def resolve_id(self, session: Session, topic: Topic) -> int:
        """주제 id 반환. 행이 없으면 TOPIC_NOT_FOUND(-1). 조회 실패는 그대로 전파."""
        stmt = select(TopicRow.id).where(TopicRow.topic_name == topic.value)
        topic_id = session.exec(stmt).first()
        return TOPIC_NOT_FOUND if topic_id is None else topic_id

    def ensure_topics(self, session: Session, topics: list[Topic] | None = None) -> bool:
        """
        없는 주제만 한 번의 배치 insert로 생성 (이미 있으면 무시).
        Topic.MISSING은 건너뛴다. 실패 시 롤백 후 False.
        """
        wanted = [t.value for t in (topics if topics is not None else list(Topic)) if t is not Topic.MISSING]
        wanted = list(dict.fromkeys(wanted))
        try:
            existing = set(
                session.exec(select(TopicRow.topic_name).where(TopicRow.topic_name.in_(wanted))).all()
            ) if wanted else set()
            missing = [name for name in wanted if name not in existing]
            if missing:
                session.execute(insert(TopicRow), [{"topic_name": name} for name in missing])
            session.commit()
        except SQLAlchemyError:
            session.rollback()
            logger.exception("주제 생성 실패 topics=%s", wanted)
            return False
        logger.info("주제 준비 완료 생성=%d 기존=%d", len(missing), len(existing))
        return True


topic_repo = TopicRepo()
