"""
공통 픽스처: 테스트마다 새 in-memory SQLite 스키마, 주제 행 준비, 세션·서비스.
"""

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from quizbank.db.connection import init_db
from quizbank.db.repositories.topic import topic_repo
from quizbank.schema.models import QuestionRequest, Response, Topic
from quizbank.services.question_bank import QuestionBankService


@pytest.fixture
def engine():
    """주제 행 없이 테이블만 있는 엔진. TestClient 스레드에서도 같은 연결을 쓴다."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(eng)
    yield eng
    SQLModel.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture
def session(engine):
    """모든 주제 행이 준비된 세션."""
    with Session(engine) as s:
        assert topic_repo.ensure_topics(s)
        yield s


@pytest.fixture
def service(engine):
    bank = QuestionBankService(engine)
    assert bank.init_catalog()
    return bank


@pytest.fixture
def make_request():
    """같은 text가 정답/오답으로 둘 다 있는 보기 4개짜리 요청."""

    def _make(topic: Topic = Topic.FOOD, response_text: str = "Test 1", content: str = "Test", rank: int = 5):
        return QuestionRequest(
            topic=topic,
            difficulty_rank=rank,
            content=content,
            responses=[
                Response(text="text1", correct=True),
                Response(text="text1", correct=False),
                Response(text=response_text, correct=False),
                Response(text="text2", correct=True),
            ],
        )

    return _make

