"""
SQLModel 엔진·세션 (PostgreSQL).

하나의 Session은 한 호출자만 사용한다. 여러 스레드가 같은 세션을 공유하면 안 된다.
"""

from contextlib import contextmanager
from functools import lru_cache
from typing import Generator

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from quizbank.core.config import Settings, settings
from quizbank.db.models import (  # noqa: F401 - 테이블 등록
    QuestionResponseLink,
    QuestionRow,
    ResponseRow,
    TopicRow,
)


def build_engine(config: Settings) -> Engine:
    """설정 값으로 엔진 생성. 실제 DB 연결은 첫 사용 시점에 발생한다."""
    return create_engine(config.database_url(), echo=config.DATABASE_ECHO)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    return build_engine(settings)


def init_db(engine: Engine | None = None) -> None:
    """테이블이 없으면 생성."""
    SQLModel.metadata.create_all(engine or get_engine())


@contextmanager
def get_session(engine: Engine | None = None) -> Generator[Session, None, None]:
    with Session(engine or get_engine()) as session:
        yield session
