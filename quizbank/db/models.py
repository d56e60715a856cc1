"""
SQLModel 테이블 정의.
question ↔ response 는 question_response 연결 테이블로 다대다.
"""

from sqlalchemy import Column, Text, UniqueConstraint
from sqlmodel import Field, SQLModel


class TopicRow(SQLModel, table=True):
    """주제. topic_name은 Topic enum 이름 그대로 저장."""

    __tablename__ = "topic"

    id: int | None = Field(default=None, primary_key=True)
    topic_name: str = Field(nullable=False, unique=True, index=True)


class ResponseRow(SQLModel, table=True):
    """보기. 같은 (text, correct) 쌍은 한 행만 존재한다."""

    __tablename__ = "response"
    __table_args__ = (UniqueConstraint("text", "correct"),)

    id: int | None = Field(default=None, primary_key=True)
    text: str = Field(nullable=False)
    correct: bool = Field(nullable=False)


class QuestionRow(SQLModel, table=True):
    __tablename__ = "question"

    id: int | None = Field(default=None, primary_key=True)
    difficulty_rank_number: int = Field(nullable=False)
    content: str = Field(sa_column=Column(Text, nullable=False))
    topic_id: int = Field(foreign_key="topic.id", nullable=False)


class QuestionResponseLink(SQLModel, table=True):
    """question_response 연결 행."""

    __tablename__ = "question_response"

    question_id: int = Field(foreign_key="question.id", primary_key=True)
    response_id: int = Field(foreign_key="response.id", primary_key=True)
