from quizbank.db.connection import build_engine, get_engine, get_session, init_db
from quizbank.db.models import (
    QuestionResponseLink,
    QuestionRow,
    ResponseRow,
    TopicRow,
)
from quizbank.db.repositories.question import question_repo
from quizbank.db.repositories.response import response_repo
from quizbank.db.repositories.topic import topic_repo

__all__ = [
    "build_engine",
    "get_engine",
    "get_session",
    "init_db",
    "QuestionResponseLink",
    "QuestionRow",
    "ResponseRow",
    "TopicRow",
    "question_repo",
    "response_repo",
    "topic_repo",
]
