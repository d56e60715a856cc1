from quizbank.db.repositories.question import QuestionRepo, question_repo
from quizbank.db.repositories.response import ResponseRepo, response_repo
from quizbank.db.repositories.topic import TOPIC_NOT_FOUND, TopicRepo, topic_repo

__all__ = [
    "QuestionRepo",
    "question_repo",
    "ResponseRepo",
    "response_repo",
    "TOPIC_NOT_FOUND",
    "TopicRepo",
    "topic_repo",
]
