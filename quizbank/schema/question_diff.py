"""
수정 요청과 저장된 문항 비교: topic, difficulty_rank, content, responses 4개 필드만 본다.
"""

from enum import Enum

from quizbank.schema.models import QuestionRequest


class QuestionField(str, Enum):
    TOPIC = "topic"
    DIFFICULTY_RANK = "difficulty_rank"
    CONTENT = "content"
    RESPONSES = "responses"


def find_changed_fields(new: QuestionRequest, old: QuestionRequest) -> frozenset[QuestionField]:
    """
    값이 다른 필드 집합.
    responses는 (text, correct) 집합으로 비교한다 (순서·중복 무시).
    """
    changed: set[QuestionField] = set()
    if new.topic != old.topic:
        changed.add(QuestionField.TOPIC)
    if new.difficulty_rank != old.difficulty_rank:
        changed.add(QuestionField.DIFFICULTY_RANK)
    if new.content != old.content:
        changed.add(QuestionField.CONTENT)
    if {r.key for r in new.responses} != {r.key for r in old.responses}:
        changed.add(QuestionField.RESPONSES)
    return frozenset(changed)
