"""
테스트 전용 비교 도우미.
"""

from quizbank.schema.models import QuestionRecord, QuestionRequest, Response, Topic


def response_keys(responses) -> set[tuple[str, bool]]:
    return {r.key for r in responses}


def assert_question_matches(stored: QuestionRecord, question_id: int, expected: QuestionRequest) -> None:
    """
    id·난이도·주제·본문이 같고, 저장된 보기 집합이 기대 보기를 모두 포함하는지 확인.
    (저장본이 기대값의 상위 집합이면 통과)
    """
    assert stored.id == question_id
    assert stored.difficulty_rank == expected.difficulty_rank
    assert stored.topic == expected.topic
    assert stored.content == expected.content
    missing = response_keys(expected.responses) - response_keys(stored.responses)
    assert not missing, f"저장된 보기에 없음: {missing}"


def make_requests(topic: Topic, amount: int) -> list[QuestionRequest]:
    """주제별 문항 여러 개. 각 문항은 고유한 정답 보기 하나만 가진다."""
    return [
        QuestionRequest(
            topic=topic,
            difficulty_rank=5,
            content=f"Test{i}",
            responses=[Response(text=f"{topic.value}Response{i}", correct=True)],
        )
        for i in range(amount)
    ]
