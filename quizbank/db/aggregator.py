"""
조인 쿼리의 평평한 행(문항 × 보기 1쌍당 1행)을 문항 단위로 묶는다.
"""

from typing import Any, Iterable, Mapping

from quizbank.schema.models import QuestionRecord, Response, Topic


def aggregate_rows(rows: Iterable[Mapping[str, Any]]) -> list[QuestionRecord]:
    """
    question_id별 QuestionRecord 목록 (처음 나온 순서).

    - topic/difficulty/content는 해당 id의 첫 행 값을 쓴다. 이후 행의 다른 값은 무시.
    - 보기는 행 순서대로 누적. text가 NULL인 행(연결 없는 문항)은 보기를 더하지 않는다.
    - 주제 이름을 해석할 수 없는 행이 하나라도 있으면 ValueError.
    """
    questions: dict[int, QuestionRecord] = {}
    for row in rows:
        question_id = int(row["question_id"])
        topic = Topic.parse(row["topic"])

        record = questions.get(question_id)
        if record is None:
            record = QuestionRecord(
                id=question_id,
                topic=topic,
                difficulty_rank=row["difficulty"],
                content=row["content"],
            )
            questions[question_id] = record

        if row["text"] is not None:
            record.responses.append(Response(text=row["text"], correct=bool(row["correct"])))
    return list(questions.values())
