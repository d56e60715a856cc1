"""
response, question_response 테이블 접근.

같은 (text, correct) 쌍은 response 테이블에 한 행만 두고 여러 문항이 공유한다.
여기 메서드는 커밋하지 않는다. 트랜잭션 경계는 호출하는 QuestionRepo가 정한다.
"""

from sqlalchemy import and_, delete, insert, or_
from sqlmodel import Session, select

from quizbank.db.models import QuestionResponseLink, ResponseRow
from quizbank.schema.models import Response, unique_responses


class ResponseRepo:
    def find_ids(self, session: Session, responses: list[Response]) -> dict[tuple[str, bool], int]:
        """이미 저장된 보기의 (text, correct) → id. 조회는 한 번의 쿼리."""
        if not responses:
            return {}
        conditions = [
            and_(ResponseRow.text == r.text, ResponseRow.correct == r.correct) for r in responses
        ]
        stmt = select(ResponseRow.id, ResponseRow.text, ResponseRow.correct).where(or_(*conditions))
        return {(text, bool(correct)): rid for rid, text, correct in session.exec(stmt).all()}

    def save_responses(self, session: Session, responses: list[Response]) -> list[int]:
        """
        보기 id 목록 반환.

        1단계: 이미 있는 보기의 id를 입력 순서대로 모은다.
        2단계: 나머지를 한 번의 배치 insert로 저장하고 생성된 id를 뒤에 붙인다.
        결과 순서는 입력 순서와 다를 수 있다 (연결 집합만 의미가 있음).
        """
        unique = unique_responses(responses)
        found = self.find_ids(session, unique)

        ids: list[int] = []
        pending: list[dict] = []
        for r in unique:
            if r.key in found:
                ids.append(found[r.key])
            else:
                pending.append({"text": r.text, "correct": r.correct})

        if pending:
            stmt = insert(ResponseRow).returning(ResponseRow.id, sort_by_parameter_order=True)
            ids.extend(session.execute(stmt, pending).scalars().all())
        return ids

    def link(self, session: Session, question_id: int, response_ids: list[int]) -> None:
        """question_response 배치 insert."""
        rows = [
            {"question_id": question_id, "response_id": rid} for rid in dict.fromkeys(response_ids)
        ]
        if rows:
            session.execute(insert(QuestionResponseLink), rows)

    def delete_links_for_question(self, session: Session, question_id: int) -> None:
        """해당 문항의 연결 행 전부 삭제. 연결이 없어도 오류 아님."""
        session.execute(delete(QuestionResponseLink).where(QuestionResponseLink.question_id == question_id))

    def get_linked_ids(self, session: Session, question_id: int) -> list[int]:
        stmt = (
            select(QuestionResponseLink.response_id)
            .where(QuestionResponseLink.question_id == question_id)
            .order_by(QuestionResponseLink.response_id.asc())
        )
        return list(session.exec(stmt).all())


response_repo = ResponseRepo()
