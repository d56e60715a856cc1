"""
FastAPI 앱: 문항 저장·조회·주제 검색·수정·삭제 API.
"""

import logging

from fastapi import FastAPI, HTTPException

from quizbank.api.schemas import OperationResponse, QuestionListResponse, QuestionSaveResponse
from quizbank.schema.models import QuestionRecord, QuestionRequest, Topic
from quizbank.services.question_bank import QuestionBankService

logger = logging.getLogger(__name__)


def create_app(service: QuestionBankService | None = None) -> FastAPI:
    bank = service or QuestionBankService()
    app = FastAPI(
        title="Quiz Bank API",
        description="퀴즈 문항(주제·난이도·본문·보기) 저장소",
        version="0.1.0",
    )

    @app.post(
        "/topics/init",
        response_model=OperationResponse,
        summary="테이블 생성 및 주제 행 준비",
    )
    def topics_init() -> OperationResponse:
        if not bank.init_catalog():
            raise HTTPException(status_code=500, detail="주제 초기화 실패")
        return OperationResponse(success=True, message="초기화 완료")

    @app.post(
        "/questions",
        response_model=QuestionSaveResponse,
        status_code=201,
        summary="문항 저장",
        description="보기는 (text, correct) 기준으로 중복 제거되어 여러 문항이 공유한다.",
    )
    def question_save(body: QuestionRequest) -> QuestionSaveResponse:
        question_id = bank.save(body)
        if question_id is None:
            raise HTTPException(status_code=400, detail="문항 저장 실패")
        return QuestionSaveResponse(id=question_id)

    @app.get("/questions", response_model=QuestionListResponse, summary="전체 문항 조회")
    def question_list() -> QuestionListResponse:
        return QuestionListResponse(questions=bank.list_all())

    @app.get("/questions/{question_id:int}", response_model=QuestionRecord, summary="id로 문항 조회")
    def question_find(question_id: int) -> QuestionRecord:
        record = bank.find(question_id)
        if record is None:
            raise HTTPException(status_code=404, detail="Question not found")
        return record

    @app.get(
        "/topics/{topic}/questions",
        response_model=QuestionListResponse,
        summary="주제로 문항 검색",
    )
    def question_search(topic: str) -> QuestionListResponse:
        try:
            parsed = Topic.parse(topic)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return QuestionListResponse(questions=bank.search(parsed))

    @app.put(
        "/questions/{question_id:int}",
        response_model=OperationResponse,
        summary="문항 수정",
        description="바뀐 필드만 반영. 주제는 달라졌을 때만, 보기 연결은 보기 집합이 달라졌을 때만 교체.",
    )
    def question_update(question_id: int, body: QuestionRequest) -> OperationResponse:
        if not bank.update(question_id, body):
            raise HTTPException(status_code=404, detail="문항이 없거나 수정 실패")
        return OperationResponse(success=True, message="수정 완료")

    @app.delete("/questions/{question_id:int}", response_model=OperationResponse, summary="문항 삭제")
    def question_delete(question_id: int) -> OperationResponse:
        if not bank.delete(question_id):
            logger.warning("삭제 실패 question_id=%s", question_id)
            raise HTTPException(status_code=500, detail="삭제 실패")
        return OperationResponse(success=True, message="삭제 완료")

    return app


app = create_app()
