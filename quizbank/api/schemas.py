"""
API 요청/응답 스키마.
"""

from pydantic import BaseModel, Field

from quizbank.schema.models import QuestionRecord


class QuestionSaveResponse(BaseModel):
    """문항 저장 응답."""

    id: int = Field(..., description="생성된 문항 id")


class QuestionListResponse(BaseModel):
    questions: list[QuestionRecord] = Field(..., description="문항 목록")


class OperationResponse(BaseModel):
    """수정·삭제·초기화 결과."""

    success: bool = Field(..., description="성공 여부")
    message: str = Field(..., description="안내 메시지")
