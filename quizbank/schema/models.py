"""
문항(Question)·보기(Response)·주제(Topic) 도메인 스키마.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Topic(str, Enum):
    """허용된 주제 목록. MISSING은 '해당 주제 없음'을 뜻하며 DB에 저장되지 않는다."""

    ARTS = "ARTS"
    CULTURE = "CULTURE"
    FOOD = "FOOD"
    GEOGRAPHY = "GEOGRAPHY"
    HISTORY = "HISTORY"
    SCIENCE = "SCIENCE"
    SPORTS = "SPORTS"
    MISSING = "MISSING"

    @classmethod
    def parse(cls, name: str) -> "Topic":
        """대소문자 구분 없이 주제 이름을 해석한다. 모르는 이름이면 ValueError."""
        try:
            return cls[name.strip().upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"unknown topic: {name!r}") from None

    @classmethod
    def persistable(cls) -> list["Topic"]:
        return [t for t in cls if t is not cls.MISSING]


class Response(BaseModel):
    """보기 하나. (text, correct) 쌍이 중복 제거 키다."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="보기 문장")
    correct: bool = Field(..., description="정답 여부")

    @property
    def key(self) -> tuple[str, bool]:
        return (self.text, self.correct)


def unique_responses(responses: list[Response]) -> list[Response]:
    """(text, correct) 기준 중복 제거. 처음 나온 순서를 유지한다."""
    seen: set[tuple[str, bool]] = set()
    result: list[Response] = []
    for r in responses:
        if r.key in seen:
            continue
        seen.add(r.key)
        result.append(r)
    return result


class QuestionRequest(BaseModel):
    """저장·수정 요청 형태."""

    topic: Topic
    difficulty_rank: int = Field(..., description="난이도 순위")
    content: str = Field(..., description="문항 본문")
    responses: list[Response] = Field(default_factory=list)

    @field_validator("topic", mode="before")
    @classmethod
    def parse_topic(cls, v):
        if isinstance(v, str):
            return Topic.parse(v)
        return v


class QuestionRecord(BaseModel):
    """조회 결과 형태 (저장된 문항)."""

    id: int
    topic: Topic
    difficulty_rank: int
    content: str
    responses: list[Response] = Field(default_factory=list)

    def to_request(self) -> QuestionRequest:
        return QuestionRequest(
            topic=self.topic,
            difficulty_rank=self.difficulty_rank,
            content=self.content,
            responses=list(self.responses),
        )
