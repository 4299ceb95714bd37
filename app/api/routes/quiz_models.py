from __future__ import annotations

from pydantic import BaseModel, Field


class AnswerRequest(BaseModel):
    option_key: str = Field(min_length=1, max_length=16)


class JumpRequest(BaseModel):
    position: int = Field(ge=0)


class OptionResponse(BaseModel):
    key: str
    text: str
    label: str
    state: str
    enabled: bool


class NavigationEntryResponse(BaseModel):
    position: int = Field(ge=0)
    label: str
    selected: bool


class QuizScreenResponse(BaseModel):
    kind: str
    heading: str
    question_number: int | None = None
    total_questions: int | None = None
    options: list[OptionResponse] = Field(default_factory=list)
    feedback: str = ""
    feedback_tone: str = "none"
    topic: str | None = None
    next_label: str | None = None
    next_visible: bool = False
    navigation: list[NavigationEntryResponse] = Field(default_factory=list)
