"""Domain models for the quiz player.

Quiz definitions arrive from the authoring side and are validated, immutable
pydantic models. Everything a running session produces (answers, state, the
completion record) is a plain slotted dataclass owned by the session layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class TypeInMatchPolicy(str, Enum):
    """How typed answers are compared with the expected text."""

    EXACT = "exact"
    CONTAINS = "contains"


class QuizOption(BaseModel):
    """A selectable answer option of a choice question."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    is_correct: bool = False


class _QuestionBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    prompt: str
    media_url: str | None = None
    hint: str | None = None
    explanation: str | None = None
    time_limit_seconds: int | None = Field(default=None, gt=0)


class SingleChoiceQuestion(_QuestionBase):
    type: Literal["single-choice"] = "single-choice"
    options: tuple[QuizOption, ...] = ()


class MultiSelectQuestion(_QuestionBase):
    type: Literal["multi-select"] = "multi-select"
    options: tuple[QuizOption, ...] = ()


class TypeInQuestion(_QuestionBase):
    type: Literal["type-in"] = "type-in"
    expected_answer: str = ""


Question = Annotated[
    Union[SingleChoiceQuestion, MultiSelectQuestion, TypeInQuestion],
    Field(discriminator="type"),
]
ChoiceQuestion = Union[SingleChoiceQuestion, MultiSelectQuestion]


class QuizSettings(BaseModel):
    """Flags read once when a session starts."""

    model_config = ConfigDict(frozen=True)

    shuffle_questions: bool = False
    shuffle_options: bool = False
    timer_enabled: bool = False
    time_per_question: int | None = Field(default=None, gt=0)
    total_time_limit: int | None = Field(default=None, gt=0)  # seconds
    show_hints: bool = False
    show_explanations: bool = False
    type_in_match: TypeInMatchPolicy = TypeInMatchPolicy.EXACT


class Quiz(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    questions: tuple[Question, ...] = ()
    settings: QuizSettings = Field(default_factory=QuizSettings)


class SessionPhase(Enum):
    """Stage of a play-through."""

    INTRO = auto()
    PLAYING = auto()
    FEEDBACK = auto()
    RESULTS = auto()


@dataclass(slots=True)
class Answer:
    """Learner input for one question, finalized on submission."""

    question_id: str
    selected_option_ids: set[str] = field(default_factory=set)
    typed_answer: str = ""
    is_correct: bool | None = None
    has_submitted: bool = False
    time_spent_seconds: int = 0


@dataclass(slots=True)
class SessionState:
    """Mutable state of one play-through. Only the controller writes to it."""

    ordered_questions: tuple[Question, ...]
    phase: SessionPhase = SessionPhase.INTRO
    current_index: int = 0
    answers: dict[str, Answer] = field(default_factory=dict)
    streak: int = 0
    max_streak: int = 0
    total_time_spent_seconds: int = 0
    total_time_remaining: int | None = None
    hint_visible: bool = False


@dataclass(frozen=True, slots=True)
class QuestionResult:
    question_id: str
    is_correct: bool
    time_spent_seconds: int


@dataclass(frozen=True, slots=True)
class CompletionRecord:
    """Immutable summary handed to persistence/achievement collaborators."""

    quiz_id: str
    score: int
    total_questions: int
    percentage: int
    max_streak: int
    time_spent: int
    time_remaining: int | None
    per_question_results: tuple[QuestionResult, ...]


@dataclass(frozen=True, slots=True)
class QuestionReview:
    """One row of the results screen, in prepared order."""

    question: Question
    answer: Answer | None
    is_correct: bool


@dataclass(frozen=True, slots=True)
class SessionSummary:
    record: CompletionRecord
    reviews: tuple[QuestionReview, ...]
    previous_best_percentage: int | None = None
    is_new_best: bool = True
