# AI roadmap + report endpoints
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field, conint

from learnpath.agents.llm.base import LLMClient
from learnpath.agents.schemas import RoadmapDocument
from learnpath.agents.workflow import StudentProfile, generate_report, generate_roadmap
from learnpath.deps import get_llm

logger = logging.getLogger(__name__)
router = APIRouter()

_DEFAULT_PROFILE = StudentProfile()


class TopicIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    topic: str = Field(min_length=1, max_length=200)
    # free text, e.g. "3 hours" or "2 weeks"
    time_budget: str | None = Field(None, max_length=100, alias="timeBudget")


class RoadmapOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    roadmap: RoadmapDocument
    mermaid_diagram: str = Field(alias="mermaidDiagram")


class ReportIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    quiz_score: conint(ge=0) = Field(_DEFAULT_PROFILE.quiz_score, alias="quizScore")
    quiz_total: conint(ge=1) = Field(_DEFAULT_PROFILE.quiz_total, alias="quizTotal")
    learning_style: str = Field(_DEFAULT_PROFILE.learning_style, min_length=1, alias="learningStyle")
    weekly_minutes: conint(ge=1) = Field(_DEFAULT_PROFILE.weekly_minutes, alias="weeklyMinutes")


class ReportOut(BaseModel):
    success: bool = True
    report: str


def _roadmap_response(llm: LLMClient, body: TopicIn) -> RoadmapOut:
    time_budget = (body.time_budget or "").strip() or None
    document, diagram = generate_roadmap(llm, body.topic.strip(), time_budget)
    return RoadmapOut(roadmap=document, mermaid_diagram=diagram)


@router.post("/get-roadmap", response_model=RoadmapOut)
def get_roadmap(body: TopicIn, llm: LLMClient = Depends(get_llm)):
    return _roadmap_response(llm, body)


@router.post("/pictoflow", response_model=RoadmapOut)
def pictoflow(body: TopicIn, llm: LLMClient = Depends(get_llm)):
    return _roadmap_response(llm, body)


@router.post("/get-report", response_model=ReportOut)
def get_report(body: ReportIn | None = None, llm: LLMClient = Depends(get_llm)):
    body = body or ReportIn()
    profile = StudentProfile(
        quiz_score=body.quiz_score,
        quiz_total=body.quiz_total,
        learning_style=body.learning_style,
        weekly_minutes=body.weekly_minutes,
    )
    return ReportOut(report=generate_report(llm, profile))
