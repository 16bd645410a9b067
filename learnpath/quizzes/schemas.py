## Quiz + learning-path bodies. Field aliases keep the camelCase wire names.
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, conint


class AnsweredQuestion(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question_text: str = Field(min_length=1, alias="questionText")
    user_answer: str = Field(min_length=1, alias="userAnswer")
    correct_answer: str = Field(min_length=1, alias="correctAnswer")


class QuizResultIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(min_length=1)
    score: conint(ge=0)
    topic: str = Field(min_length=1)
    questions_answered: List[AnsweredQuestion] = Field(min_length=1, alias="questionsAnswered")


class QuizResultOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    score: int
    topic: str
    questions_answered: List[AnsweredQuestion] = Field(alias="questionsAnswered")
    date_taken: datetime = Field(alias="dateTaken")


class LearningPathIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(min_length=1)
    score: conint(ge=0)
    topic: str = Field(min_length=1)
    learning_style: str = Field(min_length=1, alias="LearningStyle")
    difficulty: str = Field(min_length=1)
    time_commitment: conint(ge=0)
    domain_interest: str = Field(min_length=1)


class LearningPathOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    score: int
    topic: str
    learning_style: str = Field(alias="LearningStyle")
    difficulty: str
    time_commitment: int
    domain_interest: str
    created_at: datetime = Field(alias="dateTaken")


class QuizResultsOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    quiz_results: List[QuizResultOut] = Field(alias="quizResults")


class StatusOut(BaseModel):
    success: bool
    message: str
