# Quiz results + learning-path preferences
import json
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from learnpath.auth.routes import normalize_email
from learnpath.deps import get_db
from learnpath.db.models.learning_path import LearningPath
from learnpath.db.models.quiz_result import QuizResult
from learnpath.db.models.user import User
from learnpath.quizzes.schemas import (
    AnsweredQuestion,
    LearningPathIn,
    LearningPathOut,
    QuizResultIn,
    QuizResultOut,
    QuizResultsOut,
    StatusOut,
)

logger = logging.getLogger(__name__)
router = APIRouter()


def _user_or_404(db: Session, email: str) -> User:
    user = db.query(User).filter(User.email == normalize_email(email)).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("/saveQuiz", response_model=StatusOut)
def save_quiz(body: QuizResultIn, db: Session = Depends(get_db)):
    user = _user_or_404(db, body.email)

    questions = [q.model_dump(by_alias=True) for q in body.questions_answered]
    db.add(
        QuizResult(
            user_id=user.id,
            score=body.score,
            topic=body.topic.strip(),
            questions_json=json.dumps(questions),
        )
    )
    db.commit()
    logger.info("Saved quiz result for user %s (topic=%r, score=%d)", user.id, body.topic, body.score)
    return {"success": True, "message": "Quiz results saved successfully"}


@router.get("/api/quiz-results/{email}", response_model=QuizResultsOut)
def quiz_results(email: str, db: Session = Depends(get_db)):
    user = _user_or_404(db, email)
    items = [
        QuizResultOut(
            score=r.score,
            topic=r.topic,
            questions_answered=[AnsweredQuestion.model_validate(q) for q in json.loads(r.questions_json)],
            date_taken=r.taken_at,
        )
        for r in user.quiz_results
    ]
    return QuizResultsOut(quiz_results=items)


@router.get("/user-count")
def user_count(db: Session = Depends(get_db)):
    count = db.query(func.count(User.id)).scalar()
    return {"count": count}


@router.post("/savePath", response_model=StatusOut)
def save_path(body: LearningPathIn, db: Session = Depends(get_db)):
    user = _user_or_404(db, body.email)

    db.add(
        LearningPath(
            user_id=user.id,
            score=body.score,
            topic=body.topic.strip(),
            learning_style=body.learning_style,
            difficulty=body.difficulty,
            time_commitment=body.time_commitment,
            domain_interest=body.domain_interest,
        )
    )
    db.commit()
    return {"success": True, "message": "Learning path saved successfully"}


@router.get("/api/paths/{email}", response_model=List[LearningPathOut])
def learning_paths(email: str, db: Session = Depends(get_db)):
    user = _user_or_404(db, email)
    rows = (
        db.query(LearningPath)
        .filter(LearningPath.user_id == user.id)
        .order_by(LearningPath.created_at.desc())
        .all()
    )
    return [
        LearningPathOut(
            score=p.score,
            topic=p.topic,
            learning_style=p.learning_style,
            difficulty=p.difficulty,
            time_commitment=p.time_commitment,
            domain_interest=p.domain_interest,
            created_at=p.created_at,
        )
        for p in rows
    ]
