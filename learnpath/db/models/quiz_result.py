## Quiz attempts per user
import uuid
from datetime import datetime

from sqlalchemy import ForeignKey, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from learnpath.db.base import Base, UTCDateTime


class QuizResult(Base):
    __tablename__ = "quiz_results"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), index=True)

    score: Mapped[int] = mapped_column(Integer, nullable=False)
    topic: Mapped[str] = mapped_column(String(200), nullable=False)
    questions_json: Mapped[str] = mapped_column(Text, nullable=False)  # list of {questionText, userAnswer, correctAnswer}

    taken_at: Mapped[datetime] = mapped_column(UTCDateTime, server_default=func.now(), nullable=False)

    user: Mapped["User"] = relationship(back_populates="quiz_results")
