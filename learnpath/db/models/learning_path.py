## Learning-path preferences captured after a quiz
import uuid
from datetime import datetime

from sqlalchemy import ForeignKey, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from learnpath.db.base import Base, UTCDateTime


class LearningPath(Base):
    __tablename__ = "learning_paths"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), index=True)

    score: Mapped[int] = mapped_column(Integer, nullable=False)
    topic: Mapped[str] = mapped_column(String(200), nullable=False)
    learning_style: Mapped[str] = mapped_column(String(50), nullable=False)  # Visual/Auditory/Kinesthetic
    difficulty: Mapped[str] = mapped_column(String(30), nullable=False)  # Easy/Medium/Hard
    time_commitment: Mapped[int] = mapped_column(Integer, nullable=False)  # hours per week
    domain_interest: Mapped[str] = mapped_column(String(100), nullable=False)

    created_at: Mapped[datetime] = mapped_column(UTCDateTime, server_default=func.now(), nullable=False)
