## Import every model so Base.metadata sees all tables
from learnpath.db.models.user import User
from learnpath.db.models.session_token import SessionToken
from learnpath.db.models.quiz_result import QuizResult
from learnpath.db.models.learning_path import LearningPath
from learnpath.db.models.event import Event

__all__ = ["User", "SessionToken", "QuizResult", "LearningPath", "Event"]
