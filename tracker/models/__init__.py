from .problem import DSAProblem
from .topic import SystemDesignTopic
from .interview import MockInterview
from .weak_area import WeakArea
from .study_session import StudySession

__all__ = [
    'DSAProblem',
    'SystemDesignTopic',
    'MockInterview',
    'WeakArea',
    'StudySession',
]
