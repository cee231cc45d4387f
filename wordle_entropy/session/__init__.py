from .state import GuessRecord, SessionSnapshot, SessionState
from .session import DEFAULT_TOP_N, Session

__all__ = ["GuessRecord", "SessionSnapshot", "SessionState", "DEFAULT_TOP_N", "Session"]
