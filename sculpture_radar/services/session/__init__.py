"""Session state with generation-token guarded commits."""

from .registry import SessionRegistry
from .state import SessionState

__all__ = ["SessionRegistry", "SessionState"]
