"""Application lifecycle (status state machine)"""

from .interfaces import IApplicationLifecycle
from .impl import ApplicationLifecycle, parse_transition_target
__all__ = ["IApplicationLifecycle", "ApplicationLifecycle", "parse_transition_target"]
