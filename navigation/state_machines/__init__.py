from .session_state import SessionStateException, transition_to_idle, transition_to_navigating

__all__ = [
    "SessionStateException",
    "transition_to_idle",
    "transition_to_navigating",
]
