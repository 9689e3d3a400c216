"""Service layer: counter initialization and the interactive session."""

from tallyfile.services.recovery import (
    RecoveryChoice,
    ask_overwrite,
    initialize_counter,
    prompt_overwrite,
)
from tallyfile.services.session import (
    Action,
    SessionState,
    TallySession,
    bindings_from_config,
    key_hint,
)

__all__ = [
    "Action",
    "RecoveryChoice",
    "SessionState",
    "TallySession",
    "ask_overwrite",
    "bindings_from_config",
    "initialize_counter",
    "key_hint",
    "prompt_overwrite",
]
