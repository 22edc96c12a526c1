"""Root controller and intent handling."""

from .controller import RootController
from .intents import Intent, IntentError, parse_intent, parse_script

__all__ = [
    "RootController",
    "Intent",
    "IntentError",
    "parse_intent",
    "parse_script",
]
