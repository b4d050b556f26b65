"""Input layer: raw key decoding and mode-aware key dispatch.

`read_key` turns terminal bytes into tokens; `InputDispatcher` applies one
token at a time to an `AppSession`.
"""

from .dispatcher import InputDispatcher, QUIT_KEY
from .key_common import KeyContext, normalize_key
from .key_registry import KeyComboBinding, KeyComboRegistry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key
from .sequences import KeySequenceState

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "InputDispatcher",
    "QUIT_KEY",
    "KeyContext",
    "KeyComboBinding",
    "KeyComboRegistry",
    "KeySequenceState",
    "normalize_key",
]
