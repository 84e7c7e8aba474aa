"""Core capabilities, settings and types shared by the functional adapters."""

from funcmode.core.config import Settings, settings
from funcmode.core.enums import DuplicateMode, PassMode
from funcmode.core.indirection import Slot, deref, deref_mut, supports_deref
from funcmode.core.types import Deref, DerefMut

__all__ = [
    "Settings",
    "settings",
    "DuplicateMode",
    "PassMode",
    "Slot",
    "deref",
    "deref_mut",
    "supports_deref",
    "Deref",
    "DerefMut",
]
