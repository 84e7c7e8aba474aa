"""Combinators that make explicit how a value is passed to a function."""

from funcmode.core import Deref, DerefMut, DuplicateMode, PassMode, Slot, deref, deref_mut
from funcmode.functional import *  # noqa: F401,F403
from funcmode.functional import __all__ as _functional_all

__version__ = "0.1.0"

__all__ = [
    "Deref",
    "DerefMut",
    "DuplicateMode",
    "PassMode",
    "Slot",
    "deref",
    "deref_mut",
    *_functional_all,
]
