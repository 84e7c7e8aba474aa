"""Enumerations for duplication strategies and argument passing modes."""

import copy
import typing as tp
from enum import Enum


class DuplicateMode(Enum):
    """How move-tested adapters copy an element before handing it to a predicate."""

    SHALLOW = "shallow"
    DEEP = "deep"

    def duplicator(self) -> tp.Callable[[tp.Any], tp.Any]:
        """Return the copy function implementing this mode.

        Returns:
            ``copy.copy`` for SHALLOW, ``copy.deepcopy`` for DEEP.
        """
        mapping = {
            DuplicateMode.SHALLOW: copy.copy,
            DuplicateMode.DEEP: copy.deepcopy,
        }
        return mapping[self]


class PassMode(Enum):
    """How a receiver is handed to a function called as its method."""

    VALUE = "value"
    REF = "ref"
    MUT_REF = "mut_ref"
    INDIRECT_REF = "indirect_ref"
    INDIRECT_MUT_REF = "indirect_mut_ref"

    @property
    def is_indirect(self) -> bool:
        """Whether the function receives the receiver's indirection target."""
        return self in (PassMode.INDIRECT_REF, PassMode.INDIRECT_MUT_REF)
