"""Functional primitives for funcmode.

This package provides combinators that make explicit how a value is passed to
a function: by move, by reference, by mutable reference, or through one level
of indirection. Utilities hold no state beyond what the caller passes in, so
they compose freely into pipelines.
"""

from funcmode.functional.binding import (
    BoundMethod,
    bind_expression,
    bind_expression_lazy,
    bind_variable,
)
from funcmode.functional.dot import (
    Dottable,
    call_with,
    dot,
    dot_deref,
    dot_derefmut,
    dot_ref,
    dot_refmut,
)
from funcmode.functional.inverter import Not, NotMut, NotOnce, PredicateConsumedError
from funcmode.functional.iter_move import (
    FilterMove,
    all_by_move,
    any_by_move,
    filter_by_move,
    find_by_move,
    position_by_move,
    reverse_position_by_move,
)
from funcmode.functional.iter_ref import (
    MapIndirectMutRef,
    MapIndirectRef,
    MapMutRef,
    MapRef,
    map_by_indirect_mut_ref,
    map_by_indirect_ref,
    map_by_mut_ref,
    map_by_ref,
)
from funcmode.functional.stream import Stream

__all__ = [
    "BoundMethod",
    "bind_expression",
    "bind_expression_lazy",
    "bind_variable",
    "Dottable",
    "call_with",
    "dot",
    "dot_deref",
    "dot_derefmut",
    "dot_ref",
    "dot_refmut",
    "Not",
    "NotMut",
    "NotOnce",
    "PredicateConsumedError",
    "FilterMove",
    "all_by_move",
    "any_by_move",
    "filter_by_move",
    "find_by_move",
    "position_by_move",
    "reverse_position_by_move",
    "MapIndirectMutRef",
    "MapIndirectRef",
    "MapMutRef",
    "MapRef",
    "map_by_indirect_mut_ref",
    "map_by_indirect_ref",
    "map_by_mut_ref",
    "map_by_ref",
    "Stream",
]
