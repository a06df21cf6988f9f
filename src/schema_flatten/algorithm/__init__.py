"""algorithm subpackage: public API for the schema-flattening algorithm.

Provides the child resolver, the compression policy model, the choice/case
flattener and the duplicate guard.  Import from this module (not from
sub-modules directly) to stay on the stable public interface.

Example::

    from schema_flatten.algorithm import CompressionPolicy, resolve_children

    resolved = resolve_children(interface, CompressionPolicy.COMPRESSED_PREFER_CONFIG)
    resolved.names()   # ["admin-state", "counters", "oper-state"]
"""

from __future__ import annotations

from schema_flatten.algorithm.guard import GuardMode, add_child
from schema_flatten.algorithm.policy import CompressionPolicy, translate_policy
from schema_flatten.algorithm.resolver import resolve_children
from schema_flatten.algorithm.wrappers import find_first_non_choice_or_case

__all__ = [
    "CompressionPolicy",
    "GuardMode",
    "add_child",
    "find_first_non_choice_or_case",
    "resolve_children",
    "translate_policy",
]
