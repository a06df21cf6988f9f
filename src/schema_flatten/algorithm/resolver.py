"""Child resolver: the data-tree children a code generator materialises for a node.

Given a schema tree such as::

    /interface                         (list)
    /interface/config/admin-state      (leaf)
    /interface/state/admin-state       (leaf)
    /interface/state/oper-state        (leaf)
    /interface/state/counters/in-pkts  (leaf)
    /interface/subinterfaces/subinterface (list)

an uncompressed policy maps each structural child straight through::

    /interface: config, state, subinterfaces

A compressed policy applies two look-aheads:

1. ``config`` and ``state`` containers are removed and their children lifted
   one level.  Leaves of the prioritised container are taken first; the
   deprioritised container only contributes names not already claimed, so
   operational-only leaves survive while mirrored leaves appear once.
2. A container whose only child is a list is skipped and the list becomes the
   direct child, removing the wrapper "stutter".

so the tree above becomes::

    /interface: admin-state, oper-state, counters, subinterface

In both modes choice and case nodes are never data tree elements: every
wrapper is flattened to its first non-wrapper descendants.  Policies that
exclude derived state additionally drop read-only nodes; read-only visibility
is inherited, so a read-only node has no qualifying children at all.

Resolution handles exactly one node.  Callers drive the recursion by resolving
each returned child in turn.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from schema_flatten.algorithm.guard import GuardMode, add_child
from schema_flatten.algorithm.policy import CompressionPolicy
from schema_flatten.algorithm.wrappers import find_first_non_choice_or_case
from schema_flatten.errors import NestedConfigStatePair, StructuralError
from schema_flatten.result import ResolvedChildSet

if TYPE_CHECKING:
    from schema_flatten.tree.nodes import SchemaNode

__all__ = ["resolve_children"]

logger = logging.getLogger(__name__)


class _ChildCollector:
    """Accumulators for a single resolve_children() invocation.

    Holds the child mapping, the error list and the priority-name whitelist.
    A new collector is created per call, so nothing leaks between calls.
    """

    def __init__(self) -> None:
        self.children: dict[str, SchemaNode] = {}
        self.errors: list[StructuralError] = []
        # Names lifted from the prioritised config/state container.  Their
        # duplicates in the deprioritised container are expected.
        self.priority_names: set[str] = set()

    def add(self, node: SchemaNode) -> None:
        self._record(add_child(self.children, node.name, node))

    def add_tolerant(self, node: SchemaNode) -> None:
        self._record(
            add_child(
                self.children,
                node.name,
                node,
                mode=GuardMode.TOLERANT,
                whitelist=self.priority_names,
            )
        )

    def add_flattened(self, node: SchemaNode) -> None:
        for data_node in find_first_non_choice_or_case(node):
            self.add(data_node)

    def _record(self, error: StructuralError | None) -> None:
        if error is not None:
            self.errors.append(error)

    def result(self) -> ResolvedChildSet:
        return ResolvedChildSet(children=self.children, errors=tuple(self.errors))


def resolve_children(node: SchemaNode, policy: CompressionPolicy) -> ResolvedChildSet:
    """Resolve the direct data-tree children of ``node`` under ``policy``.

    Args:
        node:   The schema node whose children are wanted.  Never mutated.
        policy: The compression policy to apply.

    Returns:
        A ResolvedChildSet holding the child mapping and every structural
        error found.  Errors never abort resolution: colliding names keep the
        first node seen.
    """
    policy = CompressionPolicy(policy)

    if policy.state_excluded and not node.is_config():
        logger.debug("%s is read-only; no children under %s", node.path, policy)
        return ResolvedChildSet(children={})

    names = policy.priority_names
    if names is None:
        resolved = _resolve_uncompressed(node, policy)
    else:
        # The other config/state container is the deprioritised one.
        resolved = _resolve_compressed(node, policy, priority=names[0])

    logger.debug(
        "Resolved %d children (%d errors) for %s under %s",
        len(resolved.children),
        len(resolved.errors),
        node.path or "/",
        policy,
    )
    return resolved


def _resolve_uncompressed(
    node: SchemaNode, policy: CompressionPolicy
) -> ResolvedChildSet:
    """Return the first-level children of ``node``, skipping only wrappers."""
    collector = _ChildCollector()
    for child in node.iter_children():
        if policy.state_excluded and not child.is_config():
            continue
        if child.is_choice_or_case():
            collector.add_flattened(child)
        else:
            collector.add(child)
    return collector.result()


def _processing_order(node: SchemaNode, priority: str) -> list[SchemaNode]:
    """Return the children of ``node`` with the prioritised container first.

    Mirrored leaves exist under both ``config`` and ``state``; processing the
    prioritised container first makes its nodes the ones handed to the
    generator, and fills the whitelist before the other container is seen.

    Only containers and lists schedule the prioritised child.  Under a choice
    or case it is left out of the order and never processed.
    """
    ordered: list[SchemaNode] = []
    if (node.is_container() or node.is_list()) and priority in node.children:
        ordered.append(node.children[priority])
    ordered.extend(child for child in node.iter_children() if child.name != priority)
    return ordered


def _resolve_compressed(
    node: SchemaNode, policy: CompressionPolicy, *, priority: str
) -> ResolvedChildSet:
    """Return the children of ``node`` with config/state and list wrappers elided."""
    collector = _ChildCollector()
    for child in _processing_order(node, priority):
        if policy.state_excluded and not child.is_config():
            continue

        if child.is_config_state():
            _lift_config_state(
                collector, child, is_priority=child.name == priority
            )
            continue

        if child.is_dir():
            grandchildren = list(child.iter_children())
            if len(grandchildren) == 1 and grandchildren[0].is_list():
                wrapped = grandchildren[0]
                if policy.state_excluded and not wrapped.is_config():
                    continue
                collector.add(wrapped)
            elif child.is_choice_or_case():
                collector.add_flattened(child)
            else:
                collector.add(child)
            continue

        # Leafrefs inside a list mirror the list keys.
        if node.is_list() and child.is_leafref():
            logger.debug("Skipping list key reference %s", child.path)
            continue
        collector.add(child)

    return collector.result()


def _lift_config_state(
    collector: _ChildCollector, container: SchemaNode, *, is_priority: bool
) -> None:
    """Lift the children of a config/state container one level up.

    Children of the prioritised container are added strictly and their names
    whitelisted.  Children of the deprioritised container are dropped when
    whitelisted and otherwise added tolerantly.
    """
    for member in container.iter_children():
        if member.is_config_state():
            collector.errors.append(
                NestedConfigStatePair(path=member.path, name=member.name)
            )

        data_nodes = find_first_non_choice_or_case(member)
        if is_priority:
            for data_node in data_nodes:
                collector.add(data_node)
                collector.priority_names.add(data_node.name)
            continue

        for data_node in data_nodes:
            if data_node.name in collector.priority_names:
                continue
            collector.add_tolerant(data_node)
