"""Choice/case flattening.

Choice and case nodes group alternatives in the schema but are not data tree
elements, so they never become generated fields.  Choices nest
(/choice-a/choice-b/case-a/leaf) and a case may hold several data nodes, so
the flattener descends through any number of wrapper levels and returns the
first non-wrapper nodes of every branch.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from schema_flatten.tree.nodes import SchemaNode

__all__ = ["find_first_non_choice_or_case"]


def find_first_non_choice_or_case(node: SchemaNode) -> list[SchemaNode]:
    """Return the first descendants of ``node`` that are not choice or case nodes.

    Branches are visited in declaration order and the search never goes past
    the first non-wrapper node of a branch.  For a node that is not itself a
    wrapper the result is ``[node]``.

    Example::

        /container/choice/case-one/leaf-a
        /container/choice/case-two/leaf-b

        find_first_non_choice_or_case(choice)  # [leaf-a, leaf-b]

    Args:
        node: Any schema node, normally a choice or case.

    Returns:
        Data nodes in declaration order.  Never contains a choice or case node.
    """
    if not node.is_choice_or_case():
        return [node]

    found: list[SchemaNode] = []
    for child in node.iter_children():
        found.extend(find_first_non_choice_or_case(child))
    return found
