import logging
from typing import Optional, Set
from performscan.core.models import CallGraph, CallTree

logger = logging.getLogger(__name__)

def build_call_tree(graph: CallGraph, start: str, visited: Optional[Set[str]] = None) -> CallTree:
    """
    Expands the PERFORM graph into a tree rooted at `start`.

    `visited` is shared by the whole build, not copied per branch: a paragraph
    reached a second time anywhere in the traversal (depth-first, in PERFORM
    order) becomes a leaf. Its SQL flag is still reported.

    The walk uses an explicit stack, so chains of any length are handled;
    nodes are assembled bottom-up once all their children are built.
    """
    if visited is None:
        visited = set()

    if start in visited:
        logger.debug(f"'{start}' already visited, truncating.")
        return CallTree(name=start, uses_sql=graph.uses_sql(start))

    visited.add(start)
    # (name, remaining calls, children built so far)
    stack = [(start, iter(graph.calls_of(start)), [])]

    while True:
        name, calls, children = stack[-1]
        call = next(calls, None)

        if call is None:
            stack.pop()
            node = CallTree(name=name, uses_sql=graph.uses_sql(name), children=children)
            if not stack:
                return node
            stack[-1][2].append(node)
            continue

        if call in visited:
            logger.debug(f"'{call}' already visited, truncating.")
            children.append(CallTree(name=call, uses_sql=graph.uses_sql(call)))
            continue

        visited.add(call)
        stack.append((call, iter(graph.calls_of(call)), []))

def contains_sql(tree: CallTree) -> bool:
    """True if any paragraph in the tree uses EXEC SQL."""
    pending = [tree]
    while pending:
        node = pending.pop()
        if node.uses_sql:
            return True
        pending.extend(node.children)
    return False
