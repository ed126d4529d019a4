import json
from typing import Dict, Iterator, List, Optional, Tuple

from performscan.core.models import AnalysisResult, CallTree

SQL_MARKER = "(Uses EXEC SQL)"

def _preorder(tree: CallTree) -> Iterator[Tuple[Optional[CallTree], CallTree, int]]:
    """Yields (parent, node, depth) depth-first, children in PERFORM order."""
    stack = [(None, tree, 0)]
    while stack:
        parent, node, depth = stack.pop()
        yield parent, node, depth
        for child in reversed(node.children):
            stack.append((node, child, depth + 1))

# --- Text ---

def render_tree_lines(tree: CallTree, indent: int = 0) -> List[str]:
    """Indented pre-order listing of the tree, two spaces per level."""
    lines = []
    for _, node, depth in _preorder(tree):
        line = f"{' ' * (indent + 2 * depth)}- {node.name}"
        if node.uses_sql:
            line += f" {SQL_MARKER}"
        lines.append(line)
    return lines

def render_text(result: AnalysisResult) -> str:
    return "\n".join(["PERFORM Call Tree:"] + render_tree_lines(result.tree))

# --- JSON ---

def _tree_json(tree: CallTree, level: int) -> str:
    """
    Serializes a call tree as indented JSON without recursing, so trees
    deeper than the json/pydantic serializers' nesting limits still render.
    """
    chunks = []
    # Items are either a node to open or literal text to emit.
    stack = [(tree, level, "")]
    while stack:
        item, level, suffix = stack.pop()
        if isinstance(item, str):
            chunks.append(item)
            continue

        pad = " " * level
        inner = " " * (level + 2)
        chunks.append("{\n")
        chunks.append(f"{inner}\"name\": {json.dumps(item.name)},\n")
        chunks.append(f"{inner}\"uses_sql\": {json.dumps(item.uses_sql)},\n")
        if not item.children:
            chunks.append(f"{inner}\"children\": []\n{pad}}}{suffix}")
            continue

        chunks.append(f"{inner}\"children\": [\n")
        stack.append((f"{inner}]\n{pad}}}{suffix}", level, ""))
        last = len(item.children) - 1
        for i in range(last, -1, -1):
            stack.append((item.children[i], level + 4, ",\n" if i < last else "\n"))
            stack.append((" " * (level + 4), level, ""))

    return "".join(chunks)

def render_json(result: AnalysisResult) -> str:
    header = result.model_dump(mode="json", exclude={"tree"})
    lines = ["{"]
    for key, value in header.items():
        lines.append(f"  {json.dumps(key)}: {json.dumps(value)},")
    lines.append(f"  \"tree\": {_tree_json(result.tree, 2)}")
    lines.append("}")
    return "\n".join(lines)

# --- Mermaid ---

def render_mermaid(result: AnalysisResult) -> str:
    """
    Generates a MermaidJS flowchart of the call tree.
    Node ids are numbered in pre-order (n0, n1, ...) and labelled with the
    paragraph name. Paragraphs using EXEC SQL are given the 'sql' class.
    """
    graph_lines = ["graph TD;"]
    node_ids: Dict[str, str] = {}
    sql_names = set()
    edges = []
    seen_edges = set()

    for parent, node, _ in _preorder(result.tree):
        if node.name not in node_ids:
            node_ids[node.name] = f"n{len(node_ids)}"
        if node.uses_sql:
            sql_names.add(node.name)
        if parent is not None:
            edge = (parent.name, node.name)
            if edge not in seen_edges:
                seen_edges.add(edge)
                edges.append(edge)

    for caller, callee in edges:
        graph_lines.append(f"    {node_ids[caller]} --> {node_ids[callee]};")

    sql_nodes = []
    for name, node_id in node_ids.items():
        graph_lines.append(f"    {node_id}([{name}]);")
        if name in sql_names:
            sql_nodes.append(node_id)

    if sql_nodes:
        graph_lines.append("    classDef sql fill:#f96,stroke:#900;")
        graph_lines.append(f"    class {','.join(sql_nodes)} sql;")

    return "\n".join(graph_lines)

RENDERERS = {
    "text": render_text,
    "json": render_json,
    "mermaid": render_mermaid,
}
