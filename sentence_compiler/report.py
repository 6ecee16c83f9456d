"""
sentc v0.1 - Report Generator
Renders a compilation result as plain text, or its AST as JSON.
"""

import json
from typing import List, Optional
from .ast_nodes import ASTNode, level_order


class ReportGenerator:
    def __init__(self):
        self._lines: List[str] = []

    def generate(self, result) -> str:
        """Return the text report for a CompilationResult."""
        self._lines = []

        self._section("Tokens:")
        for tok in result.tokens:
            self._lines.append(f"Token Type: {tok.type.name} ,Token Value: {tok.value}")

        self._section("Symbol Table:")
        self._lines.extend(result.symbol_table)

        if result.lexical_errors:
            self._section("Lexical Errors:")
            self._lines.extend(result.lexical_errors)

        if result.valid:
            self._emit_accepted(result)
        else:
            self._emit_rejected(result)

        return "\n".join(self._lines).lstrip("\n") + "\n"

    # ------------------------------------------------------------------ sections

    def _section(self, title: str) -> None:
        self._lines.append("")
        self._lines.append(title)

    def _emit_accepted(self, result) -> None:
        self._section("The string is valid.")
        self._lines.append("")
        self._lines.append(f"Accepted String: {result.accepted_string}")
        self._section("AST Structure:")
        for level in level_order(result.ast):
            self._lines.append(" ".join(level))

    def _emit_rejected(self, result) -> None:
        self._section("The string is invalid.")
        self._section("Parsing Errors:")
        self._lines.extend(result.syntax_errors)


def render_report(result) -> str:
    return ReportGenerator().generate(result)


# ── AST serialization (for --emit-ast) ────────────────────────────────────────

def ast_to_json(node: Optional[ASTNode]) -> str:
    return json.dumps(_node_to_dict(node), indent=2)


def _node_to_dict(node):
    if node is None:
        return None
    return {
        "label": node.label,
        "children": [_node_to_dict(child) for child in node.children],
    }
