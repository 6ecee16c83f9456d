"""
sentc v0.1 - Compiler Orchestrator
Runs the lexing and parsing phases over one sentence and collects every output.
"""

import sys
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from .lexer import Lexer, Token, ErrorLog, tokenize
from .parser import Parser, join_accepted
from .ast_nodes import ASTNode
from .report import render_report, ast_to_json


@dataclass
class CompilationResult:
    source: str
    tokens: List[Token] = field(default_factory=list)
    symbol_table: List[str] = field(default_factory=list)
    lexical_errors: List[str] = field(default_factory=list)
    syntax_errors: List[str] = field(default_factory=list)
    ast: Optional[ASTNode] = None
    accepted_tokens: List[Token] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return self.ast is not None and not self.syntax_errors

    @property
    def accepted_string(self) -> str:
        return join_accepted(self.accepted_tokens) if self.valid else ""


def compile_source(source: str, debug: bool = False) -> CompilationResult:
    """
    Lex and parse a single sentence.

    Parameters
    ----------
    source : the sentence text
    debug  : print each phase summary to stderr

    Returns
    -------
    CompilationResult; `ast` is None when the sentence was rejected.
    """

    def log(msg):
        if debug:
            print(f"[sentc] {msg}", file=sys.stderr)

    # ── Phase 1: Lexical Analysis ─────────────────────────────────────────────
    log("Phase 1: Lexical analysis")
    lexical_errors = ErrorLog()
    lexer = Lexer(source)
    tokens = tokenize(lexer, lexical_errors)

    log(f"  {len(tokens)} tokens produced, {len(lexical_errors)} invalid")

    # ── Phase 2: Parsing ──────────────────────────────────────────────────────
    log("Phase 2: Parsing")
    parser = Parser(tokens, lexical_errors)
    ast = parser.parse()

    if parser.has_errors():
        log(f"  Rejected: {parser.errors.messages[0]}")
    else:
        log(f"  Accepted with {len(ast.children)} nodes under Sentence")

    return CompilationResult(
        source=source,
        tokens=tokens,
        symbol_table=list(lexer.symbol_table),
        lexical_errors=list(lexical_errors),
        syntax_errors=list(parser.errors),
        ast=ast,
        accepted_tokens=list(parser.accepted_tokens),
    )


def compile_file(
    input_path: str,
    output_path: Optional[str] = None,
    emit_ast: bool = False,
    debug: bool = False,
) -> Tuple[CompilationResult, str]:
    """Read a sentence from input_path and render its report (or JSON AST)."""
    with open(input_path, "r", encoding="utf-8") as f:
        source = f.read().strip()

    result = compile_source(source, debug=debug)
    rendered = ast_to_json(result.ast) + "\n" if emit_ast else render_report(result)

    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(rendered)

    return result, rendered
