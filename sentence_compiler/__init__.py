"""
sentc - a lexer and recursive-descent parser for simple English-like sentences.
"""

__version__ = "0.1.0"

from .lexer import Lexer, Token, TokenType, ErrorLog, LexerError, tokenize
from .parser import Parser, ParseError
from .ast_nodes import ASTNode, level_order
from .compiler import CompilationResult, compile_source, compile_file

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "ErrorLog",
    "LexerError",
    "tokenize",
    "Parser",
    "ParseError",
    "ASTNode",
    "level_order",
    "CompilationResult",
    "compile_source",
    "compile_file",
]
