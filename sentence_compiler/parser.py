"""
sentc v0.1 - Recursive Descent Parser
Validates a token stream against the sentence grammar and builds the AST.

    Sentence := Startword Body* Stop
    Body     := Comma | Hyphen | Word | Quotation

Parsing is fail-fast: the first violation is recorded and no tree is returned.
"""

from typing import List, Optional
from .lexer import Token, TokenType, ErrorLog
from .ast_nodes import ASTNode


_LABELLED_WITH_VALUE = {TokenType.STARTWORD, TokenType.WORD, TokenType.QUOTATION}

_END = Token(TokenType.END, "")


class ParseError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Parser:
    def __init__(self, tokens: List[Token], lexical_errors: Optional[ErrorLog] = None):
        self._tokens = list(tokens)
        self._lexical_errors = lexical_errors if lexical_errors is not None else ErrorLog()
        self._pos = 0
        self.errors = ErrorLog()
        self.accepted_tokens: List[Token] = []

    # ------------------------------------------------------------------ public

    def parse(self) -> Optional[ASTNode]:
        """Return the Sentence root, or None after recording the first error."""
        self._pos = 0
        self.errors.clear()
        self.accepted_tokens = []
        try:
            return self._parse_sentence()
        except ParseError as e:
            self.errors.add(e.message)
            self.accepted_tokens = []
            return None

    def has_errors(self) -> bool:
        return self.errors.has_errors()

    def accepted_string(self) -> str:
        return join_accepted(self.accepted_tokens)

    # ------------------------------------------------------------------ helpers

    def _peek(self) -> Token:
        if self._pos >= len(self._tokens):
            return _END
        return self._tokens[self._pos]

    def _advance(self) -> Token:
        tok = self._peek()
        if self._pos < len(self._tokens):
            self._pos += 1
        return tok

    def _at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def _match(self, *types: TokenType) -> bool:
        return self._peek().type in types

    def _accept(self, sentence: ASTNode) -> Token:
        tok = self._advance()
        sentence.add_child(_make_leaf(tok))
        self.accepted_tokens.append(tok)
        return tok

    # ------------------------------------------------------------------ grammar

    def _parse_sentence(self) -> ASTNode:
        sentence = ASTNode("Sentence")

        if not self._match(TokenType.STARTWORD):
            raise ParseError(f"Expected Startword, got: {self._peek().value}")
        self._accept(sentence)

        self._parse_body(sentence)

        if not self._match(TokenType.STOP):
            raise ParseError("Expected STOP at the end")
        self._accept(sentence)

        if not self._at_end():
            raise ParseError("Error: Extra tokens found after full stop.")

        if self._lexical_errors.has_errors():
            raise ParseError("Error: Lexical errors found. Invalid tokens in the sentence.")

        return sentence

    def _parse_body(self, sentence: ASTNode) -> None:
        last_was_comma = False
        last_was_hyphen = False

        while not self._at_end() and not self._match(TokenType.STOP):
            tok = self._peek()

            if tok.type == TokenType.COMMA:
                if last_was_comma:
                    raise ParseError("Error: Consecutive commas found.")
                self._accept(sentence)
                last_was_comma, last_was_hyphen = True, False

            elif tok.type == TokenType.HYPHEN:
                if last_was_hyphen:
                    self._check_repeated_hyphen()
                self._accept(sentence)
                last_was_comma, last_was_hyphen = False, True

            elif tok.type in (TokenType.WORD, TokenType.QUOTATION):
                self._accept(sentence)
                last_was_comma, last_was_hyphen = False, False

            else:
                raise ParseError(f"Unexpected token: {tok.value}")

    def _check_repeated_hyphen(self) -> None:
        """
        A second hyphen in a row is tolerated only when exactly one comma
        follows it before the full stop. Two or more commas there are
        reported as a comma error.
        """
        commas = 0
        for tok in self._tokens[self._pos:]:
            if tok.type == TokenType.STOP:
                break
            if tok.type == TokenType.COMMA:
                commas += 1
                if commas > 1:
                    raise ParseError("Error: Consecutive commas found.")
        if commas == 0:
            raise ParseError("Error: Consecutive hyphens found.")


def join_accepted(tokens: List[Token]) -> str:
    """Token values joined by single spaces, quotations left out."""
    return " ".join(tok.value for tok in tokens if tok.type != TokenType.QUOTATION)


def _make_leaf(tok: Token) -> ASTNode:
    if tok.type in _LABELLED_WITH_VALUE:
        return ASTNode(f"{tok.type.value}: {tok.value}")
    return ASTNode(tok.type.value)
