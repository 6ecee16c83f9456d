"""
sentc v0.1 - Lexer
Splits a sentence into word, punctuation and quotation tokens and records
every valid word in a symbol table.
"""

import re
from dataclasses import dataclass, field
from typing import Iterator, List, Union
from enum import Enum


class TokenType(Enum):
    # Words
    STARTWORD  = "Startword"   # capitalized word, 3..26 letters
    WORD       = "Word"        # any other word, 3..26 letters
    # Punctuation
    COMMA      = "Comma"       # ,
    HYPHEN     = "Hyphen"      # -
    STOP       = "Stop"        # .
    # Quoted text
    QUOTATION  = "Quotation"   # '...'
    # Rejected character runs
    INVALID    = "Invalid"
    # Sentinel
    END        = "End"


MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 26

_PUNCTUATION = {
    ",": TokenType.COMMA,
    "-": TokenType.HYPHEN,
    ".": TokenType.STOP,
}

_WHITESPACE_RE = re.compile(r'\s+', re.ASCII)
_WORD_RE       = re.compile(r'[A-Za-z]+')
_INVALID_RE    = re.compile(r'[^\s,\-.]+', re.ASCII)


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r})"


class LexerError(Exception):
    def __init__(self, message: str):
        super().__init__(f"[LexerError] {message}")


@dataclass
class ErrorLog:
    """Ordered list of diagnostics for one compilation phase."""
    messages: List[str] = field(default_factory=list)

    def add(self, message: str) -> None:
        self.messages.append(message)

    def has_errors(self) -> bool:
        return bool(self.messages)

    def clear(self) -> None:
        self.messages.clear()

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)

    def __bool__(self) -> bool:
        return self.has_errors()


class Lexer:
    def __init__(self, source: str):
        if not isinstance(source, str):
            raise LexerError(f"Expected source text, got {type(source).__name__}")
        self._source = source
        self._pos = 0
        self.symbol_table: List[str] = []

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            if tok.type == TokenType.END:
                return
            yield tok

    def next_token(self) -> Token:
        """
        Scan the next token from the remaining input.
        Returns an END token once the input is exhausted, on every call.
        """
        source = self._source

        m = _WHITESPACE_RE.match(source, self._pos)
        if m:
            self._pos = m.end()

        if self._pos >= len(source):
            return Token(TokenType.END, "")

        ch = source[self._pos]

        if ch in _PUNCTUATION:
            self._pos += 1
            return Token(_PUNCTUATION[ch], ch)

        if ch == "'":
            return self._scan_quotation()

        m = _WORD_RE.match(source, self._pos)
        if m:
            return self._scan_word(m.group(0))

        m = _INVALID_RE.match(source, self._pos)
        self._pos = m.end()
        return Token(TokenType.INVALID, m.group(0))

    # ------------------------------------------------------------------ helpers

    def _scan_quotation(self) -> Token:
        start = self._pos + 1
        end = self._source.find("'", start)
        if end == -1:
            # Unterminated: take everything that is left
            self._pos = len(self._source)
            return Token(TokenType.QUOTATION, self._source[start:])
        self._pos = end + 1
        return Token(TokenType.QUOTATION, self._source[start:end])

    def _scan_word(self, word: str) -> Token:
        if len(word) > MAX_WORD_LENGTH:
            # Only the head is consumed; the tail is scanned on the next call
            head = word[:MAX_WORD_LENGTH]
            self._pos += MAX_WORD_LENGTH
            self.symbol_table.append(head)
            return Token(TokenType.WORD, head)

        self._pos += len(word)
        if len(word) < MIN_WORD_LENGTH:
            return Token(TokenType.INVALID, word)

        self.symbol_table.append(word)
        if word[0].isupper():
            return Token(TokenType.STARTWORD, word)
        return Token(TokenType.WORD, word)


def tokenize(source: Union[str, Lexer], errors: ErrorLog) -> List[Token]:
    """
    Drive a Lexer to the end of its input.
    Invalid tokens are reported to `errors` and left out of the result;
    END is never included.
    """
    lexer = source if isinstance(source, Lexer) else Lexer(source)
    tokens: List[Token] = []
    for tok in lexer:
        if tok.type == TokenType.INVALID:
            errors.add(f"Invalid token: {tok.value}")
        else:
            tokens.append(tok)
    return tokens
