"""Scilla type expressions: closed variant set, parser and formatter.

Type strings look like `Name (Arg1) (Arg2) ...`, each argument being itself
a type string. The parser maps them onto four frozen dataclasses:

- `PrimitiveType`: bare identifier (`Uint32`, `ByStr20`, `String`, user ADTs
  without type parameters)
- `BoolType`: `Bool`
- `OptionType`: `Option (T)`
- `AdtType`: every other constructor applied to arguments (`List (T)`,
  `Map (K) (V)`, `Pair (A) (B)`, ...)

Anything not in the closed set falls into `AdtType` / `PrimitiveType`, so new
ADTs parse without code changes. Results are memoized per input string.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from scilladec.core.errors import MalformedType


@dataclass(frozen=True, slots=True)
class PrimitiveType:
    name: str


@dataclass(frozen=True, slots=True)
class BoolType:
    @property
    def name(self) -> str:
        return "Bool"


@dataclass(frozen=True, slots=True)
class OptionType:
    inner: TypeExpr

    @property
    def name(self) -> str:
        return "Option"


@dataclass(frozen=True, slots=True)
class AdtType:
    name: str
    args: tuple[TypeExpr, ...] = ()


TypeExpr = PrimitiveType | BoolType | OptionType | AdtType


# ---------- tokenizer ----------

_TOKEN_RE = re.compile(r"\s*(?:(?P<open>\()|(?P<close>\))|(?P<ident>[A-Za-z0-9_.]+))")

# `ByStr20 with contract field f : T end` and friends: treated as ByStr20
_ADDRESS_TYPE_RE = re.compile(r"^\s*ByStr20\s+with\b.*\bend\s*$", re.DOTALL)


def _tokenize(text: str) -> list[str]:
    tokens: list[str] = []
    pos = 0
    stripped_end = len(text.rstrip())
    while pos < stripped_end:
        m = _TOKEN_RE.match(text, pos)
        if m is None or m.end() == pos:
            raise MalformedType(f"unexpected character {text[pos:pos + 1]!r} at {pos} in type {text!r}")
        tokens.append(m.group(0).strip())
        pos = m.end()
    return tokens


# ---------- recursive descent ----------


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.tokens = _tokenize(text)
        self.pos = 0

    def _peek(self) -> str | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _next(self) -> str:
        tok = self._peek()
        if tok is None:
            raise MalformedType(f"unexpected end of type {self.text!r}")
        self.pos += 1
        return tok

    def _expect_close(self) -> None:
        if self._next() != ")":
            raise MalformedType(f"unbalanced parentheses in type {self.text!r}")

    def parse(self) -> TypeExpr:
        expr = self._type()
        if self._peek() is not None:
            raise MalformedType(f"unexpected {self._peek()!r} in type {self.text!r}")
        return expr

    def _type(self) -> TypeExpr:
        tok = self._next()
        if tok == "(":
            inner = self._type()
            self._expect_close()
            return inner
        if tok == ")":
            raise MalformedType(f"missing type before ')' in {self.text!r}")
        args: list[TypeExpr] = []
        while (nxt := self._peek()) is not None and nxt != ")":
            args.append(self._arg())
        return _build(tok, tuple(args), self.text)

    def _arg(self) -> TypeExpr:
        tok = self._next()
        if tok == "(":
            if self._peek() == ")":
                raise MalformedType(f"empty type argument in {self.text!r}")
            inner = self._type()
            self._expect_close()
            return inner
        # bare identifier argument, as in `Map ByStr20 Uint128`
        return _build(tok, (), self.text)


def _build(name: str, args: tuple[TypeExpr, ...], text: str) -> TypeExpr:
    if name == "Bool":
        if args:
            raise MalformedType(f"Bool takes no type arguments: {text!r}")
        return BoolType()
    if name == "Option":
        if len(args) != 1:
            raise MalformedType(f"Option takes exactly one type argument, got {len(args)}: {text!r}")
        return OptionType(args[0])
    if not args:
        return PrimitiveType(name)
    return AdtType(name, args)


def parse_type(text: str) -> TypeExpr:
    """Parse a Scilla type string into a `TypeExpr`.

    Raises `MalformedType` on unbalanced parentheses, a missing argument
    (`Option ()`), stray tokens or an empty string.
    """
    if not isinstance(text, str):
        raise MalformedType(f"type must be a string, got {type(text).__name__}")
    return _parse_cached(text)


@lru_cache(maxsize=1024)
def _parse_cached(text: str) -> TypeExpr:
    if not text.strip():
        raise MalformedType("empty type string")
    if _ADDRESS_TYPE_RE.match(text):
        return PrimitiveType("ByStr20")
    return _Parser(text).parse()


def as_type(t: TypeExpr | str) -> TypeExpr:
    """Accept either a parsed `TypeExpr` or a type string.

    Anything else (e.g. a non-string `argtypes` entry) raises `MalformedType`.
    """
    if isinstance(t, (PrimitiveType, BoolType, OptionType, AdtType)):
        return t
    return parse_type(t)


def format_type(expr: TypeExpr) -> str:
    """Render a `TypeExpr` in canonical `Name (Arg) (Arg)` form."""
    match expr:
        case PrimitiveType(name=name):
            return name
        case BoolType():
            return "Bool"
        case OptionType(inner=inner):
            return f"Option ({format_type(inner)})"
        case AdtType(name=name, args=args):
            return " ".join([name, *(f"({format_type(a)})" for a in args)])
    raise TypeError(f"not a TypeExpr: {expr!r}")
