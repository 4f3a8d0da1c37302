import re

import pytest

from mal.builtin.core_builtin import make_namespace
from mal.errors import MalSyntaxError
from mal.types.nil import Nil
from mal.types.symbol import Symbol

# A tiny reader standing in for the external reader: numbers, strings,
# symbols, nil/true/false and lists. Enough to exercise read-string.
TOKEN_RE = re.compile(r'\s*(\(|\)|"(?:\\.|[^\\"])*"|[^\s()"]+)')
UNESCAPES = {"n": "\n", '"': '"', "\\": "\\"}


def _tokens(source):
    pos = 0
    source = source.rstrip()
    while pos < len(source):
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise MalSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        yield m.group(1)
        pos = m.end()


def _atom(tok):
    if tok.startswith('"'):
        return re.sub(r"\\(.)", lambda m: UNESCAPES.get(m.group(1), m.group(1)), tok[1:-1])
    if tok == "nil":
        return Nil
    if tok in ("true", "false"):
        return tok == "true"
    try:
        return float(tok)
    except ValueError:
        return Symbol(tok)


def _parse(tokens):
    tok = next(tokens, None)
    if tok is None:
        raise MalSyntaxError("Unexpected EOF")
    if tok == ")":
        raise MalSyntaxError("Unexpected ')'")
    if tok != "(":
        return _atom(tok)
    items = []
    while True:
        try:
            items.append(_parse(tokens))
        except MalSyntaxError as e:
            if str(e) == "Unexpected ')'":
                return items
            raise MalSyntaxError("Unmatched '('") from e


def stub_reader(source):
    return _parse(_tokens(source))


@pytest.fixture(scope="session")
def reader():
    return stub_reader


@pytest.fixture
def ns(reader):
    """Fresh core namespace with the stub reader installed."""
    return make_namespace(reader=reader)


@pytest.fixture
def call(ns):
    """Call a core function by name: call("+", 1.0, 2.0)."""
    def _call(name, *args):
        return ns[name](*args)
    return _call
