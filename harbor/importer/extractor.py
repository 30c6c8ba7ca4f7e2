"""Extract the embedded seed object from a legacy prototype document.

Extraction runs in two stages: a locator finds the object literal assigned to
the seed variable, then a relaxed-JSON parser turns that literal into a plain
dict. The typed projection lives in ``harbor.schemas.seed``.
"""

import logging
import re
from pathlib import Path
from typing import Any, Protocol

import json5

from harbor.importer.errors import ExtractionError, MissingSourceError, ParseError
from harbor.schemas.seed import SeedPayload

logger = logging.getLogger(__name__)


class SeedLocator(Protocol):
    """Finds the raw seed literal inside a container document."""

    def locate(self, text: str) -> str: ...


def _match_brace(text: str, start: int) -> int | None:
    """Return the index of the brace closing the one at ``start``.

    Braces inside quoted strings and comments are ignored.
    """
    depth = 0
    quote: str | None = None
    i = start
    n = len(text)

    while i < n:
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif text.startswith("//", i):
            newline = text.find("\n", i)
            if newline == -1:
                return None
            i = newline
            continue
        elif text.startswith("/*", i):
            close = text.find("*/", i + 2)
            if close == -1:
                return None
            i = close + 2
            continue
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
        i += 1

    return None


class AssignmentLocator:
    """Locate ``<variable> = {...};`` in a script-bearing document."""

    def __init__(self, variable: str = "SEED"):
        self.variable = variable
        self._pattern = re.compile(rf"\b{re.escape(variable)}\s*=\s*(?=\{{)")

    def locate(self, text: str) -> str:
        for match in self._pattern.finditer(text):
            start = match.end()
            end = _match_brace(text, start)
            if end is None:
                continue
            if text[end + 1:].lstrip().startswith(";"):
                return text[start:end + 1]

        raise ExtractionError(f"Could not find `var {self.variable} = {{...}};` in document")


def parse_relaxed_json(literal: str) -> dict[str, Any]:
    """Parse an object literal with unquoted keys, single quotes and trailing commas."""
    try:
        value = json5.loads(literal)
    except (ValueError, RecursionError) as e:
        raise ParseError(f"Seed object is not valid relaxed JSON: {e}") from e

    if not isinstance(value, dict):
        raise ParseError(f"Seed value must be an object, got {type(value).__name__}")

    return value


def extract_seed(text: str, locator: SeedLocator | None = None) -> dict[str, Any]:
    """Locate and parse the seed object, returning it untyped."""
    locator = locator or AssignmentLocator()
    return parse_relaxed_json(locator.locate(text))


def load_seed(path: Path, variable: str = "SEED") -> SeedPayload:
    """Read a prototype document from disk and project its seed object."""
    if not path.exists():
        raise MissingSourceError(
            f"Missing file at {path}. Create folder 'prototype' and copy crm.html into it."
        )

    text = path.read_text(encoding="utf-8")
    raw = extract_seed(text, AssignmentLocator(variable))
    logger.debug(f"Extracted seed object with keys {sorted(raw)} from {path}")
    return SeedPayload.from_raw(raw)
