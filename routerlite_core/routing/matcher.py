"""Template Matcher - Route template compilation.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

# {name:expr} - expr is taken verbatim, shortest match up to the first "}"
TYPED_TOKEN = re.compile(r"\{([a-zA-Z_][a-zA-Z0-9_]*):(.+?)}")

# {name} - one or more characters excluding "/"
UNTYPED_TOKEN = re.compile(r"\{([a-zA-Z_][a-zA-Z0-9_]*)}")

DEFAULT_SEGMENT = "[^/]+"

# Delimited raw pattern: starts with "#" or "~" and anchors somewhere after
RAW_PATTERN = re.compile(r"^[#~].*\^", re.DOTALL)

RAW_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "u": 0,
}


def normalize_template(pattern: str) -> str:
    """Normalize a route template.

    The empty template becomes ``/`` and trailing separators are
    stripped from anything but the root.
    """
    if pattern == "":
        pattern = "/"

    if pattern != "/" and pattern.endswith("/"):
        pattern = pattern.rstrip("/")

    return pattern


def is_raw_pattern(template: str) -> bool:
    """Check if template is a delimited, start-anchored raw pattern."""
    return RAW_PATTERN.match(template) is not None


@dataclass(frozen=True)
class CompiledPattern:
    """Compiled route template.

    ``regex`` is None when the template produced an expression the
    regex engine rejects; such a pattern never matches.
    """

    template: str
    source: str
    regex: Optional[re.Pattern] = field(default=None, compare=False, repr=False)
    tokens: Tuple[str, ...] = ()
    raw: bool = False

    def match(self, path: str) -> Optional[re.Match]:
        """Match path against the compiled expression."""
        if self.regex is None:
            return None
        return self.regex.search(path)

    def matches(self, path: str) -> bool:
        """Check if path matches."""
        return self.match(path) is not None

    def extract(self, path: str) -> Optional[List[str]]:
        """Extract captured values in declaration order.

        Named captures are used when the expression has any, otherwise
        positional groups. Groups that did not take part in the match
        come back as empty strings.

        Returns:
            List of captured values if path matches, None otherwise
        """
        match = self.match(path)
        if match is None:
            return None

        named = match.groupdict()
        values = list(named.values()) if named else list(match.groups())
        return ["" if value is None else value for value in values]


class TemplateCompiler:
    """Route template compiler.

    Supports:
    - Literal segments: /users
    - Default tokens: /users/{id}
    - Typed tokens: /users/{id:\\d+}
    - Raw patterns: ~^/users/(\\d+)$~
    """

    def __init__(self):
        self._cache: Dict[str, CompiledPattern] = {}

    def compile(self, pattern: str) -> CompiledPattern:
        """Compile a route template (cached per normalized template)."""
        template = normalize_template(pattern)

        if template in self._cache:
            return self._cache[template]

        if is_raw_pattern(template):
            compiled = self._compile_raw(template)
        else:
            compiled = self._compile_template(template)

        self._cache[template] = compiled
        return compiled

    def clear(self) -> None:
        """Drop all cached patterns."""
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)

    def _compile_template(self, template: str) -> CompiledPattern:
        """Substitute typed tokens, then untyped tokens, then anchor."""
        names: List[str] = []

        def typed(match: re.Match) -> str:
            names.append(match.group(1))
            return f"(?P<{match.group(1)}>{match.group(2)})"

        def untyped(match: re.Match) -> str:
            names.append(match.group(1))
            return f"(?P<{match.group(1)}>{DEFAULT_SEGMENT})"

        source = TYPED_TOKEN.sub(typed, template)
        source = UNTYPED_TOKEN.sub(untyped, source)
        source = f"^{source}$"

        regex = _try_compile(template, source)
        if regex is None:
            return CompiledPattern(template=template, source=source, tokens=tuple(names))

        # Typed tokens are substituted first; report appearance order
        order = regex.groupindex
        tokens = tuple(sorted(names, key=lambda name: order.get(name, 0)))

        return CompiledPattern(
            template=template,
            source=source,
            regex=regex,
            tokens=tokens,
        )

    def _compile_raw(self, template: str) -> CompiledPattern:
        """Use a delimited pattern verbatim, without tokens."""
        delimiter = template[0]
        end = template.rfind(delimiter)

        if end <= 0:
            logger.warning(f"Raw pattern is missing its closing delimiter: {template}")
            return CompiledPattern(template=template, source=template, raw=True)

        source = template[1:end]
        flags = 0
        for letter in template[end + 1:]:
            if letter not in RAW_FLAGS:
                logger.warning(f"Unsupported raw pattern flag {letter!r}: {template}")
                return CompiledPattern(template=template, source=source, raw=True)
            flags |= RAW_FLAGS[letter]

        return CompiledPattern(
            template=template,
            source=source,
            regex=_try_compile(template, source, flags),
            raw=True,
        )


def _try_compile(template: str, source: str, flags: int = 0) -> Optional[re.Pattern]:
    """Compile source, logging instead of raising on a malformed template."""
    try:
        return re.compile(source, flags)
    except re.error as e:
        logger.warning(f"Template {template!r} does not compile ({e}); it will never match")
        return None


_default_compiler = TemplateCompiler()


def compile_template(pattern: str) -> CompiledPattern:
    """Compile a template with the shared compiler."""
    return _default_compiler.compile(pattern)


__all__ = [
    "CompiledPattern",
    "TemplateCompiler",
    "compile_template",
    "is_raw_pattern",
    "normalize_template",
]
