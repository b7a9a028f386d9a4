"""Decide whether a module specifier refers to the target package."""

import re
from typing import Union

Target = Union[str, re.Pattern]

_QUOTES = re.compile(r"^['\"]|['\"]$")


def strip_quotes(specifier: str) -> str:
    """Remove one leading and one trailing quote character, if present."""
    return _QUOTES.sub("", specifier)


def is_target_package(specifier: str, target: Target) -> bool:
    """Check a module specifier against the target.

    A string target matches by plain prefix, so "@scope/pkg" also matches
    "@scope/pkg/sub" and "@scope/pkgX". A compiled pattern matches when it
    is found anywhere in the unquoted specifier. Matching is case-sensitive.
    """
    clean_name = strip_quotes(specifier)
    if isinstance(target, str):
        return clean_name.startswith(target)
    return target.search(clean_name) is not None


class PackageMatcher:
    """A configured target package."""

    def __init__(self, target: Target):
        self.target = target

    @classmethod
    def from_string(cls, target: str, regex: bool = False) -> "PackageMatcher":
        """Build a matcher from user input; `regex` compiles it as a pattern."""
        return cls(re.compile(target) if regex else target)

    @property
    def is_pattern(self) -> bool:
        return not isinstance(self.target, str)

    def matches(self, specifier: str) -> bool:
        return is_target_package(specifier, self.target)

    def describe(self) -> str:
        if isinstance(self.target, str):
            return self.target
        return f"/{self.target.pattern}/"
