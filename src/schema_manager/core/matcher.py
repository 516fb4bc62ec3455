# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/core/matcher.py

import re
from pathlib import PurePath
from typing import Union

from schema_manager.system.exceptions import InvalidPatternError


class PatternMatcher:
    """Regular expression tested against the filename component of a path."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        try:
            self._regex = re.compile(pattern)
        except re.error as e:
            raise InvalidPatternError(f"Invalid regex pattern: {e}", pattern=pattern) from e

    def matches(self, candidate: Union[str, PurePath]) -> bool:
        """True if the pattern is found anywhere in the candidate's filename."""
        filename = PurePath(candidate).name
        return self._regex.search(filename) is not None

    def __repr__(self) -> str:
        return f"PatternMatcher({self.pattern!r})"
