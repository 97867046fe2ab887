# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from datetime import date
from enum import Enum
from typing import Any, Mapping, NamedTuple

class MetaKind(Enum):
    """The shapes a decoded frontmatter value can take."""
    MISSING = "missing"
    STRING = "string"
    SEQUENCE = "sequence"
    DATE = "date"
    RAW = "raw"

class MetaValue(NamedTuple):
    kind: MetaKind
    value: Any

    @classmethod
    def lookup(cls, metadata: Mapping[str, Any], key: str) -> "MetaValue":
        if key not in metadata or metadata[key] is None:
            return cls(MetaKind.MISSING, None)
        return cls.classify(metadata[key])

    @classmethod
    def classify(cls, value: Any) -> "MetaValue":
        if isinstance(value, str):
            return cls(MetaKind.STRING, value)
        if isinstance(value, (list, tuple)):
            return cls(MetaKind.SEQUENCE, list(value))
        # datetime is a subclass of date
        if isinstance(value, date):
            return cls(MetaKind.DATE, value)
        return cls(MetaKind.RAW, value)

    def text(self) -> str:
        """The value when it is a non-empty string, otherwise ``""``."""
        if self.kind is MetaKind.STRING:
            return self.value
        return ""
