"""Exceptions raised while compiling step patterns.

Both pattern errors are non-fatal: the extractor turns them into a pattern
with unknown usage and carries on with the rest of the file.
"""


class StepAuditError(Exception):
    """Base class for step audit errors."""


class MalformedPatternError(StepAuditError):
    """A regex literal that the regex engine refuses to compile."""

    def __init__(self, raw: str, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Malformed regex {raw}: {reason}")


class NonLiteralPatternError(StepAuditError):
    """A step argument that is not a string, template or regex literal."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Not a static literal: {raw}")
