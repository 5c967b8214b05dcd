# Clip Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result records produced by the resolver.

Contents:
- `Input`: One matched argument occurrence and the raw tokens it captured.
"""
from dataclasses import dataclass, field


@dataclass
class Input:
    """
    One resolved argument occurrence.

    Attributes:
        name (str): Canonical name of the matched argument.
        values (list[str]): Captured raw tokens, in consumption order.
    """

    name: str
    values: list[str] = field(default_factory=list)

    @property
    def value(self) -> str | None:
        """Return the single captured token, or None if there is not exactly one."""
        if len(self.values) == 1:
            return self.values[0]
        return None
