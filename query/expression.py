"""
SQL fragment paired with its bound arguments.

An Expression is the atomic unit stored in every clause: a selected column,
a SET assignment value, a WHERE condition, an ORDER BY term or a column
default. Its placeholder count is checked once, on construction.
"""

from dataclasses import dataclass, field
from typing import Any, Tuple

from query.validation import validate_placeholder_count


@dataclass(frozen=True)
class Expression:
    """Immutable (fragment, arguments) pair.

    Attributes:
        expr: SQL text fragment with '?' placeholders
        params: Arguments bound to the placeholders, in order

    Example:
        >>> Expression('`price` * ? > ?', (2, 100)).params
        (2, 100)
    """

    expr: str
    params: Tuple[Any, ...] = field(default=())

    def __post_init__(self):
        # Freeze lists passed by callers so the expression stays immutable
        object.__setattr__(self, 'params', tuple(self.params))
        validate_placeholder_count(self.expr, self.params)

    @classmethod
    def of(cls, expr: str, *params: Any) -> 'Expression':
        """Build an expression from a fragment and variadic arguments."""
        return cls(expr, params)
