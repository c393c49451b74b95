"""
============================
Abstract statement contract.
============================

Every statement, generated or raw, renders to a pair of SQL text and the
ordered list of values for its '?' placeholders. This pair is the only thing
the execution layer ever sees.

Classes:
    AbstractQuery: Base class for all statements
    Raw: Opaque statement holding caller-supplied SQL text

Example:
    >>> from query.statement import Raw
    >>>
    >>> query = Raw('SELECT 1 + ?;', [41])
    >>> query.get_sql(), query.get_params()
    ('SELECT 1 + ?;', [41])
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Sequence, Tuple

from query.errors import QueryError


class AbstractQuery(ABC):
    """Base class for all statements.

    Subclasses render their accumulated clause state. Rendering never mutates
    the statement, so both methods may be called repeatedly and in any order.
    """

    @abstractmethod
    def get_sql(self) -> str:
        """Render the SQL text with '?' placeholders."""

    @abstractmethod
    def get_params(self) -> List[Any]:
        """Return the placeholder values in the order they appear in the text."""

    def as_tuple(self) -> Tuple[str, List[Any]]:
        """Return (sql, params) ready to hand to a DB-API style executor."""
        return self.get_sql(), self.get_params()

    def __repr__(self) -> str:
        try:
            sql = self.get_sql()
        except QueryError as e:
            sql = f'<unrenderable: {e}>'
        return f'{type(self).__name__}({sql!r})'


class Raw(AbstractQuery):
    """A statement made of arbitrary, already rendered SQL text.

    Placeholder validation is the caller's job (see query.factory.raw); the
    batch runner builds Raw instances from statements it has just rendered.
    """

    def __init__(self, sql: str, params: Sequence[Any] = ()):
        self._sql = sql
        self._params = list(params)

    def get_sql(self) -> str:
        return self._sql

    def get_params(self) -> List[Any]:
        return list(self._params)


def collect_params(expressions: Iterable[Any]) -> List[Any]:
    """Flatten the arguments of a sequence of expressions, keeping order."""
    params: List[Any] = []
    for expression in expressions:
        params.extend(expression.params)
    return params
