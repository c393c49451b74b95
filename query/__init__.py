"""
=================================
Chainable SQL statement builders.
=================================

This package builds CREATE TABLE, INSERT, UPDATE, DELETE and SELECT
statements through chainable methods. Every statement renders to SQL text
with positional '?' placeholders plus the list of values to bind, in the
exact order the placeholders appear. Identifiers are quoted with backticks.

The package is organized by statement kind:
    - validation.py: Identifier/placeholder validation and quoting
    - expression.py: (fragment, arguments) pairs used inside every clause
    - statement.py: AbstractQuery contract and Raw statements
    - conditional.py: WHERE clause handling shared by UPDATE/DELETE/SELECT
    - ddl.py: CreateTable
    - dml.py: Insert, Update, Delete
    - query_builder.py: Select
    - factory.py: Entry points validating table/database names
    - errors.py: Error kinds

Example:
    >>> from query import insert_into
    >>>
    >>> query = (
    ...     insert_into('t')
    ...     .value('a', 123)
    ...     .value_expr('b', '1 + ?', 456)
    ...     .on_duplicate_key_update_except('a')
    ... )
    >>> query.get_sql()
    'INSERT INTO `t` (`a`, `b`) VALUES (?, 1 + ?) ON DUPLICATE KEY UPDATE `b` = 1 + ?;'
    >>> query.get_params()
    [123, 456, 456]
"""

__version__ = "1.0.0"
__all__ = [
    # Factory
    'Query', 'create_table', 'insert_into', 'update', 'delete_from', 'select', 'raw',
    # Statements
    'AbstractQuery', 'Raw', 'ConditionalQuery', 'CreateTable', 'Insert', 'Update',
    'Delete', 'Select', 'Expression',
    # Errors
    'QueryError', 'InvalidIdentifierError', 'PlaceholderMismatchError',
    'DuplicateColumnError', 'NoColumnsError', 'EmptyInsertError',
    'ConflictingModifiersError', 'EmptyUpdateError', 'MixedSelectionError',
    'EmptySelectionError', 'NoOrderExpressionError', 'InvalidLimitError',
    'InvalidOffsetError', 'BatchTextMismatchError',
]

from .conditional import ConditionalQuery
from .ddl import CreateTable
from .dml import Delete, Insert, Update
from .errors import (
    BatchTextMismatchError,
    ConflictingModifiersError,
    DuplicateColumnError,
    EmptyInsertError,
    EmptySelectionError,
    EmptyUpdateError,
    InvalidIdentifierError,
    InvalidLimitError,
    InvalidOffsetError,
    MixedSelectionError,
    NoColumnsError,
    NoOrderExpressionError,
    PlaceholderMismatchError,
    QueryError,
)
from .expression import Expression
from .factory import Query, create_table, delete_from, insert_into, raw, select, update
from .query_builder import Select
from .statement import AbstractQuery, Raw
