"""
====================================
Pytest suite for query/validation.py
====================================

Sections:
---------
1. Unit tests - identifier and placeholder validation, quoting
2. Edge case tests - unusual but legal inputs

Test Coverage:
--------------
- validate_identifier: empty, backtick, non-string, unicode identifiers
- count_placeholders / validate_placeholder_count: matching and mismatching counts
- quote_identifier / qualify_table: rendering with and without database
- Expression: construction-time validation and immutability

How to Execute:
---------------
All tests:          pytest tests/tests_query/test_validation.py -v
By category:        pytest tests/tests_query/test_validation.py -m unit
"""

import dataclasses

import pytest

from query.errors import InvalidIdentifierError, PlaceholderMismatchError, QueryError
from query.expression import Expression
from query.validation import (
    count_placeholders,
    qualify_table,
    quote_identifier,
    validate_identifier,
    validate_placeholder_count,
)

# ===============
# 1. UNIT TESTS
# ===============


@pytest.mark.unit
def test_validate_identifier_accepts_plain_name():
    """A regular column name passes validation."""
    validate_identifier('customer_id')


@pytest.mark.unit
def test_validate_identifier_rejects_empty_string():
    """An empty identifier is rejected."""
    with pytest.raises(InvalidIdentifierError) as exc_info:
        validate_identifier('')

    assert "empty" in str(exc_info.value)


@pytest.mark.unit
@pytest.mark.parametrize("name", ['`', 'a`b', '`drop`', 'name`'])
def test_validate_identifier_rejects_backtick(name):
    """Identifiers containing the quoting character are rejected."""
    with pytest.raises(InvalidIdentifierError):
        validate_identifier(name)


@pytest.mark.unit
@pytest.mark.parametrize("name", [None, 42, b'bytes'])
def test_validate_identifier_rejects_non_string(name):
    """Non-string identifiers are rejected instead of being formatted."""
    with pytest.raises(InvalidIdentifierError):
        validate_identifier(name)


@pytest.mark.unit
def test_errors_are_value_errors_and_query_errors():
    """Argument errors can be caught as ValueError or QueryError."""
    with pytest.raises(ValueError):
        validate_identifier('')

    with pytest.raises(QueryError):
        validate_placeholder_count('?', [])


@pytest.mark.unit
@pytest.mark.parametrize("expr, expected", [
    ('', 0),
    ('NOW()', 0),
    ('?', 1),
    ('`a` = ? AND `b` = ?', 2),
    ('COALESCE(?, ?, ?)', 3),
])
def test_count_placeholders(expr, expected):
    """Every '?' character counts as one placeholder."""
    assert count_placeholders(expr) == expected


@pytest.mark.unit
def test_validate_placeholder_count_matching():
    """Matching counts pass silently."""
    validate_placeholder_count('`d` = ? * 5', [10])
    validate_placeholder_count('NULL', ())


@pytest.mark.unit
@pytest.mark.parametrize("expr, params", [
    ('?', []),
    ('NULL', [1]),
    ('? + ?', [1]),
])
def test_validate_placeholder_count_mismatch(expr, params):
    """A count mismatch raises PlaceholderMismatchError."""
    with pytest.raises(PlaceholderMismatchError) as exc_info:
        validate_placeholder_count(expr, params)

    assert expr in str(exc_info.value)


@pytest.mark.unit
def test_quote_identifier():
    """Identifiers are wrapped in backticks."""
    assert quote_identifier('order') == '`order`'


@pytest.mark.unit
def test_qualify_table_without_database():
    """A bare table renders as `table`."""
    assert qualify_table('t') == '`t`'


@pytest.mark.unit
def test_qualify_table_with_database():
    """A qualified table renders as `db`.`table`."""
    assert qualify_table('t', database='db') == '`db`.`t`'


@pytest.mark.unit
def test_expression_validates_on_construction():
    """An Expression with the wrong argument count cannot be built."""
    with pytest.raises(PlaceholderMismatchError):
        Expression('? + ?', (1,))


@pytest.mark.unit
def test_expression_of_collects_variadic_params():
    """Expression.of packs variadic arguments into a tuple."""
    expression = Expression.of('BETWEEN ? AND ?', 1, 10)

    assert expression.expr == 'BETWEEN ? AND ?'
    assert expression.params == (1, 10)


@pytest.mark.unit
def test_expression_is_immutable():
    """Expressions are frozen and copy list arguments into a tuple."""
    params = [1]
    expression = Expression('?', params)
    params.append(2)

    assert expression.params == (1,)
    with pytest.raises(dataclasses.FrozenInstanceError):
        expression.expr = 'other'


# ==================
# 2. EDGE CASE TESTS
# ==================


@pytest.mark.edge_case
def test_validate_identifier_accepts_unicode_and_spaces():
    """Anything but the backtick is a legal quoted identifier."""
    validate_identifier('年金计划号')
    validate_identifier('order total')
    validate_identifier('"double"')


@pytest.mark.edge_case
def test_placeholder_inside_string_literal_still_counts():
    """Placeholders are counted textually, including inside literals."""
    assert count_placeholders("`note` = 'why?'") == 1

    with pytest.raises(PlaceholderMismatchError):
        validate_placeholder_count("`note` = 'why?'", [])
