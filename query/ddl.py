"""
========================================================
Data Definition Language (DDL) builder for CREATE TABLE.
========================================================

Columns are declared one by one; modifiers (NOT NULL, AUTO_INCREMENT,
PRIMARY KEY, DEFAULT) always apply to the column declared last. Primary key
columns are gathered into one trailing composite PRIMARY KEY clause, and
default values are bound as parameters rather than inlined.

Column Shorthands:
    integer  -> INT
    bigint   -> BIGINT
    boolean  -> TINYINT(1)
    varchar  -> VARCHAR(size)
    char     -> CHAR(size)
    text     -> TEXT
    int_key  -> INT AUTO_INCREMENT, part of the primary key

Example:
    >>> from query.factory import create_table
    >>>
    >>> query = (
    ...     create_table('shop', 'orders')
    ...     .if_not_exists()
    ...     .int_key('id')
    ...     .varchar('status', 16).not_null().default_value('new')
    ... )
    >>> query.get_sql()
    'CREATE TABLE IF NOT EXISTS `shop`.`orders` (`id` INT AUTO_INCREMENT, `status` VARCHAR(16) NOT NULL DEFAULT ?, PRIMARY KEY (`id`));'
    >>> query.get_params()
    ['new']
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from query.errors import DuplicateColumnError, NoColumnsError
from query.statement import AbstractQuery
from query.validation import qualify_table, quote_identifier, validate_identifier

# Marks a column without a DEFAULT clause; None is a valid (NULL) default
_NO_DEFAULT = object()


@dataclass
class ColumnDefinition:
    """A single column of a CREATE TABLE statement.

    Attributes:
        name: Column name (validated)
        type: SQL type, inlined verbatim
        not_null: Render NOT NULL
        auto_increment: Render AUTO_INCREMENT
        primary_key: Include in the composite PRIMARY KEY clause
        default: Bound DEFAULT value, or the no-default marker
    """

    name: str
    type: str
    not_null: bool = False
    auto_increment: bool = False
    primary_key: bool = False
    default: Any = _NO_DEFAULT

    @property
    def has_default(self) -> bool:
        return self.default is not _NO_DEFAULT

    def render(self) -> str:
        parts = [quote_identifier(self.name), self.type]

        if self.not_null:
            parts.append("NOT NULL")

        if self.auto_increment:
            parts.append("AUTO_INCREMENT")

        if self.has_default:
            parts.append("DEFAULT ?")

        return " ".join(parts)


class CreateTable(AbstractQuery):
    """A CREATE TABLE statement.

    Instances are normally obtained from query.factory.create_table, which
    validates the table and database names.
    """

    def __init__(self, database: Optional[str], table: str):
        self.database = database
        self.table = table
        self._if_not_exists = False
        self._columns: List[ColumnDefinition] = []

    def if_not_exists(self) -> 'CreateTable':
        """Add IF NOT EXISTS to the statement."""
        self._if_not_exists = True
        return self

    def col(self, name: str, type: str) -> 'CreateTable':
        """
        Add a column to the table.

        Args:
            name: Column name
            type: SQL column type, e.g. 'DECIMAL(10,2)'

        Returns:
            This statement

        Raises:
            InvalidIdentifierError: If name is not a valid identifier
            DuplicateColumnError: If a column with this name already exists
        """
        validate_identifier(name)

        if any(column.name == name for column in self._columns):
            raise DuplicateColumnError(f"Column {name} already exists")

        self._columns.append(ColumnDefinition(name, type))
        return self

    def integer(self, name: str) -> 'CreateTable':
        return self.col(name, "INT")

    def bigint(self, name: str) -> 'CreateTable':
        return self.col(name, "BIGINT")

    def boolean(self, name: str) -> 'CreateTable':
        return self.col(name, "TINYINT(1)")

    def varchar(self, name: str, size: int) -> 'CreateTable':
        return self.col(name, f"VARCHAR({size})")

    def char(self, name: str, size: int) -> 'CreateTable':
        return self.col(name, f"CHAR({size})")

    def text(self, name: str) -> 'CreateTable':
        return self.col(name, "TEXT")

    def int_key(self, name: str) -> 'CreateTable':
        """Add an INT AUTO_INCREMENT column that is part of the primary key."""
        return self.integer(name).auto_increment().primary_key()

    def not_null(self) -> 'CreateTable':
        """Mark the last added column NOT NULL."""
        self._last_column().not_null = True
        return self

    def auto_increment(self) -> 'CreateTable':
        """Mark the last added column AUTO_INCREMENT."""
        self._last_column().auto_increment = True
        return self

    def primary_key(self) -> 'CreateTable':
        """Add the last added column to the primary key."""
        self._last_column().primary_key = True
        return self

    def default_value(self, value: Any) -> 'CreateTable':
        """
        Set the DEFAULT of the last added column.

        Args:
            value: Default value, bound as a parameter. None binds NULL.

        Returns:
            This statement
        """
        self._last_column().default = value
        return self

    def _last_column(self) -> ColumnDefinition:
        if not self._columns:
            raise NoColumnsError("No columns added")
        return self._columns[-1]

    def get_sql(self) -> str:
        sql_parts = ["CREATE TABLE"]

        if self._if_not_exists:
            sql_parts.append("IF NOT EXISTS")

        sql_parts.append(qualify_table(self.table, self.database))

        definitions = [column.render() for column in self._columns]

        primary_keys = [quote_identifier(c.name) for c in self._columns if c.primary_key]
        if primary_keys:
            definitions.append(f"PRIMARY KEY ({', '.join(primary_keys)})")

        return " ".join(sql_parts) + f" ({', '.join(definitions)});"

    def get_params(self) -> List[Any]:
        return [column.default for column in self._columns if column.has_default]
