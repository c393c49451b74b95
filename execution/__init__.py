"""
==========================
Statement execution layer.
==========================

Runs rendered statements on SQLAlchemy connections and maps their results.

Modules:
    database_utils: Engine creation and single-statement execution
    batch: Batched execution of same-text statements
    result_set: Cursor-to-value mapping with guaranteed cursor closure
"""

__version__ = "1.0.0"
__all__ = [
    'BatchBuilder',
    'ResultSetWrapper',
    'create_sqlalchemy_engine',
    'execute_update',
    'execute_insert',
    'execute_select',
    'execute_statement',
    'to_driver_sql',
]

from .batch import BatchBuilder
from .database_utils import (
    create_sqlalchemy_engine,
    execute_insert,
    execute_select,
    execute_statement,
    execute_update,
    to_driver_sql,
)
from .result_set import ResultSetWrapper
