"""sqltemplate statement layer: templates → composable statements."""
from sqltemplate.statement.builder import StatementBuilder
from sqltemplate.statement.fragments import RawFragment
from sqltemplate.statement.raw import identifier, keyword, raw
from sqltemplate.statement.statement import Statement
from sqltemplate.statement.template import SQL, sql
from sqltemplate.statement.values import ValueMode

__all__ = [
    "SQL",
    "sql",
    "raw",
    "keyword",
    "identifier",
    "RawFragment",
    "Statement",
    "StatementBuilder",
    "ValueMode",
]
