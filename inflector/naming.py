import sqlite3
from typing import Dict, Iterable, Optional

from sqlglot import parse_one
from sqlglot.expressions import CTE, Table

from .inflections import logger
from .inflector import Inflector


class TableNames:
    """The names a code generator needs for a database table."""

    def __init__(self, table_name, singular, plural, camel, foreign_key, human):
        self.table_name = table_name
        self.singular = singular
        self.plural = plural
        self.camel = camel
        self.foreign_key = foreign_key
        self.human = human

    def __repr__(self):
        return f'<{self.__class__.__name__} {self.table_name}: {self.singular}, {self.plural}, {self.camel}>'


def table_names(inflector: Inflector, table_name: str) -> TableNames:
    """
    Derive the names for one table.

    :param inflector: The inflector used to derive the names.
    :param table_name: The table name, singular or plural.
    :return: The names, all based on the singular of ``table_name``.
    """
    singular = inflector.singularize(table_name)  # in case the table names are plural
    return TableNames(
        table_name=table_name,
        singular=singular,
        plural=inflector.pluralize(singular),
        camel=inflector.camelize(singular),
        foreign_key=inflector.foreign_key(singular),
        human=inflector.humanize(singular),
    )


def table_names_in_query(inflector: Inflector, sql_cmd: str, dialect: Optional[str] = None) -> Dict[str, TableNames]:
    """
    Derive the names for every table used in a query.

    Common table expressions are not tables, so their names are skipped.

    :param inflector: The inflector used to derive the names.
    :param sql_cmd: The query.
    :param dialect: The sqlglot dialect of the query, e.g. ``'sqlite'`` or ``'postgres'``.
    :return: The names keyed and sorted by singular name. When two tables have the same
        singular name, the last one in alphabetical order is kept and a warning is logged.
    :raises sqlglot.errors.ParseError: If the query cannot be parsed.
    """
    ast = parse_one(sql_cmd, dialect=dialect)
    cte_names = {cte.alias for cte in ast.find_all(CTE)}
    table_list = [table.name for table in ast.find_all(Table) if table.name not in cte_names]
    logger.debug(f'Tables in query: {table_list}')
    return _names_by_singular(inflector, table_list)


def table_names_in_sqlite(inflector: Inflector, connection: sqlite3.Connection) -> Dict[str, TableNames]:
    """Derive the names for every table of an SQLite database, see ``table_names_in_query``."""
    cur = connection.cursor()
    try:
        cur.execute("""SELECT name
            FROM sqlite_master
            WHERE type = 'table'
            AND name NOT LIKE 'sqlite_%'""")
        table_list = [row[0] for row in cur.fetchall()]
    finally:
        cur.close()

    logger.debug(f'Tables in database: {table_list}')
    return _names_by_singular(inflector, table_list)


def _names_by_singular(inflector: Inflector, table_list: Iterable[str]) -> Dict[str, TableNames]:
    tables = {}
    for table_name in sorted(set(table_list), key=lambda name: (inflector.singularize(name), name)):
        names = table_names(inflector, table_name)
        if names.singular in tables:
            logger.warning(f'Tables "{tables[names.singular].table_name}" and "{table_name}" have the same singular '
                           f'"{names.singular}", only "{table_name}" is kept')
        tables[names.singular] = names
    return tables
