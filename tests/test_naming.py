import logging
import sqlite3
import subprocess
import sys

import pytest
from sqlglot.errors import ParseError

from inflector import Inflector
from inflector.naming import table_names, table_names_in_query, table_names_in_sqlite

inflector = Inflector()


def test_table_names():
    names = table_names(inflector, 'blog_posts')
    assert names.table_name == 'blog_posts'
    assert names.singular == 'blog_post'
    assert names.plural == 'blog_posts'
    assert names.camel == 'BlogPost'
    assert names.foreign_key == 'blog_post_id'
    assert names.human == 'Blog post'


def test_table_names_of_singular_and_irregular_tables():
    names = table_names(inflector, 'person')
    assert (names.singular, names.plural, names.camel) == ('person', 'people', 'Person')

    names = table_names(inflector, 'people')
    assert (names.singular, names.plural, names.camel) == ('person', 'people', 'Person')
    assert names.foreign_key == 'person_id'


def test_table_names_with_custom_rules():
    custom = Inflector(lambda inflections: inflections.irregular('salesrep', 'salesreps'))
    names = table_names(custom, 'salesreps')
    assert names.singular == 'salesrep'
    assert names.camel == 'Salesrep'


def test_table_names_in_query():
    tables = table_names_in_query(
        inflector,
        'SELECT books.title, authors.name FROM books JOIN authors ON books.author_id = authors.id')
    assert list(tables) == ['author', 'book']
    assert tables['book'].table_name == 'books'
    assert tables['author'].foreign_key == 'author_id'


def test_table_names_in_query_skip_ctes():
    tables = table_names_in_query(
        inflector,
        '''WITH recent AS (SELECT * FROM invoices WHERE total > 100)
        SELECT * FROM recent JOIN customers ON recent.customer_id = customers.id''')
    assert list(tables) == ['customer', 'invoice']


def test_table_names_in_query_with_dialect_and_schema():
    tables = table_names_in_query(inflector, 'SELECT * FROM public.people', dialect='postgres')
    assert list(tables) == ['person']
    assert tables['person'].table_name == 'people'


def test_table_names_in_query_without_tables():
    assert table_names_in_query(inflector, 'SELECT 1') == {}


def test_table_names_in_invalid_query():
    with pytest.raises(ParseError):
        table_names_in_query(inflector, 'SELECT (1 FROM books')


def test_table_names_in_sqlite():
    with sqlite3.connect(':memory:') as conn:
        conn.execute('CREATE TABLE invoices (id INTEGER PRIMARY KEY AUTOINCREMENT, customer_id INTEGER)')
        conn.execute('CREATE TABLE customers (id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT)')
        conn.execute('CREATE TABLE people (id INTEGER PRIMARY KEY, name TEXT)')
        conn.execute("INSERT INTO customers (name) VALUES ('ACME')")

        tables = table_names_in_sqlite(inflector, conn)

    assert list(tables) == ['customer', 'invoice', 'person']
    assert tables['person'].table_name == 'people'
    assert tables['invoice'].camel == 'Invoice'


def test_tables_with_the_same_singular_are_reported(caplog):
    with caplog.at_level(logging.WARNING, logger='Inflector'):
        tables = table_names_in_query(inflector, 'SELECT * FROM person JOIN people ON person.id = people.id')

    assert list(tables) == ['person']
    assert tables['person'].table_name == 'person'
    assert '"people" and "person"' in caplog.text


def test_core_does_not_import_sqlglot():
    code = 'import sys, inflector; inflector.Inflector().pluralize("book"); assert "sqlglot" not in sys.modules'
    subprocess.run([sys.executable, '-c', code], check=True)
