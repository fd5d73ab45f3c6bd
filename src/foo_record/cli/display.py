"""Presentation of records for the CLI layer."""

from __future__ import annotations

from foo_record.cli.console import stdout_console
from foo_record.core.models import Foo


def format_foo(foo: Foo) -> str:
    """Render *foo* as ``Foo: name: '<name>', age: <age>``."""
    return f"Foo: name: '{foo.name}', age: {foo.age}"


def print_foo(foo: Foo) -> None:
    """Write the rendered record to standard output."""
    stdout_console.plain(format_foo(foo))
