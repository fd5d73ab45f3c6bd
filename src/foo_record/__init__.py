"""foo-record — validated construction of a small name/age record.

Ships a pure core constructor and a two-argument command-line driver.
"""

from foo_record.version import __version__

__all__: list[str] = ["__version__"]
