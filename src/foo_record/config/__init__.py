"""Run configuration and logging setup.

There are no environment variables or config files; settings are passed
to the driver as a :class:`FooSettings` value.
"""

from foo_record.config.logging import configure_logging
from foo_record.config.settings import FooSettings

__all__: list[str] = ["FooSettings", "configure_logging"]
