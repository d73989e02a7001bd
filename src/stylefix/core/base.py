"""Base classes for configuration models.

Kept apart from config.py so that log.py can build on them without
a circular import:
- Closeable Protocol for resource cleanup
- BaseCloseable for the automatic cleanup cascade
- BaseConfig as the marker for configuration sections
"""

from __future__ import annotations

import sys
from typing import Protocol, runtime_checkable

from pydantic import BaseModel


@runtime_checkable
class Closeable(Protocol):
    """Protocol for objects that support close()."""

    def close(self) -> None:
        """Release held resources."""
        ...


class BaseCloseable(BaseModel):
    """Pydantic model that closes its Closeable fields on exit.

    Cascade: State -> Config.close() -> Logger.close() -> Sink.close()

    A failure closing one child is reported on stderr and the
    remaining children are still closed.
    """

    def close(self):
        """Close every field value that implements close()."""
        for field_name in self.__class__.model_fields:
            child = getattr(self, field_name, None)
            if child is None:
                continue

            if isinstance(child, Closeable):
                try:
                    child.close()
                except Exception as e:
                    print(
                        f"Warning: Error closing {field_name}: {e}",
                        file=sys.stderr,
                    )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):  # noqa: U100
        self.close()
        return False


class BaseConfig(BaseCloseable):
    """Marker base for sections loaded from YAML/env/CLI."""
    pass


__all__ = ["Closeable", "BaseCloseable", "BaseConfig"]
