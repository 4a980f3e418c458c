"""Configuration objects for statement rendering."""

from dataclasses import dataclass, replace
from typing import Any

from fluentsql.exceptions import ImproperConfigurationError

__all__ = ("DEFAULT_STATEMENT_CONFIG", "StatementConfig")


@dataclass(frozen=True)
class StatementConfig:
    """Configuration for Statement rendering behavior."""

    strict_values: bool = False
    """Whether malformed value sets are rejected at render.

    Covers INSERT/REPLACE value counts that differ from the column count and UPDATE
    statements without SET assignments. When disabled the statement is rendered as-is,
    a warning is logged, and the database driver is left to reject it.
    """

    log_statements: bool = True
    """Whether to emit a DEBUG record for every rendered statement."""

    def __post_init__(self) -> None:
        for name in ("strict_values", "log_statements"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                msg = f"StatementConfig.{name} must be a bool, got {type(value).__name__}"
                raise ImproperConfigurationError(msg)

    def replace(self, **changes: Any) -> "StatementConfig":
        """Return a copy of this configuration with ``changes`` applied.

        Returns:
            A new StatementConfig instance.
        """
        return replace(self, **changes)


DEFAULT_STATEMENT_CONFIG = StatementConfig()
