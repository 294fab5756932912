#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/json_md_bridge/options/base.py
"""Base classes for encoder and decoder options.

Options are immutable: they are resolved once at the top-level call and
passed unchanged down every recursive step of a conversion.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def field_names(cls) -> list[str]:
        """Return the names of all option fields in declaration order."""
        return [f.name for f in fields(cls)]  # type: ignore[arg-type]

    def to_dict(self) -> dict[str, Any]:
        """Return the option values keyed by field name."""
        return {name: getattr(self, name) for name in self.field_names()}


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer (structure to Markdown) options."""

    def __post_init__(self) -> None:
        """Validate option values; subclasses extend this."""
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser (Markdown to structure) options."""

    def __post_init__(self) -> None:
        """Validate option values; subclasses extend this."""
        pass
