"""Breadcrumb engine configuration.

TrailConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TrailConfig:
    """Breadcrumb engine configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = TrailConfig(hidden_paths=("/",), hidden_prefixes=("/auth",))
    """

    # Paths that never render breadcrumbs, compared after normalization
    hidden_paths: tuple[str, ...] = ()

    # Path prefixes that never render breadcrumbs ("/auth" hides "/auth/login")
    hidden_prefixes: tuple[str, ...] = ()

    # Translation catalogue holding navigation labels
    namespace: str = "navigation"

    # CLI trail output
    separator: str = " › "
