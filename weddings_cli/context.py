"""Shared CLI context with lazy-initialized dependencies."""

from weddings.config import WeddingsConfig
from weddings.loader import DetailsLoader


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        document = ctx.loader.load_raw(ctx.config.details_path("asha-rohan"))
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: WeddingsConfig | None = None
        self._loader: DetailsLoader | None = None

    @property
    def config(self) -> WeddingsConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = WeddingsConfig.from_env()
        return self._config

    @property
    def loader(self) -> DetailsLoader:
        """Get details loader (lazy-loaded)."""
        if self._loader is None:
            self._loader = DetailsLoader(timeout=self.config.details_timeout)
        return self._loader


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context."""
    global _ctx
    _ctx = ctx
