"""Shared CLI context with lazy-initialized dependencies."""

from icsgen.config import IcsConfig
from icsgen.renderer import Renderer


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        text = ctx.renderer.render(calendar)
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
        self._config: IcsConfig | None = None
        self._renderer: Renderer | None = None

    @property
    def config(self) -> IcsConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = IcsConfig.from_env()
        return self._config

    @property
    def renderer(self) -> Renderer:
        """Get document renderer (lazy-loaded)."""
        if self._renderer is None:
            self._renderer = Renderer()
        return self._renderer


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
