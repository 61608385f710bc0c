"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns the in-memory graph for the invocation and
centralizes result emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from graphctl.config.settings import GraphSettings
    from graphctl.infrastructure.graph.engine import GraphEngine
    from graphctl.services.graph import GraphService
    from graphctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The engine is created on first use so ``--help`` and ``--version``
    never build one. ``interactive`` is set by the shell: failures are
    then reported without exiting.
    """

    def __init__(self, settings: GraphSettings) -> None:
        self.settings = settings
        self.interactive = False
        self._engine: GraphEngine | None = None

        from graphctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from graphctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def engine(self) -> GraphEngine:
        """The graph engine (created lazily on first access)."""
        if self._engine is None:
            from graphctl.infrastructure.graph.engine import GraphEngine

            self._engine = GraphEngine()
        return self._engine

    @property
    def service(self) -> GraphService:
        from graphctl.services.graph import GraphService

        return GraphService(self.engine)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout; warnings go to stderr outside JSON mode.
        * Failure: stderr; exits with code 1 unless running interactively.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            precision=self.settings.output.precision,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            if not self.interactive:
                raise SystemExit(1)
