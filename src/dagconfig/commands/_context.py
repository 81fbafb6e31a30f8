"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides document loading and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from dagconfig.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from dagconfig.config.settings import DagSettings
    from dagconfig.services.lookup import DagConfigService
    from dagconfig.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. Nothing is read from
    disk until a command asks for a document, so ``--help`` and
    ``--version`` never touch the filesystem.
    """

    def __init__(self, settings: DagSettings) -> None:
        self.settings = settings

        from dagconfig.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    def load(self, document: str | None) -> DagConfigService:
        """Load *document* (or the configured default) into a lookup service.

        A load failure is emitted as an error result and exits with code 1.
        """
        from dagconfig.infrastructure.document import DocumentError
        from dagconfig.services.base import load_error_result
        from dagconfig.services.lookup import DagConfigService

        path = self.settings.resolve_document(document)
        try:
            return DagConfigService.from_file(
                path,
                tolerate_miscased_keys=self.settings.lookup.tolerate_miscased_keys,
            )
        except DocumentError as exc:
            self.fail(load_error_result(exc))

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        if not result.ok:
            self.fail(result)
        settings = self.output_settings
        click.echo(format_result(result, settings=settings))
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def fail(self, result: ServiceResult) -> NoReturn:
        """Write a failed result to stderr and exit with code 1."""
        click.echo(format_result(result, settings=self.output_settings), err=True)
        raise SystemExit(1)
