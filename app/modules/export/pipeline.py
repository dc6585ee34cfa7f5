"""Export pipeline.

Pulls every configured language, one after another:

    fetch -> printf rewrite -> parse -> group by context
          -> resolve placeholders -> render -> resolve path -> save
          -> replicate to alias languages

Any fetch failure, unresolved default path or write error aborts the
remaining languages. Missing files and named contexts without a destination
are reported and skipped.
"""

from typing import List, Optional, Protocol, Sequence

from infrastructure.i18n import (
    DEFAULT_CONTEXT,
    ContextGroup,
    JSONCatalogLoader,
    PlaceholderResolver,
    Plurality,
    TranslationRecord,
    group_by_context,
)
from infrastructure.logging import bind_export_context, get_module_logger
from infrastructure.operations import OperationResult
from modules.export.configuration import ExportConfiguration
from modules.export.errors import ConfigurationError, RemoteError, WriteError
from modules.export.paths import PathResolver
from modules.export.renderers import (
    plural_renderer_for,
    renderer_for,
    rewrite_placeholders,
)
from modules.export.reporting import LoggingReporter, PullReport, Reporter
from modules.export.sink import FileSink, LocalFileSink

logger = get_module_logger()


class CatalogFetcher(Protocol):
    """Source of raw catalog text for one language."""

    def fetch(
        self,
        language: str,
        tags: Optional[Sequence[str]] = None,
        filters: Optional[Sequence[str]] = None,
    ) -> str: ...


class ExportPipeline:
    """Renders fetched catalogs into string-resource files.

    Attributes:
        configuration: Validated export configuration
        fetcher: Catalog source (normally a PoEditorClient)
        sink: Write capability; files are only overwritten, never created
        reporter: Receives each per-file result
    """

    def __init__(
        self,
        configuration: ExportConfiguration,
        fetcher: CatalogFetcher,
        sink: Optional[FileSink] = None,
        reporter: Optional[Reporter] = None,
        loader: Optional[JSONCatalogLoader] = None,
    ):
        self.configuration = configuration
        self.fetcher = fetcher
        self.sink = sink or LocalFileSink()
        self.reporter = reporter or LoggingReporter()
        self.loader = loader or JSONCatalogLoader()
        self.paths = PathResolver.from_configuration(configuration)
        self.renderer = renderer_for(configuration.type, header=configuration.header)
        self.plural_renderer = None
        if configuration.has_plural_paths:
            self.plural_renderer = plural_renderer_for(configuration.type)

    def pull(self) -> PullReport:
        """Export all configured languages in order.

        Returns:
            PullReport with one result per attempted file.

        Raises:
            RemoteError: If a catalog cannot be fetched or parsed.
            ConfigurationError: If the default singular destination is undefined.
            WriteError: If an existing destination cannot be written.
        """
        report = PullReport()
        with bind_export_context():
            logger.info(
                "pull_started",
                type=self.configuration.type.value,
                languages=list(self.configuration.languages),
            )
            for language in self.configuration.languages:
                with bind_export_context(language=language):
                    self.export(language, report)
            logger.info(
                "pull_completed",
                saved=len(report.saved),
                skipped=len(report.skipped),
            )
        return report

    def export(self, language: str, report: Optional[PullReport] = None) -> PullReport:
        """Fetch, render and save one language and its aliases."""
        if report is None:
            report = PullReport()

        logger.info("language_export_started")
        content = self.fetcher.fetch(
            language, self.configuration.tags, self.configuration.filters
        )
        content = rewrite_placeholders(self.configuration.type, content)
        try:
            records = self.loader.parse(content)
        except ValueError as e:
            raise RemoteError(f"Invalid catalog for '{language}': {e}") from e

        for group in self.prepare_groups(records):
            self.export_group(group, language, report)
        return report

    def prepare_groups(self, records: List[TranslationRecord]) -> List[ContextGroup]:
        """Group records by context and resolve placeholders.

        Named contexts are dropped when no context destination is
        configured at all.

        Returns:
            The default group first, then the named groups in encounter order.
        """
        groups = group_by_context(records)
        default_group = groups.pop(DEFAULT_CONTEXT)
        named_groups = list(groups.values())
        if not named_groups:
            return [default_group]

        if not self.configuration.has_context_paths:
            logger.info(
                "context_groups_dropped",
                contexts=[group.context for group in named_groups],
            )
            return [default_group]

        resolver = PlaceholderResolver(default_group)
        return [default_group] + [resolver.resolve(group) for group in named_groups]

    def export_group(
        self, group: ContextGroup, language: str, report: PullReport
    ) -> None:
        self.write(
            group.context,
            language,
            Plurality.SINGULAR,
            self.renderer.render(group),
            report,
        )

        if self.plural_renderer is None:
            return
        if not any(record.is_plural for record in group):
            logger.debug("plural_output_skipped", context=group.context)
            return
        self.write(
            group.context,
            language,
            Plurality.PLURAL,
            self.plural_renderer.render(group),
            report,
        )

    def write(
        self,
        context: str,
        language: str,
        plurality: Plurality,
        content: str,
        report: PullReport,
    ) -> None:
        """Save content for a language, then for each alias of it.

        A named context without a destination for the language is reported
        as skipped. Only the default context's singular file is required.

        Raises:
            ConfigurationError: If the default singular destination is undefined.
            WriteError: If an existing destination cannot be written.
        """
        for target in [language] + self.configuration.aliases_for(language):
            path = self.paths.resolve(context, target, plurality)
            if path is not None:
                result = self.save(path, content)
            elif plurality == Plurality.SINGULAR and context == DEFAULT_CONTEXT:
                logger.error("undefined_path", context=context, target_language=target)
                raise ConfigurationError(
                    f"Undefined path for context '{context}' and language '{target}'"
                )
            else:
                result = OperationResult.skipped(
                    f"No {plurality.value} path for context '{context}' "
                    f"and language '{target}'"
                )
            self.reporter.report(result)
            report.add(result)

    def save(self, path: str, content: str) -> OperationResult:
        try:
            return self.sink.save(path, content)
        except OSError as e:
            logger.error("write_failed", path=path, error=str(e))
            raise WriteError(path, e) from e
