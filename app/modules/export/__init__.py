"""Export module.

Renders translation catalogs into platform string-resource files and
places them at their configured destinations.

Components:
- configuration: ExportConfiguration, OutputType, load_configuration
- renderers: Apple .strings/.stringsdict, Android strings.xml, Kotlin source table
- paths: PathResolver for {LANGUAGE}/{CONTEXT} templates and overrides
- sink: FileSink, LocalFileSink (overwrite-only writes)
- reporting: Reporter, LoggingReporter, PullReport
- pipeline: ExportPipeline
"""

from modules.export.configuration import (
    ExportConfiguration,
    OutputType,
    load_configuration,
)
from modules.export.errors import (
    ConfigurationError,
    PoEditorError,
    RemoteError,
    WriteError,
)
from modules.export.paths import PathResolver
from modules.export.pipeline import CatalogFetcher, ExportPipeline
from modules.export.renderers import (
    AndroidStringsRenderer,
    AppleStringsDictRenderer,
    AppleStringsRenderer,
    FormatRenderer,
    SourceTableRenderer,
    plural_renderer_for,
    renderer_for,
)
from modules.export.reporting import LoggingReporter, PullReport, Reporter
from modules.export.sink import FileSink, LocalFileSink

__all__ = [
    "ExportConfiguration",
    "OutputType",
    "load_configuration",
    "ConfigurationError",
    "PoEditorError",
    "RemoteError",
    "WriteError",
    "PathResolver",
    "CatalogFetcher",
    "ExportPipeline",
    "FormatRenderer",
    "AppleStringsRenderer",
    "AppleStringsDictRenderer",
    "AndroidStringsRenderer",
    "SourceTableRenderer",
    "renderer_for",
    "plural_renderer_for",
    "Reporter",
    "LoggingReporter",
    "PullReport",
    "FileSink",
    "LocalFileSink",
]
