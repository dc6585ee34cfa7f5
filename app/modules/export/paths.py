"""Destination path resolution.

Path templates are plain strings with ``{LANGUAGE}`` and ``{CONTEXT}``
tokens, substituted literally wherever they occur. Per-language override
maps replace the generic template for that language.
"""

from typing import Dict, Optional

from infrastructure.i18n import DEFAULT_CONTEXT, Plurality
from modules.export.configuration import ExportConfiguration

LANGUAGE_TOKEN = "{LANGUAGE}"
CONTEXT_TOKEN = "{CONTEXT}"


class PathResolver:
    """Computes the destination of a (context, language, plurality) triple.

    Resolution performs no I/O and never raises: a triple without a
    configured destination resolves to None.

    Attributes:
        path: Default-context template
        path_replace: Language -> default-context path, used verbatim
        path_plural: Default-context plural template
        context_path: Named-context template
        context_path_replace: Language -> named-context template
        context_path_plural: Named-context plural template
    """

    def __init__(
        self,
        path: str,
        path_replace: Optional[Dict[str, str]] = None,
        path_plural: Optional[str] = None,
        context_path: Optional[str] = None,
        context_path_replace: Optional[Dict[str, str]] = None,
        context_path_plural: Optional[str] = None,
    ):
        self.path = path
        self.path_replace = path_replace or {}
        self.path_plural = path_plural
        self.context_path = context_path
        self.context_path_replace = context_path_replace or {}
        self.context_path_plural = context_path_plural

    @classmethod
    def from_configuration(cls, configuration: ExportConfiguration) -> "PathResolver":
        return cls(
            path=configuration.path,
            path_replace=configuration.path_replace,
            path_plural=configuration.path_plural,
            context_path=configuration.context_path,
            context_path_replace=configuration.context_path_replace,
            context_path_plural=configuration.context_path_plural,
        )

    def resolve(
        self,
        context: Optional[str],
        language: str,
        plurality: Plurality = Plurality.SINGULAR,
    ) -> Optional[str]:
        """Resolve the destination path.

        Args:
            context: Context key; None or "" for the default context.
            language: Language code (an alias language for alias writes).
            plurality: Singular or plural artifact.

        Returns:
            Destination path, or None when no destination is configured.
        """
        context = context or DEFAULT_CONTEXT
        if plurality == Plurality.PLURAL:
            return self._resolve_plural(context, language)
        return self._resolve_singular(context, language)

    def _resolve_singular(self, context: str, language: str) -> Optional[str]:
        if context == DEFAULT_CONTEXT:
            if language in self.path_replace:
                return self.path_replace[language]
            return self.path.replace(LANGUAGE_TOKEN, language)

        if language in self.context_path_replace:
            return self.context_path_replace[language].replace(CONTEXT_TOKEN, context)
        if self.context_path is not None:
            return substitute(self.context_path, language, context)
        return None

    def _resolve_plural(self, context: str, language: str) -> Optional[str]:
        if context == DEFAULT_CONTEXT:
            if self.path_plural is None:
                return None
            return self.path_plural.replace(LANGUAGE_TOKEN, language)

        if self.context_path_plural is None:
            return None
        return substitute(self.context_path_plural, language, context)


def substitute(template: str, language: str, context: str) -> str:
    return template.replace(LANGUAGE_TOKEN, language).replace(CONTEXT_TOKEN, context)
