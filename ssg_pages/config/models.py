"""Typed dataclasses describing ssg site configuration structures."""

from __future__ import annotations

import dataclasses as dc
import enum
from pathlib import Path

from ssg_pages._constants import (
    OUTPUT_SUFFIX,
    SOURCE_SUFFIX,
    STYLESHEET_FILENAME,
    TEMPLATE_FILENAME,
)


class SiteConfigError(ValueError):
    """Raised when the site configuration file cannot be read as a mapping."""


class ConfigIssueKind(enum.StrEnum):
    """Categories of configuration problems reported before a build starts."""

    MISSING_KEY = "missing-key"
    MALFORMED = "malformed"
    NOT_FOUND = "not-found"
    NOT_A_DIRECTORY = "not-a-directory"


@dc.dataclass(frozen=True, slots=True)
class ConfigIssue:
    """A single configuration problem, identifying the offending key and value.

    Attributes
    ----------
    kind : ConfigIssueKind
        Category of the problem.
    key : str
        Configuration key (or file name) that failed validation.
    value : str | None
        Offending value as supplied, when one was supplied.
    detail : str
        Optional extra context appended to the message.
    """

    kind: ConfigIssueKind
    key: str
    value: str | None = None
    detail: str = ""

    @property
    def message(self) -> str:
        """Return a human-readable diagnostic naming the key and value."""
        match self.kind:
            case ConfigIssueKind.MISSING_KEY:
                text = (
                    f"Configuration key '{self.key}' is missing. Set it in the "
                    "config file or pass it on the command line."
                )
            case ConfigIssueKind.MALFORMED:
                text = f"Configuration key '{self.key}' has an invalid value {self.value!r}."
            case ConfigIssueKind.NOT_FOUND:
                text = f"Path '{self.value}' for configuration key '{self.key}' was not found."
            case ConfigIssueKind.NOT_A_DIRECTORY:
                text = (
                    f"Path '{self.value}' for configuration key '{self.key}' isn't a "
                    "directory. Point it at its parent directory or another folder."
                )
        if self.detail:
            text = f"{text} {self.detail}"
        return text


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """A fully resolved build configuration, constructed once per run."""

    input_folder: Path
    output_folder: Path
    template_dir: Path
    default_document_name: str = "index"
    pygments_style: str = "monokai"
    source_suffix: str = SOURCE_SUFFIX
    output_suffix: str = OUTPUT_SUFFIX

    @property
    def default_document_filename(self) -> str:
        """Return the default document's output file name (``index.html``)."""
        return f"{self.default_document_name}{self.output_suffix}"

    @property
    def template_path(self) -> Path:
        """Return the page template file inside ``template_dir``."""
        return self.template_dir / TEMPLATE_FILENAME

    @property
    def stylesheet_path(self) -> Path:
        """Return the shared stylesheet file inside ``template_dir``."""
        return self.template_dir / STYLESHEET_FILENAME


__all__ = ["ConfigIssue", "ConfigIssueKind", "SiteConfig", "SiteConfigError"]
