"""Load and validate the build configuration for ssg site generation.

This subpackage reads the optional ``ssg.yaml`` file, merges command-line
overrides, resolves folder paths, and produces the frozen :class:`SiteConfig`
that every pipeline component receives explicitly. Validation reports
expected misconfiguration as a :class:`ConfigIssue` value instead of raising,
so the entry point can print a diagnostic and stop before any document is
processed.

Examples
--------
>>> from pathlib import Path
>>> from ssg_pages.config import read_config_mapping, validate_site_config
>>> raw = read_config_mapping(Path("ssg.yaml"))  # doctest: +SKIP
>>> config = validate_site_config(raw, base_dir=Path("."))  # doctest: +SKIP
>>> config.default_document_filename  # doctest: +SKIP
'index.html'
"""

from .loader import read_config_mapping, validate_site_config
from .models import ConfigIssue, ConfigIssueKind, SiteConfig, SiteConfigError

__all__ = [
    "ConfigIssue",
    "ConfigIssueKind",
    "SiteConfig",
    "SiteConfigError",
    "read_config_mapping",
    "validate_site_config",
]
