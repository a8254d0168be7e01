"""Exceptions raised while building or scaffolding a site."""

from __future__ import annotations


class SiteBuildError(RuntimeError):
    """Raised when the build cannot continue; the whole run is aborted."""


class TemplateStructureError(SiteBuildError):
    """Raised when the page template lacks a required injection point."""

    def __init__(self, origin: str, missing: list[str]) -> None:
        self.origin = origin
        self.missing = missing
        ids = ", ".join(f"'{slot_id}'" for slot_id in missing)
        super().__init__(f"Template '{origin}' is missing element id(s): {ids}.")


class ScaffoldExistsError(SiteBuildError):
    """Raised when scaffolding would overwrite existing template files."""


__all__ = ["ScaffoldExistsError", "SiteBuildError", "TemplateStructureError"]
