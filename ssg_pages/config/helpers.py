"""Utility helpers shared by the ssg configuration loader."""

from __future__ import annotations

from pathlib import Path


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_path(value: str | Path, base_dir: Path) -> Path:
    """Resolve ``value`` against ``base_dir`` unless it is already absolute."""
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return path.resolve()


def _merge_overrides(
    raw: dict[str, object], overrides: dict[str, object | None]
) -> dict[str, object]:
    """Return ``raw`` updated with every override that was actually supplied."""
    merged = dict(raw)
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


__all__ = ["_merge_overrides", "_optional_str", "_resolve_path"]
