"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .models import (
    EnvironmentOptions,
    MarkdownOptions,
    PageRule,
    SiteConfigError,
    SyntaxOptions,
)

_T = typ.TypeVar("_T")


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_mapping(value: object | None, section: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating None as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"'{section}' must be a mapping."
        raise SiteConfigError(msg)
    return value


def _build_flags(
    cls: type[_T], payload: typ.Mapping[str, typ.Any], section: str
) -> _T:
    """Build a dataclass of boolean flags, rejecting unknown keys."""
    known = {field.name for field in dc.fields(cls)}  # type: ignore[arg-type]
    unknown = sorted(set(payload) - known)
    if unknown:
        msg = f"Unknown option(s) in '{section}': {', '.join(unknown)}"
        raise SiteConfigError(msg)
    values: dict[str, bool] = {}
    for key, value in payload.items():
        if not isinstance(value, bool):
            msg = f"'{section}.{key}' must be true or false."
            raise SiteConfigError(msg)
        values[key] = value
    return cls(**values)


def _build_markdown_options(payload: typ.Mapping[str, typ.Any]) -> MarkdownOptions:
    """Build MarkdownOptions from the ``markdown`` section."""
    return _build_flags(MarkdownOptions, payload, "markdown")


def _build_environments(
    payload: typ.Mapping[str, typ.Any],
    defaults: dict[str, EnvironmentOptions],
) -> dict[str, EnvironmentOptions]:
    """Merge per-environment toggles over the default environments."""
    result = dict(defaults)
    for name, options in payload.items():
        section = f"environments.{name}"
        result[str(name)] = _build_flags(
            EnvironmentOptions, _as_mapping(options, section), section
        )
    return result


def _build_syntax_options(payload: typ.Mapping[str, typ.Any]) -> SyntaxOptions:
    """Build SyntaxOptions from the ``syntax`` section."""
    base = SyntaxOptions()
    line_numbers = payload.get("line_numbers", base.line_numbers)
    if not isinstance(line_numbers, bool):
        msg = "'syntax.line_numbers' must be true or false."
        raise SiteConfigError(msg)
    style = _optional_str(payload.get("pygments_style")) or base.pygments_style
    return SyntaxOptions(line_numbers=line_numbers, pygments_style=style)


def _build_page_rules(payload: object) -> list[PageRule]:
    """Build ordered layout rules from the ``pages`` list."""
    if not isinstance(payload, list):
        msg = "'pages' must be a list of layout rules."
        raise SiteConfigError(msg)
    rules: list[PageRule] = []
    for index, entry in enumerate(payload):
        if not isinstance(entry, dict):
            msg = f"Layout rule #{index} must be a mapping."
            raise SiteConfigError(msg)
        pattern = _optional_str(entry.get("pattern"))
        if not pattern:
            msg = f"Layout rule #{index} is missing 'pattern'."
            raise SiteConfigError(msg)
        layout = entry.get("layout")
        match layout:
            case False | None:
                resolved = None
            case str() if layout.strip():
                resolved = layout.strip()
            case _:
                msg = f"Layout rule '{pattern}' must set 'layout' to a name or false."
                raise SiteConfigError(msg)
        rules.append(PageRule(pattern=pattern, layout=resolved))
    return rules


def _normalize_attributes(value: str | list[object] | None) -> list[str]:
    """Normalize AsciiDoc attributes into a list of non-empty strings."""
    if isinstance(value, str):
        return [segment for segment in value.split() if segment]
    if isinstance(value, list):
        normalized: list[str] = []
        for segment in value:
            text = str(segment).strip()
            if text:
                normalized.append(text)
        return normalized
    return []


__all__ = [
    "_as_mapping",
    "_build_environments",
    "_build_markdown_options",
    "_build_page_rules",
    "_build_syntax_options",
    "_normalize_attributes",
    "_optional_str",
]
