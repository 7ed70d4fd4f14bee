"""UI theme definitions and selection helpers.

Themes name pygments console attributes (``"cyan"``, ``"*brightblue*"``...)
rather than raw escape codes; ``styled`` turns them into ANSI text.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import ansiformat


@dataclass(frozen=True)
class UITheme:
    """Semantic palette used by the listing renderer."""

    name: str
    heading: str
    index: str
    kind_marker: str
    bar: str
    directory: str
    file: str
    size: str
    status: str
    error: str


DEFAULT_THEME = UITheme(
    name="default",
    heading="*white*",
    index="gray",
    kind_marker="brightblack",
    bar="cyan",
    directory="*brightblue*",
    file="white",
    size="brightcyan",
    status="yellow",
    error="*brightred*",
)

OCEAN_THEME = UITheme(
    name="ocean",
    heading="*brightcyan*",
    index="brightblack",
    kind_marker="blue",
    bar="blue",
    directory="*cyan*",
    file="gray",
    size="brightblue",
    status="brightyellow",
    error="*red*",
)

PLAIN_THEME = UITheme(
    name="plain",
    heading="",
    index="",
    kind_marker="",
    bar="",
    directory="",
    file="",
    size="",
    status="",
    error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def styled(attr: str, text: str) -> str:
    """Wrap ``text`` in the ANSI codes for a pygments console attribute."""
    if not attr or not text:
        return text
    return ansiformat(attr, text)


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "styled",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
