"""Write generated tables to disk."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

from ucm_charmap.render import get_renderer

if TYPE_CHECKING:
    from ucm_charmap.generate import GeneratedCharmap

logger = logging.getLogger(__name__)

SUFFIX_FORMATS = {
    ".go": "go",
    ".py": "python",
    ".json": "json",
}


def format_for_path(path: str | Path) -> str:
    """Output format implied by a file suffix."""
    suffix = Path(path).suffix.lower()
    if suffix not in SUFFIX_FORMATS:
        raise ValueError(f"Cannot detect output format from {str(path)!r}")
    return SUFFIX_FORMATS[suffix]


def save(
    charmaps: "Sequence[GeneratedCharmap]",
    path: str | Path,
    fmt: str | None = None,
    package: str | None = None,
) -> Path:
    """
    Render all charmaps into one file.

    The format comes from ``fmt`` or, if omitted, from the file suffix.
    """
    path = Path(path)
    renderer = get_renderer(fmt or format_for_path(path), package=package)
    content = renderer.render(charmaps)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)
    logger.info("Wrote %d charmap(s) to %s", len(charmaps), path)
    return path
