"""Renderers for emitting charmaps as source code or data."""

from ucm_charmap.render.go_source import GoRenderer
from ucm_charmap.render.json_format import JsonRenderer
from ucm_charmap.render.python_source import PythonRenderer

RENDERERS = {
    "go": GoRenderer,
    "py": PythonRenderer,
    "python": PythonRenderer,
    "json": JsonRenderer,
}


def get_renderer(fmt: str, package: str | None = None):
    """
    Create the renderer for an output format name.

    ``package`` only applies to Go output; the other formats ignore it.
    """
    try:
        cls = RENDERERS[fmt.lower()]
    except KeyError:
        raise ValueError(f"Unknown format: {fmt}") from None
    if cls is GoRenderer and package is not None:
        return GoRenderer(package=package)
    return cls()


__all__ = ["GoRenderer", "JsonRenderer", "PythonRenderer", "get_renderer"]
