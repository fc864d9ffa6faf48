from typing import Callable, Dict

from ..errors import InvalidEdit
from ..types import RenderFormat
from . import box, html, markdown

RENDERERS: Dict[RenderFormat, Callable[..., str]] = {
    "markdown": markdown.render,
    "box": box.render,
    "html": html.render,
}


def render(fmt: RenderFormat, grid, view, output_format) -> str:
    try:
        renderer = RENDERERS[fmt]
    except KeyError:
        raise InvalidEdit(f"Unknown output format: {fmt}") from None
    return renderer(grid, view, output_format)
