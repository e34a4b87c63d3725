from loguru import logger

# Disable logging by default for library usage.
# Application entry points (e.g., diffrender.cli) should call logger.enable("diffrender")
# to enable logging.
logger.disable("diffrender")

from diffrender.render import (  # noqa: E402
    DiffRenderer,
    RenderDiffOptions,
    RenderedLine,
    render_diff,
    render_diff_text,
)

__all__ = [
    "DiffRenderer",
    "RenderDiffOptions",
    "RenderedLine",
    "render_diff",
    "render_diff_text",
]
