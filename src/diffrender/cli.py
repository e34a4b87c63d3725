from __future__ import annotations

from pathlib import Path
from typing import TextIO

import click
from rich.console import Console

from diffrender.constant import VERSION

_LOG_LEVEL_OPTION = "--log-level"
_DEFAULT_LOG_LEVEL_KEY = "default"


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(VERSION)
@click.argument("diff_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--path",
    "-p",
    "file_path",
    type=str,
    default=None,
    help="Path of the diffed file, used to pick the highlighting language. Default: none.",
)
@click.option(
    "--config-file",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
    default=None,
    help="Config file (TOML or JSON). Default: ~/.diffrender/config.toml if present.",
)
@click.option(
    "--no-syntax",
    is_flag=True,
    default=False,
    help="Disable syntax highlighting. Default: no.",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Log debug information. Default: no.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write log records to this file instead of stderr. Default: stderr.",
)
@click.option(
    "--log-level",
    "-L",
    "log_level_override",
    multiple=True,
    help=(
        "Override log level per module. Use `module=LEVEL` to target a specific module "
        "(e.g. `-L diffrender.syntax=DEBUG`) or just `LEVEL` to change the default level."
    ),
)
def diffrender(
    diff_file: TextIO,
    file_path: str | None,
    config_file: Path | None,
    no_syntax: bool,
    debug: bool,
    log_file: Path | None,
    log_level_override: tuple[str, ...],
):
    """Render a line-numbered diff with word-level change highlighting."""
    from diffrender.config import load_config
    from diffrender.exception import ConfigError
    from diffrender.render import DiffRenderer, RenderDiffOptions
    from diffrender.utils.logging import configure_logging, logger

    levels = _parse_log_level_overrides(log_level_override)
    if debug or levels or log_file is not None:
        try:
            configure_logging(
                base_level="DEBUG" if debug else "INFO",
                module_levels=levels,
                log_file=log_file,
            )
        except ValueError as exc:
            raise click.BadOptionUsage(_LOG_LEVEL_OPTION, str(exc)) from exc

    try:
        config = load_config(config_file)
    except ConfigError as exc:
        raise click.BadOptionUsage("--config-file", exc.message) from exc
    if no_syntax:
        config = config.model_copy(update={"syntax_highlight": False})

    diff_text = diff_file.read()
    if diff_text.endswith("\n"):
        diff_text = diff_text[:-1]
    if not diff_text:
        return
    logger.debug("Rendering {count} diff lines", count=diff_text.count("\n") + 1)

    rendered = DiffRenderer.from_config(config).render(
        diff_text, RenderDiffOptions(file_path=file_path)
    )
    console = Console(highlight=False, emoji=False, markup=False)
    console.print(rendered, soft_wrap=True)


def _parse_log_level_overrides(values: tuple[str, ...]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for raw in values:
        entry = raw.strip()
        if not entry:
            raise click.BadOptionUsage(_LOG_LEVEL_OPTION, "Log level override cannot be empty")
        if "=" in entry:
            module, level = entry.split("=", 1)
            module = module.strip()
            if not module:
                raise click.BadOptionUsage(
                    _LOG_LEVEL_OPTION,
                    "Module name is required before '=' when using --log-level",
                )
        else:
            module = _DEFAULT_LOG_LEVEL_KEY
            level = entry
        level = level.strip()
        if not level:
            raise click.BadOptionUsage(_LOG_LEVEL_OPTION, "Log level cannot be empty")
        overrides[_normalize_module_key(module)] = level
    return overrides


def _normalize_module_key(module: str) -> str:
    normalized = module.strip().rstrip(".").lower()
    return normalized or _DEFAULT_LOG_LEVEL_KEY


def main():
    diffrender()


if __name__ == "__main__":
    main()
