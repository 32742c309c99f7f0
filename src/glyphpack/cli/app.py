"""CLI application entry point for glyphpack.

This module provides the main CLI interface using Typer.
"""

import re
from pathlib import Path
from typing import Annotated

import typer

from glyphpack import __version__
from glyphpack.cli.output import (
    SYM_OK,
    console,
    create_progress,
    print_error,
    print_header,
    print_source_info,
    print_stage_error,
    print_step,
    print_success,
)
from glyphpack.config import (
    GeneratorConfig,
    GlyphPackSettings,
    IconStyle,
    LoggingConfig,
    ProcessingConfig,
    RenderConfig,
)
from glyphpack.core import FontCatalog, PackGenerator
from glyphpack.exceptions import GlyphPackError
from glyphpack.io import (
    default_pack_dirname,
    resolve_catalog_source,
    resolve_font_sources,
)
from glyphpack.io.assets import COMMON_ASSETS, copy_common_assets
from glyphpack.io.sources import DEFAULT_FREE_ROOT, DEFAULT_PRO_ROOT
from glyphpack.utils import configure_logging

HEX_COLOR = re.compile(r"^(?:[a-fA-F0-9]{3}){1,2}$")

app = typer.Typer(
    name="glyphpack",
    help="Render glyph-font icon sets into PNG icon packs with a JSON manifest.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphpack[/bold blue] v{__version__}")
        raise typer.Exit()


def validate_hex_color(value: str) -> str:
    """Check a 3- or 6-digit hex color (no leading #)."""
    if not HEX_COLOR.match(value):
        raise typer.BadParameter(f"'{value}' is not a hex color, use 3 or 6 hex digits")
    return value


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render glyph-font icon sets into PNG icon packs."""


@app.command()
def generate(
    style: Annotated[
        IconStyle,
        typer.Option(
            "--style",
            "-s",
            help="Icon style (light, sharp and thin need --licensed)",
            case_sensitive=False,
        ),
    ] = IconStyle.SOLID,
    background_color: Annotated[
        str,
        typer.Option(
            "--background-color",
            "-b",
            help="Background color (hex)",
            callback=validate_hex_color,
        ),
    ] = "0A1423",
    icon_color: Annotated[
        str,
        typer.Option(
            "--icon-color",
            "-i",
            help="Icon color (hex)",
            callback=validate_hex_color,
        ),
    ] = "FFFFFF",
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Pack directory (default: com.fortawsome.{style}.free.sdIconPack)",
        ),
    ] = None,
    licensed: Annotated[
        bool,
        typer.Option(
            "--licensed",
            help="Use the licensed font and metadata set",
        ),
    ] = False,
    free_root: Annotated[
        Path,
        typer.Option(
            "--free-root",
            help="Root of the free icon package (webfonts/ and metadata/)",
        ),
    ] = DEFAULT_FREE_ROOT,
    pro_root: Annotated[
        Path,
        typer.Option(
            "--pro-root",
            help="Directory holding the licensed fonts and metadata",
        ),
    ] = DEFAULT_PRO_ROOT,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto, 1 = no worker processes)",
            min=1,
        ),
    ] = None,
    skip_invalid: Annotated[
        bool,
        typer.Option(
            "--skip-invalid",
            help="Skip icons with undecodable code points instead of aborting",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Generate an icon pack for one style.

    Renders every icon available in the style as a 144x144 PNG under
    {output}/icons/ and writes {output}/icons.json with names, file names
    and search tags.

    Example:
        glyphpack generate --style brands --icon-color FFFFFF --background-color 000
    """
    if not licensed and style not in IconStyle.free_styles():
        print_error(
            f"Style '{style.value}' is only available with --licensed",
            details="Free styles: regular, solid, brands",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = GlyphPackSettings(
        render=RenderConfig(),
        processing=ProcessingConfig(
            max_workers=workers,
            skip_invalid_glyphs=skip_invalid,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    root = pro_root if licensed else free_root
    output_root = output if output is not None else Path(default_pack_dirname(style, licensed))

    try:
        if not quiet:
            print_step("Loading fonts")

        fonts = FontCatalog.from_sources(
            resolve_font_sources(root, licensed),
            font_size=settings.render.font_size,
        )
        source = resolve_catalog_source(root, licensed)

        if not quiet:
            print_source_info(
                style=style.value,
                family=fonts.family_for(style),
                licensed=licensed,
                metadata_path=str(source.icons_path),
            )

        generator = PackGenerator(source, fonts, settings, logger=logger)
        config = GeneratorConfig(
            style=style,
            icon_color=icon_color,
            background_color=background_color,
            output_root=output_root,
            licensed=licensed,
        )

        if not quiet:
            print_step("Rendering icons")
            with create_progress() as progress:
                task_id = progress.add_task("Rendering", total=None)

                def update_progress(completed: int, total: int, *_: object) -> None:
                    progress.update(task_id, completed=completed, total=total)

                result = generator.generate(config, progress_callback=update_progress)
        else:
            result = generator.generate(config)

    except GlyphPackError as e:
        print_stage_error(e)
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        if not quiet:
            print_error("Cancelled", details="Re-run to regenerate the pack from scratch")
        raise typer.Exit(code=130) from None

    if not quiet and result.stats is not None:
        print_success(
            output_path=str(result.root),
            total_time_s=result.stats.duration_seconds,
            rendered=result.stats.rendered_count,
            skipped=result.stats.skipped_count,
            errors=result.stats.error_count,
            avg_time_ms=result.stats.avg_icon_time_ms,
        )


@app.command("copy-assets")
def copy_assets(
    assets_dir: Annotated[
        Path,
        typer.Argument(
            help="Directory holding license.txt and icon.svg",
            show_default=False,
        ),
    ],
    pack_roots: Annotated[
        list[Path],
        typer.Argument(
            help="Pack directories to copy the assets into",
            show_default=False,
        ),
    ],
) -> None:
    """Copy the shared license and pack icon into one or more packs."""
    if not assets_dir.is_dir():
        print_error(f"Assets directory not found: {assets_dir}")
        raise typer.Exit(code=1)

    try:
        written = copy_common_assets(assets_dir, pack_roots)
    except GlyphPackError as e:
        print_stage_error(e)
        raise typer.Exit(code=1)

    for path in written:
        console.print(f"  {SYM_OK} {path}")
    if not written:
        console.print(f"  No assets found ({', '.join(COMMON_ASSETS)})")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
