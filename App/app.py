"""pic2string - Main entry point."""

import sys
from pathlib import Path

import click

from chords_to_instructions import ChordsToInstructionsConverter
from config_manager import ConfigManager
from models import CONFIG_FILE, ConfigurationError, StringArtConfig
from string_art import StringArtProcessor


def apply_overrides(config: StringArtConfig, **overrides) -> StringArtConfig:
    """Apply command-line values on top of loaded settings, skipping unset ones."""
    for name, value in overrides.items():
        if value is not None:
            setattr(config, name, value)
    return config


def write_output(path: Path, content: str) -> None:
    """Write a text output file, exiting with an error message on failure."""
    try:
        path.write_text(content)
    except OSError as e:
        click.echo(f"Error: Failed to write {path}: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("input_image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output_image", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--pegs", "pegs_x", type=int, help="Pegs per edge (horizontal edges with --pegs-y)")
@click.option("--pegs-y", type=int, help="Pegs on each vertical edge")
@click.option("-n", "--passes", type=int, help="Maximum number of passes")
@click.option("--intensity", "pass_intensity", type=int, help="Brightness added per chord (1-255)")
@click.option("-d", "--depth", "search_depth", type=int, help="Search lookahead in chords")
@click.option(
    "--retry/--no-retry",
    "retry_deepening",
    default=None,
    help="Search one level deeper when no improving chord is found",
)
@click.option("--jitter", type=int, help="Maximum random endpoint displacement in pixels")
@click.option("--seed", type=int, help="Random seed for jitter")
@click.option(
    "--invert/--no-invert",
    default=None,
    help="Dark thread on light background (default) or light on dark",
)
@click.option("--max-size", type=int, help="Downscale so the longest side fits this many pixels")
@click.option("--progress-interval", type=int, help="Passes between progress lines")
@click.option(
    "--svg",
    "svg_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write the chord path as SVG",
)
@click.option(
    "--instructions",
    "instructions_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write peg-by-peg stringing instructions",
)
@click.option(
    "--mm-per-pixel",
    type=click.FloatRange(min=0, min_open=True),
    help="Board size of one processed pixel, for a thread length estimate in mm",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=CONFIG_FILE,
    show_default=True,
    help="Settings file to load defaults from",
)
@click.option("--save-config", is_flag=True, help="Save the effective settings to --config")
@click.option("-q", "--quiet", is_flag=True, help="Only print errors")
def main(
    input_image: Path,
    output_image: Path,
    pegs_x: int | None,
    pegs_y: int | None,
    passes: int | None,
    pass_intensity: int | None,
    search_depth: int | None,
    retry_deepening: bool | None,
    jitter: int | None,
    seed: int | None,
    invert: bool | None,
    max_size: int | None,
    progress_interval: int | None,
    svg_path: Path | None,
    instructions_path: Path | None,
    mm_per_pixel: float | None,
    config_path: Path,
    save_config: bool,
    quiet: bool,
) -> None:
    """Render INPUT_IMAGE as string art and save it to OUTPUT_IMAGE."""
    manager = ConfigManager(config_path, verbose=not quiet)
    config = apply_overrides(
        manager.load(),
        pegs_x=pegs_x,
        pegs_y=pegs_y,
        passes=passes,
        pass_intensity=pass_intensity,
        search_depth=search_depth,
        retry_deepening=retry_deepening,
        jitter=jitter,
        seed=seed,
        invert=invert,
        max_size=max_size,
        progress_interval=progress_interval,
    )

    try:
        config.validate()
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if save_config:
        saved, error = manager.save(config)
        if not saved:
            click.echo(f"Warning: Could not save config file: {error}", err=True)

    processor = StringArtProcessor(config, verbose=not quiet)
    try:
        processed = processor.process(input_image)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    result = processed.result
    converter = ChordsToInstructionsConverter(result.pegs)
    valid, errors = converter.validate_chords(result.chords)
    if not valid:
        for message in errors:
            click.echo(f"Error: {message}", err=True)
        sys.exit(1)

    try:
        processed.image.save(output_image)
    except (OSError, ValueError) as e:
        click.echo(f"Error: Failed to save image: {e}", err=True)
        sys.exit(1)

    if not quiet:
        click.echo(f"Output: {output_image}")

    if svg_path:
        write_output(svg_path, processor.to_svg(processed))
        if not quiet:
            click.echo(f"SVG: {svg_path}")

    if instructions_path:
        lines = converter.chords_to_instructions(result.chords)
        write_output(instructions_path, "\n".join(lines) + "\n")
        if not quiet:
            click.echo(f"Instructions: {instructions_path} ({len(lines)} chords)")

    if mm_per_pixel and not quiet:
        length = converter.estimate_thread_length(result.chords, mm_per_pixel)
        click.echo(f"Thread length: {length / 1000:.2f} m")


if __name__ == "__main__":
    main()
