"""Coordinate detection, parsing and conversion CLI commands."""

import json
from enum import Enum
from pathlib import Path
from typing import Any

import typer
import yaml

from coordinate_search.cli.main import app
from coordinate_search.config import DisplayConfig, load_config
from coordinate_search.converter import convert, to_ddm, to_dms
from coordinate_search.detector import detect_format
from coordinate_search.formats import Axis, CoordinateFormat
from coordinate_search.formatter import format_ddm, format_decimal, format_dms
from coordinate_search.models import (
    CoordinatePair,
    DDCoordinate,
    DDMCoordinate,
    DecimalPair,
    DMSCoordinate,
    ParsedCoordinate,
)
from coordinate_search.search import Resolution, conversions, resolve


class OutputFormat(str, Enum):
    """Output format options."""

    HUMAN = "human"
    JSON = "json"
    YAML = "yaml"


class TargetFormat(str, Enum):
    """Conversion targets."""

    DD = "dd"
    DMS = "dms"
    DDM = "ddm"
    ALL = "all"


def _resolve_or_exit(text: str) -> Resolution:
    resolution = resolve(text)
    if resolution is None:
        typer.echo("Error: No coordinate entered", err=True)
        raise typer.Exit(1)
    if not resolution.valid:
        typer.echo(f"Error: {resolution.error} (detected format: {resolution.format_label})", err=True)
        raise typer.Exit(1)
    return resolution


def _load_config_or_exit(config_file: Path | None) -> DisplayConfig:
    try:
        return load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("detect")
def detect_command(
    text: str = typer.Argument(..., help="Coordinate string, e.g. \"40 42 46 N\""),
) -> None:
    """
    Print the detected format of a single coordinate string.

    Example:
        coords detect "40°42'46\\"N"
        coords detect "40 42.767 N"
    """
    typer.echo(detect_format(text).value)


@app.command("parse")
def parse_command(
    text: str = typer.Argument(..., help="Coordinate or \"latitude, longitude\" pair"),
    output_format: OutputFormat = typer.Option(
        OutputFormat.HUMAN,
        "--format",
        "-f",
        help="Output format",
    ),
    config_file: Path | None = typer.Option(None, "--config", help="Display configuration YAML"),
) -> None:
    """
    Parse a coordinate or coordinate pair and show its components.

    Example:
        coords parse "57.2411118, 12°6'25\\"E"
        coords parse "18°3'46\\"E" --format json
    """
    config = _load_config_or_exit(config_file)
    resolution = _resolve_or_exit(text)
    data = _resolution_to_dict(resolution)

    if output_format == OutputFormat.HUMAN:
        output = _format_human_readable(resolution, config)
    elif output_format == OutputFormat.JSON:
        output = json.dumps(data, indent=2, ensure_ascii=False)
    else:  # YAML
        output = yaml.safe_dump(data, sort_keys=False, allow_unicode=True).rstrip()

    typer.echo(output)


@app.command("convert")
def convert_command(
    text: str = typer.Argument(..., help="Coordinate or \"latitude, longitude\" pair"),
    to: TargetFormat = typer.Option(TargetFormat.ALL, "--to", "-t", help="Target notation"),
    axis: Axis | None = typer.Option(
        None, help="Axis of a single value (default: from its direction letter)"
    ),
    precision: int | None = typer.Option(
        None, help="Decimal places for DD output (default: from configuration)"
    ),
    plain: bool = typer.Option(False, "--plain", help="Space-separated DMS/DDM without symbols"),
    config_file: Path | None = typer.Option(None, "--config", help="Display configuration YAML"),
) -> None:
    """
    Convert a coordinate or coordinate pair to another notation.

    Example:
        coords convert "40°42'46\\"N, 74°0'21\\"W" --to dd
        coords convert "59°18.074'N" --to dms --plain
        coords convert -- "-33.8688" --axis latitude
    """
    config = _load_config_or_exit(config_file)
    try:
        config = DisplayConfig(
            precision=config.precision if precision is None else precision,
            symbolic=config.symbolic and not plain,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    resolution = _resolve_or_exit(text)
    if axis is not None and resolution.is_pair:
        typer.echo("Error: --axis applies to single coordinates, not pairs", err=True)
        raise typer.Exit(1)

    if to == TargetFormat.ALL:
        for conversion in conversions(resolution, config, axis):
            typer.echo(f"{conversion.format.value:<4} {conversion.value}")
        return

    target = CoordinateFormat(to.value.upper())
    if isinstance(resolution.decimal, DecimalPair):
        lat, lng = resolution.decimal.latitude, resolution.decimal.longitude
        output = (
            f"{_render(lat, Axis.LATITUDE, target, config)}, "
            f"{_render(lng, Axis.LONGITUDE, target, config)}"
        )
    elif target is CoordinateFormat.DD:
        output = format_decimal(resolution.decimal.value, config.precision)
    else:
        output = _render_value(convert(resolution.parsed, target, axis), config)

    typer.echo(output)


def _render(decimal: float, axis: Axis, target: CoordinateFormat, config: DisplayConfig) -> str:
    """Render one decimal value of a pair in the target notation."""
    if target is CoordinateFormat.DMS:
        return format_dms(to_dms(decimal, axis), config.symbolic)
    if target is CoordinateFormat.DDM:
        return format_ddm(to_ddm(decimal, axis), config.symbolic)
    return format_decimal(decimal, config.precision)


def _render_value(value: ParsedCoordinate, config: DisplayConfig) -> str:
    if isinstance(value, DMSCoordinate):
        return format_dms(value, config.symbolic)
    if isinstance(value, DDMCoordinate):
        return format_ddm(value, config.symbolic)
    return format_decimal(value.degrees, config.precision)


def _coordinate_to_dict(value: ParsedCoordinate) -> dict[str, Any]:
    """Serialise a parsed coordinate with enum members replaced by their values."""
    data: dict[str, Any] = {"format": value.format.value, "valid": value.valid}
    if isinstance(value, DDCoordinate):
        data.update(degrees=value.degrees, direction=value.direction.value)
    elif isinstance(value, DMSCoordinate):
        data.update(
            degrees=value.degrees,
            minutes=value.minutes,
            seconds=value.seconds,
            direction=value.direction.value,
            sign=value.sign,
        )
    elif isinstance(value, DDMCoordinate):
        data.update(
            degrees=value.degrees,
            minutes=value.minutes,
            direction=value.direction.value,
            sign=value.sign,
        )
    return data


def _resolution_to_dict(resolution: Resolution) -> dict[str, Any]:
    data: dict[str, Any] = {"input": resolution.text, "format": resolution.format_label}
    parsed = resolution.parsed
    if isinstance(parsed, CoordinatePair):
        data["latitude"] = _coordinate_to_dict(parsed.latitude)
        data["longitude"] = _coordinate_to_dict(parsed.longitude)
        data["decimal"] = {
            "latitude": resolution.decimal.latitude,
            "longitude": resolution.decimal.longitude,
        }
    else:
        data["coordinate"] = _coordinate_to_dict(parsed)
        data["decimal"] = {"value": resolution.decimal.value}
    return data


def _format_human_readable(resolution: Resolution, config: DisplayConfig) -> str:
    """Format result for human-readable output."""
    lines = [
        "=" * 60,
        f"COORDINATE - {resolution.text}",
        "=" * 60,
        "",
        f"Detected format: {resolution.format_label}",
    ]

    parsed = resolution.parsed
    if isinstance(parsed, CoordinatePair):
        decimal = resolution.decimal
        lines += [
            f"  Latitude:  {format_decimal(decimal.latitude, config.precision)}° ({parsed.latitude.format.value})",
            f"  Longitude: {format_decimal(decimal.longitude, config.precision)}° ({parsed.longitude.format.value})",
        ]
    else:
        lines += [
            f"  Value:     {format_decimal(resolution.decimal.value, config.precision)}° ({parsed.format.value})",
            f"  Direction: {parsed.direction.value}",
        ]

    lines += ["", "Conversions:"]
    for conversion in conversions(resolution, config):
        lines.append(f"  {conversion.format.value:<4} {conversion.value}")

    return "\n".join(lines)
