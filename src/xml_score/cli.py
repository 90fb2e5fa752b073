import os
import sys
from pathlib import Path
from typing import Optional

import typer
import yaml
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from xml_score.converter import convert_file, to_json_text
from xml_score.constants import FILE_ENCODING
from xml_score.errors import ConversionError
from xml_score.logging_setup import configure_logging, get_logger
from xml_score.observers import LoggingObserver
from xml_score.rules import ExtractionRule
from xml_score.settings import Settings

console = Console(stderr=True)

app = typer.Typer(help="Convert XML to JSON and add the summed match score.")


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(
        None, "--config", help="YAML config file (default: $XML_SCORE_CONFIG)."
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level"),
    log_format: Optional[str] = typer.Option(None, "--log-format", help="json or human"),
):
    load_dotenv(override=False)
    ctx.ensure_object(dict)
    cfg_path = config or os.getenv("XML_SCORE_CONFIG")
    try:
        settings = Settings.load(cfg_path)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        console.print(f"[red]Invalid configuration[/] {cfg_path}: {escape(str(e))}")
        raise typer.Exit(code=1)
    ctx.obj["SETTINGS"] = settings
    ctx.obj["CONFIG_PATH"] = cfg_path

    configure_logging(
        level=log_level or settings.logging.level,
        format_type=log_format or settings.logging.format,
        structured=settings.logging.structured,
    )


@app.command()
def convert(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="XML file to convert"),
    score_tag: Optional[str] = typer.Option(None, "--score-tag", help="Tag whose values are summed"),
    target_path: Optional[str] = typer.Option(
        None, "--target-path", help="Dotted path of the summary object"
    ),
    result_key: Optional[str] = typer.Option(None, "--result-key"),
    indent: Optional[int] = typer.Option(None, "--indent", help="JSON indent spaces"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write JSON here instead of stdout"
    ),
):
    """Convert PATH and print the augmented JSON."""
    settings: Settings = ctx.obj["SETTINGS"]
    conv = settings.conversion
    try:
        rule = ExtractionRule(
            match_tag=score_tag or conv.score_tag,
            target_path=tuple(target_path.split(".")) if target_path else tuple(conv.target_path),
            result_key=result_key or conv.result_key,
            int_bits=conv.int_bits,
        )
    except ValidationError as e:
        console.print(f"[red]Invalid extraction rule[/]: {escape(str(e))}")
        raise typer.Exit(code=1)

    log = get_logger("xml_score.cli")
    try:
        result = convert_file(path, rule, LoggingObserver("xml_score.convert"))
    except ConversionError as e:
        log.error("Conversion failed", kind=e.kind, error=str(e), path=str(path))
        console.print(f"[bold red]{e.kind}[/]: {escape(str(e))}")
        raise typer.Exit(code=e.exit_code)

    text = to_json_text(result.data, indent if indent is not None else conv.indent)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding=FILE_ENCODING)
        typer.echo(str(output))
    else:
        typer.echo(text)

    if not result.complete:
        log.warning(
            "Conversion finished with warnings",
            warnings=len(result.warnings),
            summary_added=result.summary_added,
        )


@app.command("show-config")
def show_config(ctx: typer.Context):
    """Print the effective settings."""
    console.print(f"[bold cyan]xml-score[/] config: {ctx.obj['CONFIG_PATH'] or '(defaults)'}")
    typer.echo(ctx.obj["SETTINGS"].model_dump_json(indent=2))


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(130)
