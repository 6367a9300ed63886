import json
import logging

import click

from .config import GeneratorConfig, OutputMode
from .errors import SwaggerToTsError
from .generator import TypesGenerator


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--force/--no-force",
    default=None,
    help="Overwrite existing files (default) or fail if a generated file already exists",
)
@click.option("--format", "format_", is_flag=True, default=False, help="Run prettier on generated files")
@click.option("--no-generation-comment", is_flag=True, default=False, help="Do not stamp generated files")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", type=click.Path(file_okay=False, resolve_path=True))
def swagger_to_ts(config, force, format_, no_generation_comment, verbose, path, output):
    """Generate TypeScript interfaces and enums from the definitions of a Swagger/OpenAPI document."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    with open(path) as f:
        try:
            document = json.load(f)
        except json.JSONDecodeError as e:
            raise click.ClickException(f"{click.format_filename(path)} is not valid JSON: {e}") from e

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    # CLI flags override the config file
    if force is not None:
        config.output.mode = OutputMode.FORCE if force else OutputMode.ERROR_IF_EXISTS
    if format_:
        config.formatter.enabled = True
    if no_generation_comment:
        config.add_generation_comment = False

    click.echo(f"writing models in {output}")
    try:
        written = TypesGenerator(config).make_types(document, output)
    except (SwaggerToTsError, FileExistsError) as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"done: {len(written)} files")
