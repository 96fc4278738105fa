"""
CLI commands for cql-config.

Uses click for command-line argument parsing. Config strings may be passed
as an argument or through the ``CQL_CONFIG`` environment variable, which is
also read from a ``.env`` file.
"""

import json
import logging
import sys
from typing import IO

import click
from dotenv import find_dotenv, load_dotenv

from ..cluster_config import ClusterConfig
from ..config_string import from_config_string, to_config_string
from ..exceptions import ConfigSchemaError, ConfigStringError
from ..schema import config_from_dict, config_to_dict

CONFIG_ENVVAR = "CQL_CONFIG"


def parse_or_exit(config: str) -> ClusterConfig:
    """Parse a config string, exiting with status 1 on failure."""
    try:
        return from_config_string(config)
    except ConfigStringError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Load environment variables from this file (default: nearest .env)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(env_file: str | None, verbose: bool) -> None:
    """Encode and decode cluster config strings."""
    load_dotenv(env_file or find_dotenv(usecwd=True))
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("cql_config").setLevel(logging.DEBUG)


@cli.command()
@click.argument("config", envvar=CONFIG_ENVVAR)
@click.option("--indent", default=2, show_default=True, help="JSON indentation")
def decode(config: str, indent: int) -> None:
    """Parse a config string and print it as JSON."""
    cluster_config = parse_or_exit(config)
    click.echo(json.dumps(config_to_dict(cluster_config), indent=indent, ensure_ascii=False))


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
def encode(source: IO[str]) -> None:
    """Read a JSON config from SOURCE (default: stdin) and print its config string."""
    try:
        data = json.load(source)
    except json.JSONDecodeError as e:
        click.echo(f"Error: invalid JSON: {e}", err=True)
        sys.exit(1)

    if not isinstance(data, dict):
        click.echo("Error: expected a JSON object", err=True)
        sys.exit(1)

    try:
        cluster_config = config_from_dict(data)
    except ConfigSchemaError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(to_config_string(cluster_config))


@cli.command()
@click.argument("config", envvar=CONFIG_ENVVAR)
def check(config: str) -> None:
    """Validate a config string and print its canonical form."""
    cluster_config = parse_or_exit(config)
    click.echo(f"OK: {to_config_string(cluster_config)}")
