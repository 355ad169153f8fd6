import os

import click
from dotenv import load_dotenv

from .._utils._logs import setup_logging
from .._utils.constants import ENV_DEBUG
from .cli_request import request

load_dotenv()


@click.group()
@click.option("--debug", "-v", is_flag=True, help="Enable debug logging")
def cli(debug: bool = False) -> None:
    """SumUp command line tool."""
    setup_logging(debug or os.environ.get(ENV_DEBUG, "").lower() in ("1", "true"))


cli.add_command(request)
