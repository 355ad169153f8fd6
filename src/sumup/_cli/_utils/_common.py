import json
import os
from typing import Any, Iterable, Optional

import click

from ..._config import SumUpEnvironment
from ..._utils.constants import ENV_BASE_URL


def environment_options(function):
    function = click.option(
        "--sandbox",
        "environment",
        flag_value="sandbox",
        help="Use the sandbox environment",
    )(function)
    function = click.option(
        "--production",
        "environment",
        flag_value="production",
        help="Use the production environment",
    )(function)
    return function


def resolve_base_url(environment: Optional[str]) -> Optional[str]:
    if environment == "sandbox":
        return SumUpEnvironment.SANDBOX
    if environment == "production":
        return SumUpEnvironment.PRODUCTION
    return os.environ.get(ENV_BASE_URL) or None


def parse_pairs(values: Iterable[str], option_name: str) -> list[tuple[str, str]]:
    """Split ``key=value`` arguments, keeping order and repeated keys."""
    pairs: list[tuple[str, str]] = []
    for value in values:
        key, separator, item = value.partition("=")
        if not separator or not key:
            raise click.BadParameter(
                f"'{value}' is not in key=value form", param_hint=option_name
            )
        pairs.append((key, item))
    return pairs


def format_json(data: Any) -> str:
    if isinstance(data, str):
        return data
    return json.dumps(data, indent=2)
