import json
from typing import Optional

import click
from httpx import TransportError

from .._config import RequestOptions, SumUpClientOptions
from .._services import ApiClient
from .._utils._request_builder import path_parameter_names
from ..models._base import JsonDocument
from ..models.exceptions import ApiException, SumUpError
from ._utils._common import (
    environment_options,
    format_json,
    parse_pairs,
    resolve_base_url,
)


@click.command()
@click.argument("method")
@click.argument("path")
@click.option(
    "--query", "-q", "queries", multiple=True, help="Query parameter as key=value"
)
@click.option(
    "--header", "-H", "headers", multiple=True, help="Request header as name=value"
)
@click.option("--data", "-d", help="JSON request body")
@click.option("--token", help="Access token for this call only")
@click.option("--timeout", type=float, help="Timeout in seconds for this call")
@environment_options
def request(
    method: str,
    path: str,
    queries: tuple[str, ...],
    headers: tuple[str, ...],
    data: Optional[str],
    token: Optional[str],
    timeout: Optional[float],
    environment: Optional[str] = None,
):
    """Send METHOD PATH to the SumUp API and print the JSON response.

    PATH may contain {name} placeholders; pass their values with --query and
    they are bound as path parameters instead of query parameters.
    """
    query_pairs = parse_pairs(queries, "--query")
    header_pairs = parse_pairs(headers, "--header")

    if data is not None:
        try:
            json.loads(data)
        except ValueError as e:
            raise click.BadParameter(f"invalid JSON: {e}", param_hint="--data")

    options = SumUpClientOptions.from_environment()
    base_url = resolve_base_url(environment)
    if base_url:
        options.base_url = base_url

    path_names = path_parameter_names(path)

    def configure(builder):
        for key, value in query_pairs:
            if key.lower() in path_names:
                builder.add_path(key, value)
            else:
                builder.add_query(key, value)
        for name, value in header_pairs:
            builder.add_header(name, value)

    request_options = RequestOptions(access_token=token, timeout=timeout)

    with ApiClient(options) as api_client:
        try:
            spec = api_client.create_request(method, path, configure)
            response = api_client.send(
                spec,
                JsonDocument,
                body=data,
                request_options=request_options,
            )
        except ApiException as e:
            click.echo(str(e), err=True)
            if e.response_body:
                click.echo(e.response_body, err=True)
            raise click.exceptions.Exit(1)
        except (SumUpError, TransportError) as e:
            click.echo(f"Error: {e}", err=True)
            raise click.exceptions.Exit(1)

    if response.data is not None:
        click.echo(format_json(response.data.root))
    else:
        click.echo(f"{response.status_code} (empty response)")
