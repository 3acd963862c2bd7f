"""Command line driver that submits a single work order."""

from typing import Optional
import logging

import typer

from orchestrator_submit.configs import Config, load_config, setup_logging
from orchestrator_submit.core.exceptions import MalformedInputError, TransportError, UsageError
from orchestrator_submit.services import OrchestratorService
from orchestrator_submit.utils import parse_json_object

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Submit a work order to an Orchestrator server.",
    add_completion=False,
)


def _apply_overrides(config: Config, **overrides) -> Config:
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)
    return config


@app.command()
def submit(
    ctx: typer.Context,
    host_address: Optional[str] = typer.Option(
        None, "--host-address", metavar="ADDRESS", help="The server address of the Orchestrator server."
    ),
    host_port: Optional[int] = typer.Option(
        None,
        "--host-port",
        metavar="PORT",
        help="The port to use when communicating with the Orchestrator server.",
    ),
    username: Optional[str] = typer.Option(
        None,
        "--username",
        metavar="USERNAME",
        help="The username to use when communicating with the Orchestrator server.",
    ),
    password: Optional[str] = typer.Option(
        None,
        "--password",
        metavar="PASSWORD",
        help="The password to use when communicating with the Orchestrator server.",
    ),
    workflow_id: Optional[str] = typer.Option(
        None, "--workflow-id", metavar="ID", help="The id of the workflow to run."
    ),
    additional_arguments: Optional[str] = typer.Option(
        None,
        "--additional-arguments",
        metavar="JSON",
        help="A JSON Hash of arguments to submit as arguments to the workflow.",
    ),
    use_tls: Optional[bool] = typer.Option(
        None, "--use-tls/--no-use-tls", help="Talk to the server over HTTPS."
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", metavar="SECONDS", help="Give up on the server after this many seconds."
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", metavar="PATH", help="Path to a YAML configuration file."
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Fail when --additional-arguments is not a JSON object."
    ),
    debug: Optional[bool] = typer.Option(
        None, "--debug/--no-debug", help="Log each request and response."
    ),
) -> None:
    """Initiate a work order for a workflow."""
    try:
        response = _submit(
            workflow_id,
            additional_arguments,
            config_path=config_path,
            strict=strict,
            host_address=host_address,
            host_port=host_port,
            username=username,
            password=password,
            use_tls=use_tls,
            timeout=timeout,
            debug=debug,
        )
    except UsageError as exc:
        typer.echo(f"{exc}\n{ctx.get_usage()}", err=True)
        raise typer.Exit(code=1)
    except MalformedInputError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)
    except TransportError as exc:
        logger.error("Work order submission failed: %s", exc.cause or exc)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{response.status_code} {response.reason}")


def _submit(
    workflow_id: Optional[str],
    additional_arguments: Optional[str],
    *,
    config_path: Optional[str],
    strict: bool,
    **overrides,
):
    if not workflow_id:
        raise UsageError("workflow-id is a required argument.")

    config = _apply_overrides(load_config(config_path), **overrides)
    setup_logging(config)

    external_parameters = parse_json_object(
        additional_arguments, strict=strict or config.strict_additional_arguments
    )

    service = OrchestratorService.from_config(config)
    with service.client:
        return service.work_order_initiate(
            workflow_id,
            external_parameters,
            username=config.username,
            password=config.password,
        )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
