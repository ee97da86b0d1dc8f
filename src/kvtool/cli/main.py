from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import Annotated

import click
import typer
from result import Err, Ok, Result, is_err

from kvtool.codec import supported_codecs
from kvtool.commands import Command, CommandOptions, GetCommand, PutCommand
from kvtool.common import create_logger, setup_cli_logging
from kvtool.config import ConfigError, load_config
from kvtool.console import Console
from kvtool.constants import APP_NAME
from kvtool.settings import settings
from kvtool.store import supported_drivers

logger = create_logger("cli")

ArgsArgument = Annotated[
    list[str] | None,
    typer.Argument(metavar="LOCATION KEY [VALUE]", show_default=False),
]
DriverOption = Annotated[
    str | None,
    typer.Option("--driver", "-driver", "-d", help=f"Store type, one of: {', '.join(supported_drivers())}."),
]
BucketOption = Annotated[
    str | None,
    typer.Option("--bucket", "-bucket", "-b", help="Bucket (namespace) inside the store."),
]
CodecOption = Annotated[
    str | None,
    typer.Option(
        "--codec", "-codec", "-c", help=f"Byte encoding for values, one of: {', '.join(supported_codecs())}."
    ),
]

app = typer.Typer(
    help="Get and put single values in local key-value stores.",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)

# Options end at the first positional, so values such as "-1" pass through as VALUE.
COMMAND_CONTEXT = {"allow_interspersed_args": False}


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {settings.app.version}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    console = ctx.obj if isinstance(ctx.obj, Console) else Console()
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False
        console.color = False
    ctx.obj = console

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command(
    "get",
    context_settings=COMMAND_CONTEXT,
    help=f"{GetCommand.synopsis}.\n\nWrites the raw value to stdout without a trailing newline.",
)
def get(
    ctx: typer.Context,
    args: ArgsArgument = None,
    driver: DriverOption = None,
    bucket: BucketOption = None,
    codec: CodecOption = None,
) -> None:
    _run_command(ctx, GetCommand, args, driver=driver, bucket=bucket, codec=codec)


@app.command(
    "put",
    context_settings=COMMAND_CONTEXT,
    help=f"{PutCommand.synopsis}.\n\nWithout VALUE, the value is read from stdin until EOF.",
)
def put(
    ctx: typer.Context,
    args: ArgsArgument = None,
    driver: DriverOption = None,
    bucket: BucketOption = None,
    codec: CodecOption = None,
) -> None:
    _run_command(ctx, PutCommand, args, driver=driver, bucket=bucket, codec=codec)


def _run_command(
    ctx: typer.Context,
    command_cls: type[Command],
    args: list[str] | None,
    *,
    driver: str | None,
    bucket: str | None,
    codec: str | None,
) -> None:
    console: Console = ctx.obj
    match _command_options(driver=driver, bucket=bucket, codec=codec):
        case Ok(options):
            exit_code = command_cls(console, options).run(args or [])
        case Err(error):
            _handle_config_error(console, error)
            exit_code = 1

    if exit_code:
        raise typer.Exit(code=exit_code)


def _command_options(
    *,
    driver: str | None,
    bucket: str | None,
    codec: str | None,
) -> Result[CommandOptions, ConfigError]:
    return load_config(settings.paths).map(
        lambda config: CommandOptions(
            driver=driver if driver is not None else config.defaults.driver,
            bucket=bucket if bucket is not None else config.defaults.bucket,
            codec=codec if codec is not None else config.defaults.codec,
            store=config.store,
        )
    )


def _handle_config_error(console: Console, error: ConfigError) -> None:
    message = f"invalid configuration: {error.message}"
    field = getattr(error, "field", None)
    error_path = getattr(error, "path", None)
    if field:
        message = f"{message} (at '{field}')"
    hint = f"check {error_path}" if error_path is not None else "check KVTOOL_CONFIG__* environment variables"
    console.error(message, hint=hint)


def run(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Dispatch ``argv`` to a command and return the process exit code.

    Usage errors detected by the option parser (unknown options, missing option
    values) exit with 1 like every other failure.
    """
    console = console or Console()
    args = list(argv) if argv is not None else sys.argv[1:]
    try:
        exit_code = app(args=args, prog_name=APP_NAME, standalone_mode=False, obj=console)
    except click.UsageError as e:
        hint = f"run '{e.ctx.command_path} --help' for usage" if e.ctx is not None else None
        console.error(e.format_message(), hint=hint)
        return 1
    except click.ClickException as e:
        console.error(e.format_message())
        return 1
    except click.Abort:
        console.error("aborted")
        return 1

    return exit_code if isinstance(exit_code, int) else 0


def _setup_logging() -> None:
    result = load_config(settings.paths)
    if is_err(result):
        # Commands report the configuration error themselves.
        return

    logging_config = result.ok_value.logging
    if logging_config.enabled:
        try:
            setup_cli_logging(app_info=settings.app, config=logging_config, paths=settings.paths)
        except OSError:
            # Logging stays off when the log directory is not writable.
            return
        logger.debug("CLI logging initialized", config=logging_config.model_dump())


def main() -> None:
    """Entrypoint for the kvtool CLI."""
    _setup_logging()
    sys.exit(run())
