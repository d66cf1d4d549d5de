"""
acme-conf CLI - Main entry point.

Inspect and prepare the local ACME account record and key.
Nothing here talks to the CA.
"""

import logging
import sys

import click
import structlog
from tabulate import tabulate

from acmeconf import __version__
from acmeconf.accounts import read_account, render_account
from acmeconf.certs import read_certificate
from acmeconf.config import AcmeConfig
from acmeconf.errors import AcmeConfError, NotFoundError
from acmeconf.files import ensure_config_dir
from acmeconf.keys import resolve_key

logger = structlog.get_logger()


def configure_logging(level: str, json_logs: bool = False) -> None:
    """Configure structlog to write to stderr at the given level."""
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


@click.group()
@click.version_option(version=__version__)
@click.option(
    '--config-dir', '-c',
    type=click.Path(file_okay=False),
    help='Config directory (overrides ACME_CONFIG)',
)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option('--json-logs', is_flag=True, help='Emit logs as JSON')
@click.pass_context
def cli(ctx, config_dir, verbose, json_logs):
    """
    acme-conf - Manage local ACME account material.

    \b
    Examples:
        acme-conf whoami             Show the stored account
        acme-conf keygen             Create the account key if missing
        acme-conf cert cert.pem      Describe a PEM certificate
    """
    config = AcmeConfig().with_override(config_dir)
    configure_logging("debug" if verbose else config.log_level, json_logs)

    ctx.ensure_object(dict)
    ctx.obj['config'] = config


@cli.command()
@click.pass_context
def whoami(ctx):
    """Show the stored account."""
    config = ctx.obj['config']

    try:
        account = read_account(config.config_dir)
    except NotFoundError:
        raise click.ClickException(
            f"No account found in {config.config_dir}. Register one first."
        )
    except (AcmeConfError, OSError) as e:
        raise click.ClickException(str(e))

    click.echo(render_account(account.record, account.key_path))

    if account.key_error is not None:
        click.echo(f"Warning: account key is unusable: {account.key_error}", err=True)
    elif not account.has_key:
        click.echo("Warning: no account key. Create one with: acme-conf keygen", err=True)


@cli.command()
@click.option('--no-generate', is_flag=True, help='Only load an existing key')
@click.pass_context
def keygen(ctx, no_generate):
    """Load the account key, generating it if missing."""
    config = ctx.obj['config']

    try:
        if not no_generate:
            ensure_config_dir(config.config_dir)
        key = resolve_key(config.key_path, allow_generate=not no_generate)
    except NotFoundError:
        raise click.ClickException(f"No account key at {config.key_path}")
    except (AcmeConfError, OSError) as e:
        raise click.ClickException(str(e))

    click.echo(f"Key: {config.key_path}")
    click.echo(f"Size: {key.key_size} bits")


@cli.command()
@click.argument('path', type=click.Path(dir_okay=False))
def cert(path):
    """Describe a PEM certificate."""
    try:
        crt = read_certificate(path)
    except (AcmeConfError, OSError) as e:
        raise click.ClickException(str(e))

    rows = [
        ['Subject:', crt.subject.rfc4514_string()],
        ['Issuer:', crt.issuer.rfc4514_string()],
        ['Serial:', format(crt.serial_number, 'x')],
        ['Not before:', crt.not_valid_before_utc.isoformat()],
        ['Not after:', crt.not_valid_after_utc.isoformat()],
    ]
    click.echo(tabulate(rows, tablefmt='plain', disable_numparse=True))


@cli.command('config')
@click.pass_context
def show_config(ctx):
    """Show the resolved configuration paths."""
    config = ctx.obj['config']

    rows = [
        ['Config dir:', str(config.config_dir)],
        ['Account:', str(config.account_path)],
        ['Key:', str(config.key_path)],
    ]
    click.echo(tabulate(rows, tablefmt='plain', disable_numparse=True))


if __name__ == '__main__':
    cli()
