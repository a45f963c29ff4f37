#!/usr/bin/env python3

import sys

import click
from dotenv import load_dotenv

from form_validator.error_details import get_error_human_message
from form_validator.utils.logging import get_logger, setup_logging
from form_validator.validation import RULES, ValidationService, validate_field, when

logger = get_logger("cli")


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx) -> None:
    """Form Validator - Validate and normalize submitted form fields"""
    load_dotenv()
    try:
        setup_logging()
    except Exception as e:
        raise click.ClickException(get_error_human_message(e)) from e

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("value", required=False, default="")
@click.option(
    "--from-file",
    type=click.File("r", encoding="utf-8"),
    help="Read the field value verbatim from a file ('-' for stdin)",
)
@click.option(
    "--section",
    default="value",
    show_default=True,
    help="Form section name used in error messages",
)
@click.option(
    "--rule",
    "rules",
    multiple=True,
    required=True,
    type=click.Choice(sorted(RULES)),
    help="Rule to apply, in order. Repeat for a chain, e.g. --rule input --rule email",
)
@click.option(
    "--skip",
    is_flag=True,
    default=False,
    help="Treat every rule as not applicable (always passes)",
)
def check(value, from_file, section, rules, skip) -> None:
    """Run VALUE through one or more validation rules"""
    if from_file is not None:
        try:
            value = from_file.read()
        except Exception as e:
            raise click.ClickException(get_error_human_message(e)) from e

    stages = [when(not skip, RULES[name]) for name in rules]
    service = ValidationService()

    logger.info("Checking field", section=section, rules=",".join(rules))
    result = validate_field(service, section, value, *stages)

    if service.has_errors():
        click.echo(service.format_error_report(), err=True)
        sys.exit(1)

    click.echo(result.value)


@cli.command(name="rules")
def list_rules() -> None:
    """List the available validation rules"""
    for name in sorted(RULES):
        click.echo(name)


if __name__ == "__main__":
    cli()
