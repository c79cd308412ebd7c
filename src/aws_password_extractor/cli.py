#!/usr/bin/env python3
"""
AWS Password Extractor - CLI
Recover the initial administrator passwords of EC2 instances into a text report
"""

import sys

import click

from aws_password_extractor import __version__
from aws_password_extractor.core.constants import VERBOSITY_CHOICES
from aws_password_extractor.core.models.request import ExtractionRequest
from aws_password_extractor.jobs.output_file_generator import OutputFileGenerator
from aws_password_extractor.utils.config import ConfigManager
from aws_password_extractor.utils.exceptions import ConfigurationError
from aws_password_extractor.utils.logger import PACKAGE_LOGGER, setup_logger


def setup_logging(config: ConfigManager, verbosity=None, log_file=None):
    level = verbosity or config.get_logging_level()
    return setup_logger(PACKAGE_LOGGER, log_file or config.get_logging_file(), level)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--aws-region", required=True, help='The AWS region in which your instances reside, for example "eu-west-1".')
@click.option("--output-file", required=True, type=click.Path(dir_okay=False), help="Report destination. Overwritten if it exists.")
@click.option("--password-encryption-key-file", type=click.Path(dir_okay=False), help="Private key used to decrypt instance passwords.")
@click.option("--password-encryption-key-file-directory", type=click.Path(file_okay=False), help="Directory of private keys, tried in file name order.")
@click.option("--access-key-id", help="AWS access key ID. Requires --secret-access-key.")
@click.option("--secret-access-key", help="AWS secret access key. Requires --access-key-id.")
@click.option("--role-arn", help="IAM role ARN to assume before calling EC2.")
@click.option(
    "--verbosity",
    type=click.Choice(VERBOSITY_CHOICES, case_sensitive=False),
    default=None,
    help="Log level (default: Warn)",
)
@click.option("--config-file", type=click.Path(dir_okay=False), help="YAML settings file.")
@click.option("--log-file", help="Also write logs to this file (under logs/ when a bare name).")
@click.version_option(__version__, prog_name="AWS Password Extractor")
def cli(
    aws_region,
    output_file,
    password_encryption_key_file,
    password_encryption_key_file_directory,
    access_key_id,
    secret_access_key,
    role_arn,
    verbosity,
    config_file,
    log_file,
):
    """Extract EC2 instance connection details and passwords to a text file"""
    try:
        config = ConfigManager(config_file)
        logger = setup_logging(config, verbosity, log_file)
    except (ConfigurationError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logger.debug("Starting extraction", extra={"region": aws_region})

    request = ExtractionRequest(
        region=aws_region,
        output_file=output_file,
        key_file=password_encryption_key_file,
        key_directory=password_encryption_key_file_directory,
        access_key_id=access_key_id,
        secret_access_key=secret_access_key,
        role_arn=role_arn,
    )
    success = OutputFileGenerator(config).create_output_file(request)
    sys.exit(0 if success else 1)


def main():
    cli()


if __name__ == "__main__":
    main()
