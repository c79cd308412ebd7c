#!/usr/bin/env python3
"""Output file generation: validate, scan, render, write."""

from typing import Optional

from aws_password_extractor.core.models.credentials import CredentialSpec
from aws_password_extractor.core.models.request import ExtractionRequest
from aws_password_extractor.core.processors.instance_enumerator import InstanceEnumerator
from aws_password_extractor.core.processors.instance_scanner import InstanceScanner
from aws_password_extractor.core.processors.key_loader import KeyMaterialLoader
from aws_password_extractor.core.processors.report_generator import TextReportGenerator
from aws_password_extractor.jobs.base import BaseJob
from aws_password_extractor.utils.config import ConfigManager
from aws_password_extractor.utils.exceptions import ConfigurationError, ValidationRules
from aws_password_extractor.utils.filesystem import FileSystemProvider
from aws_password_extractor.utils.session import CredentialResolver, build_client_config


class OutputFileGenerator(BaseJob):
    """Top-level boundary of an extraction run.

    Validates the request, runs the scanner and writes the report. Every
    exception is caught here and turned into a False return.
    """

    def __init__(
        self,
        config_manager: Optional[ConfigManager] = None,
        instance_scanner: Optional[InstanceScanner] = None,
        file_system: Optional[FileSystemProvider] = None,
        report_generator: Optional[TextReportGenerator] = None,
    ):
        super().__init__(config_manager, job_name="extract_passwords")
        self.file_system = file_system or FileSystemProvider()
        self.report_generator = report_generator or TextReportGenerator()
        self._instance_scanner = instance_scanner

    @property
    def instance_scanner(self) -> InstanceScanner:
        """Scanner built from settings on first use."""
        if self._instance_scanner is None:
            client_config = build_client_config(
                connect_timeout=self.config_manager.get_connect_timeout(),
                read_timeout=self.config_manager.get_read_timeout(),
            )
            self._instance_scanner = InstanceScanner(
                credential_resolver=CredentialResolver(client_config=client_config),
                enumerator=InstanceEnumerator(
                    page_size=self.config_manager.get_page_size(),
                    max_pages=self.config_manager.get_max_pages(),
                    timeout_seconds=self.config_manager.get_timeout_seconds(),
                ),
                key_loader=KeyMaterialLoader(self.file_system),
                client_config=client_config,
            )
        return self._instance_scanner

    def validate(self, request: ExtractionRequest) -> Optional[CredentialSpec]:
        """Check the request before anything touches the network.

        Returns the explicit credential spec, or None for the credential chain.
        """
        if ValidationRules.is_blank(request.region):
            raise ConfigurationError("An AWS region must be supplied")
        if ValidationRules.is_blank(request.output_file):
            raise ConfigurationError("An output file must be supplied")

        explicit_keys = CredentialSpec.from_values(
            request.access_key_id, request.secret_access_key
        )

        if not ValidationRules.validate_key_source(request.key_file, request.key_directory):
            raise ConfigurationError(
                "Supply exactly one of --password-encryption-key-file and "
                "--password-encryption-key-file-directory"
            )

        if request.key_file:
            if not self.file_system.is_file(request.key_file):
                raise ConfigurationError(
                    f"Password encryption key file does not exist: {request.key_file}"
                )
        else:
            if not self.file_system.is_dir(request.key_directory):
                raise ConfigurationError(
                    f"Password encryption key directory does not exist: {request.key_directory}"
                )
            if not self.file_system.list_files(request.key_directory):
                raise ConfigurationError(
                    f"Password encryption key directory contains no files: {request.key_directory}"
                )

        if request.role_arn and not ValidationRules.validate_role_arn(request.role_arn):
            raise ConfigurationError(f"Invalid role ARN: {request.role_arn}")

        return explicit_keys

    def create_output_file(self, request: ExtractionRequest) -> bool:
        """Run the extraction and write the report.

        Returns True on success, including when there are no instances and
        therefore nothing is written.
        """
        try:
            explicit_keys = self.validate(request)
            self.logger.debug("Request validated", extra=self.log_extra(region=request.region))

            details = self.instance_scanner.extract_details(
                explicit_keys,
                request.region,
                key_file=request.key_file or None,
                key_directory=request.key_directory or None,
                role_arn=request.role_arn or None,
            )

            if not details:
                self.logger.warning(
                    "No instances found, output file not written",
                    extra=self.log_extra(region=request.region, output_file=request.output_file),
                )
                return True

            report = self.report_generator.render(details)
            self.file_system.write_text(request.output_file, report)
            self.logger.info(
                "Output file written",
                extra=self.log_extra(output_file=request.output_file, instances=len(details)),
            )
            return True

        except Exception as e:
            self.logger.critical(
                f"Password extraction failed: {e}",
                exc_info=True,
                extra=self.log_extra(error_type=type(e).__name__),
            )
            return False

    def execute(self, **kwargs) -> bool:
        """Execute the job from keyword arguments matching ExtractionRequest."""
        return self.create_output_file(ExtractionRequest(**kwargs))
