"""Pipeline orchestration: resolve, build, validate, then create or update."""

from __future__ import annotations

import json
from typing import Callable, Optional

from .config import SyncConfig
from .context import ReleaseContext
from .errors import ConfigError, MarketSyncError
from .logging import get_logger
from .models import RunOutcome, SubmissionPayload
from .outputs import OutputSink, default_output_sink
from .payload import PayloadBuilder
from .registry import RegistryClient
from .resolver import MetadataResolver
from .validators import PayloadValidator, Validator

ClientFactory = Callable[[SyncConfig], RegistryClient]


class SubmissionPipeline:
    """Coordinates one submission run and reports its outcome to an output sink."""

    def __init__(
        self,
        resolver: MetadataResolver | None = None,
        builder: PayloadBuilder | None = None,
        validator: Validator | None = None,
        client_factory: ClientFactory | None = None,
        sink: OutputSink | None = None,
    ) -> None:
        self.resolver = resolver or MetadataResolver()
        self.builder = builder or PayloadBuilder()
        self.validator = validator or PayloadValidator()
        self._client_factory = client_factory or RegistryClient
        self.sink = sink or default_output_sink()
        self.logger = get_logger("pipeline")

    def execute(self, config: SyncConfig, context: ReleaseContext) -> RunOutcome:
        """Run the pipeline, converting any fatal error into an ``error`` outcome."""
        try:
            return self.run(config, context)
        except MarketSyncError as exc:
            self.logger.error("Action failed: %s", exc)
            self.sink.set_output("status", "error")
            return RunOutcome(status="error", error=str(exc))

    def run(self, config: SyncConfig, context: ReleaseContext) -> RunOutcome:
        """Run the pipeline; fatal errors propagate to the caller."""
        project_path = config.project_path
        self.logger.info("Reading project metadata from %s", project_path)
        if not project_path.is_dir():
            raise ConfigError(
                f'Project path does not exist: "{project_path}". '
                'Make sure "project-path" is correct and the repository was checked out.'
            )

        metadata = self.resolver.resolve(project_path)
        self.logger.info("   Name:    %s", metadata.name)
        self.logger.info("   Version: %s", metadata.version)

        payload = self.builder.build(metadata, config.overrides, context)

        self.logger.info("Validating payload")
        result = self.validator.validate(payload)
        for warning in result.warnings:
            self.logger.warning(warning)
        if result.warnings:
            self.sink.set_output("warnings", json.dumps(result.warnings))

        result.raise_for_errors()
        if config.fail_on_warning:
            result.raise_for_warnings()

        if config.validate_only:
            self.logger.info("Validation passed (validate-only mode, not submitting)")
            return self._finish(RunOutcome(status="validated", warnings=result.warnings))

        self._log_summary(payload)

        if config.dry_run:
            self.logger.warning("DRY RUN: not submitting to marketplace")
            return self._finish(
                RunOutcome(status="dry-run", listing_id="dry-run", warnings=result.warnings)
            )

        client = self._client_factory(config)
        existing_id: Optional[str] = None
        if config.update_existing:
            self.logger.info("Checking for existing listing")
            existing_id = client.find_by_name(payload.name)
            if existing_id:
                self.logger.info("   Found: %s", existing_id)
            else:
                self.logger.info("   No existing listing found")

        self.logger.info("%s listing", "Updating" if existing_id else "Creating")
        remote = client.submit(payload, existing_id)

        self.logger.info("Success")
        self.logger.info("   Status:     %s", remote.status)
        self.logger.info("   Listing ID: %s", remote.listing_id)
        self.logger.info("   URL:        %s", remote.listing_url)

        return self._finish(
            RunOutcome(
                status=remote.status,
                listing_id=remote.listing_id,
                listing_url=remote.listing_url,
                warnings=result.warnings,
            )
        )

    # ------------------------------------------------------------------
    # Helpers

    def _finish(self, outcome: RunOutcome) -> RunOutcome:
        self.sink.set_output("listing-id", outcome.listing_id)
        self.sink.set_output("listing-url", outcome.listing_url)
        self.sink.set_output("status", outcome.status)
        return outcome

    def _log_summary(self, payload: SubmissionPayload) -> None:
        self.logger.info("Submission summary:")
        self.logger.info("   Name:       %s", payload.name)
        self.logger.info("   Version:    %s", payload.version)
        self.logger.info("   Category:   %s", payload.category)
        self.logger.info("   License:    %s", payload.license)
        self.logger.info("   Pricing:    %s", payload.pricing)
        self.logger.info("   Tags:       %s", ", ".join(payload.tags) or "(none)")
        self.logger.info("   Repository: %s", payload.repository)


__all__ = ["SubmissionPipeline"]
