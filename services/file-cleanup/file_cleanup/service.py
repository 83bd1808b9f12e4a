"""The cleanup workflow: fetch candidates, delete each one, mark it deleted."""

from __future__ import annotations

from typing import Optional

from common_utils import configure_logger, log_exception

from .api_client import ApiClient
from .config import CleanupSettings
from .deleters import Deleter, build_deleter
from .keys import build_storage_key
from .models import (
    CallResult,
    CallStatus,
    CleanupReport,
    FileMetadata,
    ItemOutcome,
    RunOutcome,
)
from .object_store import S3Storage

logger = configure_logger(__name__)


class FileDeletionService:
    """Runs one cleanup pass over the files the API reports as expired.

    Items are processed one at a time. A failure on one item is recorded on
    its outcome and the loop moves on; mark-deleted is sent for every item
    whatever the delete call returned.
    """

    def __init__(
        self,
        settings: CleanupSettings,
        api_client: ApiClient,
        deleter: Deleter,
    ) -> None:
        self.settings = settings
        self.api_client = api_client
        self.deleter = deleter

    def close(self) -> None:
        self.api_client.close()

    def storage_key(self, file_name: str) -> str:
        return build_storage_key(self.settings.base_path, self.settings.root_path, file_name)

    def delete_old_files(self) -> CleanupReport:
        report = CleanupReport()
        logger.info("Fetching files to delete...")
        try:
            candidates = self.api_client.get_files_to_delete(
                self.api_client.url_for(self.settings.get_files_to_delete_endpoint)
            )
            if not candidates.files:
                if not candidates.ok:
                    logger.warning(
                        "Could not fetch files to delete (%s): %s",
                        candidates.status.value,
                        candidates.reason,
                    )
                logger.info("No files to delete.")
                return report.finish(RunOutcome.NOTHING_TO_DO)

            logger.info("Found %s files to delete", len(candidates.files))
            for file_name in candidates.files:
                report.items.append(self._process(file_name))
        except Exception as exc:
            log_exception("An error occurred during the file cleanup process", exc, logger)
            report.error = str(exc)
            return report.finish(RunOutcome.ABORTED)

        logger.info(
            "File cleanup completed. Candidates: %s, deleted: %s, marked: %s, failed: %s",
            report.candidates,
            report.deleted,
            report.marked,
            report.failed,
        )
        return report.finish(RunOutcome.COMPLETED)

    def _process(self, file_name: str) -> ItemOutcome:
        outcome = ItemOutcome(file_name=file_name)
        try:
            key = self.storage_key(file_name)
            outcome.metadata = FileMetadata(
                file_name=file_name, bucket_name=self.settings.bucket_name, key=key
            )
            logger.info(
                "Deleting file: %s from bucket: %s via %s",
                key,
                self.settings.bucket_name,
                self.deleter.name,
            )
            try:
                outcome.deleted = self.deleter.delete(self.settings.bucket_name, key)
            except Exception as exc:
                log_exception(f"Error occurred while deleting file {file_name}", exc, logger)
                outcome.deleted = CallResult(CallStatus.UNEXPECTED_ERROR, reason=str(exc))
                outcome.error = str(exc)
            outcome.marked = self._mark_deleted(file_name)
            if outcome.succeeded:
                logger.info("Successfully deleted file: %s", file_name)
            else:
                logger.warning("File %s was not fully cleaned up", file_name)
        except Exception as exc:
            log_exception(f"Error occurred while deleting file {file_name}", exc, logger)
            outcome.error = str(exc)
        return outcome

    def _mark_deleted(self, file_name: str) -> CallResult:
        if not file_name or not file_name.strip():
            logger.warning("File name is empty. Skipping the mark-as-deleted operation.")
            return CallResult(CallStatus.SKIPPED, reason="empty file name")
        logger.info("Marking file as deleted in the database via API: %s", file_name)
        return self.api_client.mark_file_as_deleted(
            self.api_client.url_for(self.settings.mark_file_as_deleted_endpoint), file_name
        )


def build_service(
    settings: CleanupSettings, storage: Optional[S3Storage] = None
) -> FileDeletionService:
    """Wire the API client and deleter described by ``settings``."""
    api_client = ApiClient(settings.api_base_url, settings.api_token)
    deleter = build_deleter(settings, api_client, storage)
    return FileDeletionService(settings, api_client, deleter)
