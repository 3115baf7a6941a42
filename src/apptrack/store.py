"""Application record store: CRUD over a single sheet of applications."""

import logging
import threading
from datetime import date, datetime, timezone
from typing import Callable

from apptrack.config import StorageConfig
from apptrack.models import (
    CANDIDATE_COL,
    COMPANY_COL,
    FIELDS,
    HEADERS,
    JOB_TITLE_COL,
    STATUS_COL,
    ApplicationInput,
    ApplicationRecord,
    SaveResult,
    UpdateResult,
)
from apptrack.storage import MemoryTable, TableStorage

logger = logging.getLogger(__name__)

DISTINCT_FIELDS = ("candidate", "company", "job_title")


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class ApplicationStore:
    """Reads and writes application records through a TableStorage.

    Every operation initializes the sheet on first use and runs under one
    lock, so at most one mutation is in flight against the table.
    """

    def __init__(self, storage: TableStorage, today: Callable[[], date] = utc_today):
        self.storage = storage
        self.today = today
        self._lock = threading.RLock()

    def initialize(self) -> bool:
        """Create the sheet with its header if missing. Returns True if created."""
        with self._lock:
            if self.storage.exists():
                return False
            self.storage.create(HEADERS)
            logger.info("Initialized application sheet with %d columns", len(HEADERS))
            return True

    def _data_rows(self) -> list[list[str]]:
        """All rows after the header as text, padded to the header width."""
        self.initialize()
        rows = self.storage.read_all()[1:]
        logger.debug("Scanned %d data rows", len(rows))
        return [
            ["" if cell is None else str(cell) for cell in r] + [""] * (len(HEADERS) - len(r))
            for r in rows
        ]

    def list_distinct(self, field: str) -> list[str]:
        """Sorted unique non-empty values of one column."""
        if field not in DISTINCT_FIELDS:
            raise ValueError(f"Unsupported distinct field: {field}")
        col = FIELDS.index(field)
        with self._lock:
            values = {row[col] for row in self._data_rows() if row[col]}
        return sorted(values)

    def list_candidates(self) -> list[str]:
        return self.list_distinct("candidate")

    def list_companies(self) -> list[str]:
        return self.list_distinct("company")

    def list_job_titles(self) -> list[str]:
        return self.list_distinct("job_title")

    def list_applications(self, candidate: str | None = None) -> list[ApplicationRecord]:
        """Visible applications in insertion order, optionally for one candidate.

        The candidate filter is an exact, case-sensitive match.
        """
        with self._lock:
            rows = self._data_rows()
        return [
            ApplicationRecord.from_row(row)
            for row in rows
            if row[CANDIDATE_COL] and (candidate is None or row[CANDIDATE_COL] == candidate)
        ]

    def list_all_applications(self) -> list[ApplicationRecord]:
        return self.list_applications()

    def save_application(self, data: ApplicationInput) -> SaveResult:
        """Append a new application row with defaults applied."""
        row = data.to_row(self.today())
        with self._lock:
            self.initialize()
            self.storage.append_row(row)
        logger.info("Saved application: %s @ %s", row[CANDIDATE_COL], row[COMPANY_COL])
        return SaveResult()

    def update_status(self, candidate: str, company: str, job_title: str, status: str) -> UpdateResult:
        """Set the status of the first application matching the composite key.

        Only the earliest matching row is updated when the key is duplicated.
        """
        key = (candidate, company, job_title)
        with self._lock:
            for index, row in enumerate(self._data_rows(), start=1):
                if (row[CANDIDATE_COL], row[COMPANY_COL], row[JOB_TITLE_COL]) == key:
                    self.storage.update_cell(index, STATUS_COL, status)
                    logger.info("Updated status of %s @ %s (%s) to %s", candidate, company, job_title, status)
                    return UpdateResult(success=True)

        logger.warning("No application found for %s @ %s (%s)", candidate, company, job_title)
        return UpdateResult(success=False, error="Application not found")


def build_store(config: StorageConfig) -> ApplicationStore:
    """Create a store backed by the configured storage."""
    if config.backend == "memory":
        return ApplicationStore(MemoryTable(config.sheet_name))

    from apptrack.db import SqlTable, init_db

    engine = init_db(config.effective_db_path)
    return ApplicationStore(SqlTable(engine, config.sheet_name))
