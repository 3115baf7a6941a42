"""Shared test fixtures for apptrack."""

from datetime import date

import pytest

from apptrack.db import SqlTable, init_db
from apptrack.models import ApplicationInput
from apptrack.storage import MemoryTable
from apptrack.store import ApplicationStore

FIXED_TODAY = date(2025, 3, 14)


@pytest.fixture
def memory_table():
    return MemoryTable()


@pytest.fixture
def store(memory_table):
    return ApplicationStore(memory_table, today=lambda: FIXED_TODAY)


@pytest.fixture
def sql_table(tmp_path):
    engine = init_db(str(tmp_path / "test.db"))
    return SqlTable(engine, "Applications")


@pytest.fixture
def sql_store(sql_table):
    return ApplicationStore(sql_table, today=lambda: FIXED_TODAY)


@pytest.fixture
def sample_inputs():
    return [
        ApplicationInput(candidate="Alice", company="Acme", job_title="Engineer"),
        ApplicationInput(
            candidate="Bob",
            company="Globex",
            job_title="Data Scientist",
            who_applied="Carol (referral)",
            jd_link="https://globex.example/jobs/42",
            job_description="Build models.",
            date_applied="2025-01-02",
            resume_summary="5y Python",
            status="Interviewing",
        ),
        ApplicationInput(candidate="Alice", company="Initech", job_title="Engineer"),
    ]


@pytest.fixture
def populated_store(store, sample_inputs):
    for data in sample_inputs:
        store.save_application(data)
    return store
