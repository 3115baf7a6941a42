"""Tests for the table storage implementations."""

import pytest
from sqlalchemy import create_engine

from apptrack.db import SheetMeta, SqlTable, get_session, init_db
from apptrack.storage import MemoryTable, StorageUnavailableError

HEADER = ["A", "B", "C"]


@pytest.fixture(params=["memory", "sql"])
def table(request, tmp_path):
    if request.param == "memory":
        return MemoryTable()
    return SqlTable(init_db(str(tmp_path / "sheet.db")), "Sheet1")


class TestTableContract:
    def test_missing_until_created(self, table):
        assert not table.exists()
        table.create(HEADER)
        assert table.exists()
        assert table.read_all() == [HEADER]

    def test_append_preserves_order(self, table):
        table.create(HEADER)
        table.append_row(["1", "2", "3"])
        table.append_row(["4", "5", "6"])
        assert table.read_all() == [HEADER, ["1", "2", "3"], ["4", "5", "6"]]

    def test_update_cell(self, table):
        table.create(HEADER)
        table.append_row(["1", "2", "3"])
        table.update_cell(1, 2, "x")
        assert table.read_all()[1] == ["1", "2", "x"]

    def test_update_cell_pads_short_row(self, table):
        table.create(HEADER)
        table.append_row(["1"])
        table.update_cell(1, 2, "x")
        assert table.read_all()[1] == ["1", "", "x"]

    def test_update_missing_row_raises(self, table):
        table.create(HEADER)
        with pytest.raises(StorageUnavailableError):
            table.update_cell(5, 0, "x")

    def test_read_before_create_raises(self, table):
        with pytest.raises(StorageUnavailableError):
            table.read_all()

    def test_append_before_create_raises(self, table):
        with pytest.raises(StorageUnavailableError):
            table.append_row(["1", "2", "3"])


class TestMemoryTable:
    def test_header_formatting(self):
        table = MemoryTable()
        table.create(HEADER)
        assert table.bold_header
        assert table.frozen_rows == 1

    def test_read_returns_copies(self):
        table = MemoryTable()
        table.create(HEADER)
        table.read_all()[0][0] = "changed"
        assert table.read_all()[0][0] == "A"


class TestSqlTable:
    def test_header_formatting_persisted(self, tmp_path):
        engine = init_db(str(tmp_path / "sheet.db"))
        SqlTable(engine, "Sheet1").create(HEADER)
        session = get_session(engine)
        sheet = session.get(SheetMeta, "Sheet1")
        assert sheet.bold_header is True
        assert sheet.frozen_rows == 1
        session.close()

    def test_sheets_are_independent(self, tmp_path):
        engine = init_db(str(tmp_path / "sheet.db"))
        first = SqlTable(engine, "First")
        second = SqlTable(engine, "Second")
        first.create(HEADER)
        first.append_row(["1", "2", "3"])
        assert not second.exists()
        second.create(["X"])
        assert second.read_all() == [["X"]]
        assert len(first.read_all()) == 2

    def test_persists_across_engines(self, tmp_path):
        db_path = str(tmp_path / "sheet.db")
        SqlTable(init_db(db_path), "Sheet1").create(HEADER)
        reopened = SqlTable(init_db(db_path), "Sheet1")
        assert reopened.exists()
        assert reopened.read_all() == [HEADER]

    def test_unreachable_database_raises(self, tmp_path):
        engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'dir' / 'x.db'}")
        with pytest.raises(StorageUnavailableError):
            SqlTable(engine, "Sheet1").exists()

    def test_init_db_unreachable_raises(self, tmp_path):
        with pytest.raises(StorageUnavailableError):
            init_db(str(tmp_path / "missing" / "dir" / "x.db"))
