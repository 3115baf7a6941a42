"""SQLite sheet storage via SQLAlchemy."""

import json
import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    create_engine,
    func,
)
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from apptrack.storage import StorageUnavailableError, TableStorage

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class SheetMeta(Base):
    __tablename__ = "sheets"

    name = Column(String, primary_key=True)
    frozen_rows = Column(Integer, default=0)
    bold_header = Column(Boolean, default=False)
    created_at = Column(DateTime, default=datetime.now)


class SheetDataRow(Base):
    __tablename__ = "sheet_rows"

    id = Column(Integer, primary_key=True, autoincrement=True)
    sheet = Column(String, ForeignKey("sheets.name"), nullable=False)
    position = Column(Integer, nullable=False)
    cells = Column(Text, default="[]")  # JSON array

    __table_args__ = (
        UniqueConstraint("sheet", "position", name="uq_sheet_position"),
    )


def get_engine(db_path: str = "apptrack.db"):
    """Create SQLAlchemy engine."""
    return create_engine(f"sqlite:///{db_path}", echo=False)


def init_db(db_path: str = "apptrack.db"):
    """Initialize database and create tables."""
    engine = get_engine(db_path)
    try:
        Base.metadata.create_all(engine)
    except SQLAlchemyError as e:
        raise StorageUnavailableError(f"Cannot open database {db_path}: {e}") from e
    return engine


def get_session(engine) -> Session:
    """Create a new database session."""
    session_factory = sessionmaker(bind=engine)
    return session_factory()


class SqlTable(TableStorage):
    """A named sheet stored as JSON-encoded cell rows."""

    def __init__(self, engine, name: str = "Applications"):
        self.engine = engine
        self.name = name

    @contextmanager
    def _session(self) -> Iterator[Session]:
        session = get_session(self.engine)
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageUnavailableError(f"Sheet '{self.name}': {e}") from e
        finally:
            session.close()

    def exists(self) -> bool:
        with self._session() as session:
            return session.get(SheetMeta, self.name) is not None

    def create(self, header: list[str]) -> None:
        with self._session() as session:
            session.add(SheetMeta(name=self.name, frozen_rows=1, bold_header=True))
            session.flush()
            session.add(SheetDataRow(sheet=self.name, position=0, cells=json.dumps(header)))
        logger.info("Created sheet %s", self.name)

    def read_all(self) -> list[list[str]]:
        with self._session() as session:
            self._require_sheet(session)
            rows = (
                session.query(SheetDataRow)
                .filter_by(sheet=self.name)
                .order_by(SheetDataRow.position)
                .all()
            )
            return [json.loads(r.cells) if r.cells else [] for r in rows]

    def append_row(self, values: list[str]) -> None:
        with self._session() as session:
            self._require_sheet(session)
            last = (
                session.query(func.max(SheetDataRow.position))
                .filter(SheetDataRow.sheet == self.name)
                .scalar()
            )
            position = 0 if last is None else last + 1
            session.add(SheetDataRow(sheet=self.name, position=position, cells=json.dumps(values)))

    def update_cell(self, row: int, column: int, value: str) -> None:
        with self._session() as session:
            self._require_sheet(session)
            data_row = session.query(SheetDataRow).filter_by(sheet=self.name, position=row).first()
            if data_row is None:
                raise StorageUnavailableError(f"Row {row} out of range in sheet '{self.name}'")
            cells = json.loads(data_row.cells) if data_row.cells else []
            if column >= len(cells):
                cells.extend([""] * (column + 1 - len(cells)))
            cells[column] = value
            data_row.cells = json.dumps(cells)

    def _require_sheet(self, session: Session) -> SheetMeta:
        sheet = session.get(SheetMeta, self.name)
        if sheet is None:
            raise StorageUnavailableError(f"Sheet '{self.name}' does not exist")
        return sheet
