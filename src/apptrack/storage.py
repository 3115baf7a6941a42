"""Abstract table storage interface and an in-memory implementation."""

from abc import ABC, abstractmethod


class StorageUnavailableError(RuntimeError):
    """The backing table could not be read or written."""


class TableStorage(ABC):
    """A single named table of string cells.

    Rows are addressed by 0-based logical position; row 0 is the header
    once the table has been created.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Return True if the table has been created."""
        ...

    @abstractmethod
    def create(self, header: list[str]) -> None:
        """Create the table with a bold, frozen header row."""
        ...

    @abstractmethod
    def read_all(self) -> list[list[str]]:
        """Return every row, header included, in position order."""
        ...

    @abstractmethod
    def append_row(self, values: list[str]) -> None:
        """Append a row after the last existing one."""
        ...

    @abstractmethod
    def update_cell(self, row: int, column: int, value: str) -> None:
        """Overwrite a single cell in place."""
        ...


class MemoryTable(TableStorage):
    """Table kept in process memory. Contents are lost on exit."""

    def __init__(self, name: str = "Applications"):
        self.name = name
        self.rows: list[list[str]] | None = None
        self.frozen_rows = 0
        self.bold_header = False

    def exists(self) -> bool:
        return self.rows is not None

    def create(self, header: list[str]) -> None:
        self.rows = [list(header)]
        self.bold_header = True
        self.frozen_rows = 1

    def read_all(self) -> list[list[str]]:
        return [list(r) for r in self._require_rows()]

    def append_row(self, values: list[str]) -> None:
        self._require_rows().append(list(values))

    def update_cell(self, row: int, column: int, value: str) -> None:
        rows = self._require_rows()
        try:
            target = rows[row]
        except IndexError:
            raise StorageUnavailableError(f"Row {row} out of range in sheet '{self.name}'")
        if column >= len(target):
            target.extend([""] * (column + 1 - len(target)))
        target[column] = value

    def _require_rows(self) -> list[list[str]]:
        if self.rows is None:
            raise StorageUnavailableError(f"Sheet '{self.name}' does not exist")
        return self.rows
