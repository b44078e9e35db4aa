"""Typed cell grid read from the first schedule sheet of a workbook."""

from __future__ import annotations

import datetime as dt
import math
import zipfile
from enum import Enum
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd
from numpy.typing import NDArray
from openpyxl.utils.exceptions import InvalidFileException
from pydantic import BaseModel, ConfigDict

from schedule_reader.errors import GridReadError, SheetNotFound

DEFAULT_SHEET_NAME = "Sheet1"


class CellError:
    """Marker for an Excel error cell such as #N/A or #REF!."""

    def __repr__(self) -> str:
        return "CellError()"


ERROR_CELL = CellError()


class CellKind(str, Enum):
    """Type of a cell's content."""

    INT = "int"
    FLOAT = "float"
    STRING = "string"
    DATETIME = "datetime"
    EMPTY = "empty"
    OTHER = "other"


class Cell(BaseModel):
    """A single grid cell value tagged with its kind."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: CellKind
    value: Any = None

    @classmethod
    def of(cls, value: Any) -> Cell:
        return cls(kind=cell_kind(value), value=value)

    @property
    def is_empty(self) -> bool:
        return self.kind == CellKind.EMPTY


def cell_kind(value: Any) -> CellKind:
    """Classify a raw value as produced by pandas/openpyxl."""
    if value is None or value is pd.NaT:
        return CellKind.EMPTY
    if isinstance(value, CellError):
        return CellKind.OTHER
    # bool is an int subclass; spreadsheet booleans are not hours
    if isinstance(value, (bool, np.bool_)):
        return CellKind.OTHER
    if isinstance(value, (int, np.integer)):
        return CellKind.INT
    if isinstance(value, (float, np.floating)):
        return CellKind.EMPTY if math.isnan(value) else CellKind.FLOAT
    if isinstance(value, str):
        return CellKind.STRING if value != "" else CellKind.EMPTY
    if isinstance(value, (dt.date, dt.time, np.datetime64)):
        return CellKind.DATETIME
    return CellKind.OTHER


class Grid:
    """Read-only rectangular grid addressed by zero-based (row, column)."""

    def __init__(self, frame: pd.DataFrame) -> None:
        self._cells: NDArray[np.object_] = frame.to_numpy(dtype=object)

    @classmethod
    def from_rows(cls, rows: list[list[Any]]) -> Grid:
        """Build a grid from nested lists; short rows are padded with empties."""
        return cls(pd.DataFrame(rows, dtype=object))

    @property
    def height(self) -> int:
        return self._cells.shape[0]

    @property
    def width(self) -> int:
        return self._cells.shape[1] if self._cells.ndim == 2 else 0

    def get(self, row: int, column: int) -> Cell | None:
        """Cell at (row, column), or None when outside the grid."""
        if not (0 <= row < self.height and 0 <= column < self.width):
            return None
        return Cell.of(self._cells[row, column])


def read_grid(
    filepath: str | Path,
    sheet_name: str = DEFAULT_SHEET_NAME,
) -> Grid:
    """Read one worksheet of an Excel file into a Grid.

    Cell values are kept as read (no header row, no NA string parsing), so
    day codes such as "NA" survive and blank cells read as empty.
    Blank cells arrive as "" from the openpyxl engine, so any NaN left in
    the frame came from an error cell and is replaced by ERROR_CELL.

    Raises:
        GridReadError: If the file is missing or cannot be decoded.
        SheetNotFound: If the workbook has no sheet named ``sheet_name``.
    """
    filepath = Path(filepath)
    if not filepath.is_file():
        raise GridReadError(f"Spreadsheet not found: {filepath}")

    try:
        with pd.ExcelFile(filepath) as workbook:
            sheet_names = [str(name) for name in workbook.sheet_names]
            if sheet_name not in sheet_names:
                raise SheetNotFound(sheet_name, sheet_names)
            frame = workbook.parse(
                sheet_name,
                header=None,
                dtype=object,
                keep_default_na=False,
                na_values=[],
            )
    except (
        OSError,
        ValueError,
        KeyError,
        zipfile.BadZipFile,
        InvalidFileException,
    ) as exc:
        raise GridReadError(f"Cannot read spreadsheet {filepath}: {exc}") from exc

    return Grid(frame.map(_mark_error))


def _mark_error(value: Any) -> Any:
    if isinstance(value, (float, np.floating)) and math.isnan(value):
        return ERROR_CELL
    return value
