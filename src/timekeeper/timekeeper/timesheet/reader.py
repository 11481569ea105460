from __future__ import annotations

import csv
import io
import unicodedata
import zipfile
from typing import BinaryIO

import pandas as pd
import xlrd

from ..core.exceptions import UnsupportedFileError

CSV_EXTENSIONS = (".csv",)


def _normalize_cell(value) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return unicodedata.normalize("NFC", str(value)).strip()


def to_matrix(df: pd.DataFrame) -> list[list[str]]:
    """DataFrame (header=None) -> rows of trimmed strings, blanks as ``""``."""
    df = df.fillna("")
    return [[_normalize_cell(v) for v in row] for row in df.itertuples(index=False, name=None)]


def _read_csv_rows(content: bytes) -> list[list[str]]:
    """CSV lines have different widths (one-cell ``ID:`` line, 31+ cell data line)."""
    text = content.decode("utf-8-sig")
    rows = list(csv.reader(io.StringIO(text, newline="")))
    width = max((len(r) for r in rows), default=0)
    return [[_normalize_cell(v) for v in r] + [""] * (width - len(r)) for r in rows]


def read_matrix(stream: BinaryIO, filename: str) -> list[list[str]]:
    """Decode the first sheet of an uploaded punch sheet into a string matrix."""
    name = (filename or "").lower()
    raw = stream.read()
    try:
        if name.endswith(".xlsx"):
            df = pd.read_excel(io.BytesIO(raw), sheet_name=0, header=None, dtype=str, keep_default_na=False, engine="openpyxl")
        elif name.endswith(".xls"):
            df = pd.read_excel(io.BytesIO(raw), sheet_name=0, header=None, dtype=str, keep_default_na=False, engine="xlrd")
        elif name.endswith(CSV_EXTENSIONS):
            return _read_csv_rows(raw)
        else:
            raise UnsupportedFileError("Chỉ hỗ trợ file XLSX, XLS hoặc CSV")
    except UnsupportedFileError:
        raise
    except pd.errors.EmptyDataError:
        return []
    except (ValueError, ImportError, zipfile.BadZipFile, xlrd.XLRDError, csv.Error) as e:
        raise UnsupportedFileError(f"Lỗi đọc file: {e}") from e
    return to_matrix(df)
