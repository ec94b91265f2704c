"""
Results Ledger

스윕 결과를 tab-separated 텍스트 파일에 누적 기록

Header policy: the header line is written only when the destination is
absent or empty at append time, so restarting the process (or running one
process per angle) never duplicates it. Rows are appended in call order.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

import pandas as pd

from .errors import LedgerWriteError
from .reduction import ResultRow

logger = logging.getLogger(__name__)

DELIMITER = "\t"


def format_value(value: float) -> str:
    """Shortest representation that round-trips to the same float"""
    return repr(float(value))


def format_header() -> str:
    return DELIMITER.join(ResultRow.HEADER) + "\n"


def format_row(row: ResultRow) -> str:
    return DELIMITER.join(format_value(v) for v in row.values()) + "\n"


class ResultsLedger:
    """Append-only results file with a one-time header"""

    def __init__(self, path: Union[str, Path] = "aoa_results.txt"):
        self.path = Path(path)
        self.header_written = False
        self.rows_written = 0

    def _needs_header(self) -> bool:
        try:
            return self.path.stat().st_size == 0
        except FileNotFoundError:
            return True

    def _ends_mid_line(self) -> bool:
        """Non-empty file whose last byte is not a newline"""
        with open(self.path, 'rb') as f:
            f.seek(-1, os.SEEK_END)
            return f.read(1) != b"\n"

    def append(self, row: ResultRow) -> Path:
        """
        Append one row (and the header if the file is absent/empty)

        Raises:
        -------
        LedgerWriteError if the destination cannot be written
        """
        try:
            needs_header = self._needs_header()
            repair = not needs_header and self._ends_mid_line()
            with open(self.path, 'a', encoding='ascii') as f:
                if needs_header:
                    f.write(format_header())
                elif repair:
                    f.write("\n")
                f.write(format_row(row))
        except OSError as e:
            raise LedgerWriteError(self.path, e) from e

        if needs_header:
            self.header_written = True
            logger.debug(f"Wrote ledger header to {self.path}")
        elif repair:
            logger.warning(f"Ledger {self.path} did not end with a newline; terminated the last line")
        self.rows_written += 1
        return self.path


def load_results(path: Union[str, Path]) -> pd.DataFrame:
    """
    Read a results ledger back into a DataFrame

    Repeated header lines (ledgers written with one header per process)
    are dropped. Columns use the ledger header labels.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Results ledger not found: {path}")

    columns = list(ResultRow.HEADER)
    if path.stat().st_size == 0:
        return pd.DataFrame(columns=columns, dtype=float)

    df = pd.read_csv(path, sep=DELIMITER, header=None, names=columns,
                     dtype=str, skip_blank_lines=True)
    df = df[df[columns[0]].str.strip() != columns[0]]

    return df.astype(float).reset_index(drop=True)


def summarize(df: pd.DataFrame) -> Dict[str, Optional[float]]:
    """
    Sweep summary: point count, AoA/Cl/Cd ranges and best L/D

    Rows with Cd == 0 are ignored for L/D.
    """
    summary = {
        'points': int(len(df)),
        'aoa_min': None, 'aoa_max': None,
        'cl_min': None, 'cl_max': None,
        'cd_min': None, 'cd_max': None,
        'ld_max': None, 'ld_max_aoa': None,
    }
    if len(df) == 0:
        return summary

    summary['aoa_min'] = float(df['AoA_deg'].min())
    summary['aoa_max'] = float(df['AoA_deg'].max())
    summary['cl_min'] = float(df['Cl'].min())
    summary['cl_max'] = float(df['Cl'].max())
    summary['cd_min'] = float(df['Cd'].min())
    summary['cd_max'] = float(df['Cd'].max())

    valid = df[df['Cd'] != 0]
    if len(valid) > 0:
        ld = valid['Cl'] / valid['Cd']
        best = ld.idxmax()
        summary['ld_max'] = float(ld[best])
        summary['ld_max_aoa'] = float(valid.loc[best, 'AoA_deg'])

    return summary
