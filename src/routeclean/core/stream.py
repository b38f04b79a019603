import abc
import logging
import sys
from pathlib import Path
from typing import Dict, Iterator, Optional

import pandas as pd

from routeclean.errors import InputFormatError

from .point import Point

logger = logging.getLogger(__name__)

COLUMNS = ('lat', 'lon', 'timestamp')


class PointReader(abc.ABC):
    """Abstract base class for point sources."""

    def __init__(self, source: str | Path):
        self.source = str(source)

    @classmethod
    @abc.abstractmethod
    def can_read(cls, source: str) -> bool:
        """Whether this reader understands the given input source spec."""

    @abc.abstractmethod
    def stream(self) -> Iterator[Point]:
        """Yields Point objects one by one, in file order."""

    def __iter__(self) -> Iterator[Point]:
        return self.stream()


class CsvPointReader(PointReader):
    """
    Streams points from a CSV file chunk by chunk.
    By default rows are headerless `lat,lon,timestamp`; with has_header=True
    the columns are looked up by name through col_mapping.
    """

    def __init__(
        self,
        source: str | Path,
        sep: str = ',',
        has_header: bool = False,
        col_mapping: Optional[Dict[str, str]] = None,
        chunksize: int = 1000
    ):
        super().__init__(source)
        self.sep = sep
        self.has_header = has_header
        self.chunksize = chunksize
        self.mapping = col_mapping or {
            'lat': 'lat',
            'lon': 'lon',
            'timestamp': 'timestamp'
        }
        self._check_source()

    @classmethod
    def can_read(cls, source: str) -> bool:
        return Path(source).suffix.lower() == '.csv'

    def _check_source(self):
        if not Path(self.source).exists():
            raise FileNotFoundError(f"File not found: {self.source}")
        if self.has_header:
            try:
                header = pd.read_csv(self.source, nrows=0, sep=self.sep)
            except pd.errors.EmptyDataError:
                return
            self._check_columns(header.columns)

    def _check_columns(self, columns):
        missing = [self.mapping[col] for col in COLUMNS if self.mapping[col] not in columns]
        if missing:
            raise InputFormatError(
                f"Missing required columns in {self.source}: {missing}. Found: {list(columns)}",
                missing_columns=missing
            )

    def _input(self):
        return self.source

    def _read_csv(self):
        # round_trip keeps the coordinates identical to their text form on output
        if self.has_header:
            return pd.read_csv(
                self._input(), sep=self.sep,
                chunksize=self.chunksize, float_precision='round_trip'
            )
        return pd.read_csv(
            self._input(), sep=self.sep, header=None, usecols=[0, 1, 2],
            chunksize=self.chunksize, float_precision='round_trip'
        )

    def _clean_chunk(self, chunk: pd.DataFrame) -> pd.DataFrame:
        if self.has_header:
            self._check_columns(chunk.columns)
            chunk = chunk[[self.mapping[col] for col in COLUMNS]]
            chunk = chunk.rename(columns={self.mapping[col]: col for col in COLUMNS})
        else:
            chunk.columns = list(COLUMNS)

        for col in COLUMNS:
            if not pd.api.types.is_numeric_dtype(chunk[col]):
                chunk[col] = pd.to_numeric(chunk[col], errors='coerce')

        invalid = chunk[list(COLUMNS)].isna().any(axis=1)
        if invalid.any():
            logger.warning(
                "Skipping %d row(s) with missing or non-numeric values in %s",
                int(invalid.sum()), self.source
            )
            chunk = chunk.loc[~invalid]
        return chunk

    def stream(self) -> Iterator[Point]:
        try:
            reader = self._read_csv()
        except pd.errors.EmptyDataError:
            logger.warning("Input %s is empty", self.source)
            return

        with reader:
            for chunk in reader:
                chunk = self._clean_chunk(chunk)
                for row in chunk.itertuples(index=False):
                    yield Point(
                        lat=float(row.lat),
                        lon=float(row.lon),
                        timestamp=int(row.timestamp)
                    )


class StdinCsvPointReader(CsvPointReader):
    """Reads CSV points from standard input when the source is `-`."""

    @classmethod
    def can_read(cls, source: str) -> bool:
        return source == '-'

    def _check_source(self):
        pass

    def _input(self):
        return sys.stdin
