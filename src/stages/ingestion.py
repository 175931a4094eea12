"""
Ingestion stage.

Reads delimited review text into RawRecords, one per row, with no
type coercion.
"""

import csv
import io
import logging
from typing import List, Optional

import pandas as pd

from src.exceptions import ParseError
from src.models.review import RawRecord

logger = logging.getLogger(__name__)


class ReviewParser:
    """
    Parses CSV text with a header row into RawRecords.

    Every value is kept as the literal source string; fields missing from
    a short row come back as "".
    """

    def __init__(self, delimiter: Optional[str] = ",", encoding: str = "utf-8-sig"):
        """
        Initialize parser.

        Args:
            delimiter: Field delimiter, or None to sniff it from the data
            encoding: Encoding used by parse_file()
        """
        self.delimiter = delimiter
        self.encoding = encoding

    def parse(self, source: str) -> List[RawRecord]:
        """
        Parse delimited text into records.

        Empty lines and lines holding only whitespace are skipped rather
        than returned as records.

        Args:
            source: Full text of the dataset, header row first

        Returns:
            List of column -> string mappings in input order

        Raises:
            ParseError: If the text has no header row, repeats a column
                name, or is malformed
        """
        if source.startswith("\ufeff"):
            source = source[1:]

        try:
            df = pd.read_csv(
                io.StringIO(source),
                sep=self.delimiter,
                engine="python" if self.delimiter is None else "c",
                dtype=str,
                keep_default_na=False,
                index_col=False,
                skip_blank_lines=True
            )
        except pd.errors.EmptyDataError as e:
            raise ParseError("Source has no header row") from e
        except (pd.errors.ParserError, csv.Error, ValueError) as e:
            raise ParseError(f"Malformed source: {e}") from e

        self._check_header(source)

        records = df.fillna("").to_dict(orient="records")

        logger.info(f"Parsed {len(records)} records with {len(df.columns)} columns")
        return records

    def _check_header(self, source: str) -> None:
        """
        Reject repeated column names.

        read_csv renames a repeated "a" to "a.1", which would key records
        by names that are not in the header.
        """
        header = pd.read_csv(
            io.StringIO(source),
            sep=self.delimiter,
            engine="python" if self.delimiter is None else "c",
            header=None,
            nrows=1,
            dtype=str,
            keep_default_na=False
        ).iloc[0].tolist()

        duplicates = sorted({name for name in header if header.count(name) > 1})
        if duplicates:
            raise ParseError(f"Header repeats column names: {duplicates}")

    def parse_file(self, path: str) -> List[RawRecord]:
        """
        Read and parse a dataset file.

        Raises:
            ParseError: If the file cannot be read or parsed
        """
        try:
            with open(path, 'r', encoding=self.encoding, newline='') as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ParseError(f"Cannot read {path}: {e}") from e

        logger.info(f"Loaded {path}")
        return self.parse(source)


def parse(source: str) -> List[RawRecord]:
    """Parse comma-delimited text with the default parser."""
    return ReviewParser().parse(source)
