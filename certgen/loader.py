"""
Roster loading.

Responsibilities:
- read the roster file (best-effort: an unreadable source yields no records)
- encoding detection for uploaded or on-disk bytes
- header skip, row width enforcement, score parsing
- skipped-row reporting
"""

from __future__ import annotations

import logging
import math
import re
from pathlib import Path
from typing import List, Optional, Tuple, Union

from charset_normalizer import from_bytes

from .models import EmployeeRecord, LoadReport, SkippedRow
from .rules import ROSTER_DELIMITER, ROSTER_FIELD_COUNT

logger = logging.getLogger("certgen.loader")

_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def decode_roster_bytes(raw: bytes) -> Tuple[str, Optional[str]]:
    """
    Decode roster bytes to text.

    Rules:
    - UTF-8 (with or without BOM) is tried first.
    - Otherwise detect the encoding best-effort via charset-normalizer.
    - If decoding still fails, fall back to UTF-8 with replacement characters.

    Returns the text and the encoding that was used.
    """
    if not raw:
        return "", None

    try:
        return raw.decode("utf-8-sig"), "utf_8"
    except UnicodeDecodeError:
        pass

    match = from_bytes(raw).best()
    detected = match.encoding if match is not None else None

    if detected:
        try:
            return raw.decode(detected), detected
        except (UnicodeDecodeError, LookupError):
            logger.warning(f"Decoding as {detected} failed, falling back to utf-8")

    # Last resort: keep going deterministically
    return raw.decode("utf-8", errors="replace"), "utf_8"


def parse_score(value: str) -> Optional[float]:
    """Parse a score with a fixed '.' decimal point. Returns None if invalid."""
    value = value.strip()
    # float() alone would also take "1_000" and non-ASCII digits
    if not _DECIMAL.fullmatch(value):
        return None
    try:
        score = float(value)
    except ValueError:
        return None
    if not math.isfinite(score):
        return None
    return score


def _split_lines(text: str) -> List[str]:
    # CRLF/CR -> LF
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_roster_text(
    text: str, skipped: Optional[List[SkippedRow]] = None
) -> List[EmployeeRecord]:
    """
    Parse roster text into employee records.

    The first line is always treated as the header. Data lines that are
    blank, that do not split into exactly five fields, or whose scores are
    not numbers are dropped. Pass a list as ``skipped`` to collect a
    SkippedRow for every dropped line.
    """
    records: List[EmployeeRecord] = []

    def skip(line_no: int, reason: str, value: str) -> None:
        logger.debug(f"Skipping line {line_no}: {reason}")
        if skipped is not None:
            skipped.append(SkippedRow(line=line_no, reason=reason, value=value))

    for i, line in enumerate(_split_lines(text)):
        if i == 0:
            continue

        line_no = i + 1

        if not line.strip():
            skip(line_no, "blank_line", line)
            continue

        parts = line.split(ROSTER_DELIMITER)
        if len(parts) != ROSTER_FIELD_COUNT:
            skip(line_no, "wrong_field_count", line)
            continue

        theoretical = parse_score(parts[3])
        if theoretical is None:
            skip(line_no, "invalid_theoretical_score", line)
            continue

        practical = parse_score(parts[4])
        if practical is None:
            skip(line_no, "invalid_practical_score", line)
            continue

        records.append(
            EmployeeRecord(
                first_name=parts[0].strip(),
                last_name=parts[1].strip(),
                department=parts[2].strip(),
                theoretical_score=theoretical,
                practical_score=practical,
            )
        )

    return records


def parse_roster_bytes(raw: bytes) -> LoadReport:
    text, encoding = decode_roster_bytes(raw)
    skipped: List[SkippedRow] = []
    records = parse_roster_text(text, skipped)
    return LoadReport(records=records, skipped=skipped, encoding=encoding)


def load_report(path: Union[str, Path]) -> LoadReport:
    """
    Load a roster file and report what was kept and skipped.

    An unreadable file is logged and reported through ``source_error``;
    it never raises.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.error(f"Error loading CSV file {path}: {e}")
        return LoadReport(source_error=str(e))

    report = parse_roster_bytes(raw)
    logger.info(
        f"Loaded {len(report.records)} employees from {path} "
        f"({len(report.skipped)} lines skipped)"
    )
    return report


def load_records(path: Union[str, Path]) -> List[EmployeeRecord]:
    return load_report(path).records
