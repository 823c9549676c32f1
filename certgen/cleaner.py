"""
Roster cleaning: name canonicalization and duplicate removal.

Duplicate policy: records are keyed on the case-insensitive
(first name, last name, department) of their *normalized* fields and the
first record seen for a key wins. Later records with the same key are
dropped.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Set

from .exceptions import InvalidArgumentError
from .models import EmployeeRecord
from .rules import UNKNOWN_DEPARTMENT

logger = logging.getLogger("certgen.cleaner")


def _upper_char(ch: str) -> str:
    # Some characters expand when uppercased ("ß" -> "SS"); keep them as-is
    upper = ch.upper()
    return upper if len(upper) == 1 else ch


def _capitalize_first(value: str) -> str:
    if len(value) == 1:
        return _upper_char(value)
    return _upper_char(value[0]) + value[1:].lower()


def normalize_name(name: Optional[str]) -> str:
    """
    First letter uppercase, rest lowercase.

    "JOHN" -> "John", "jOhN" -> "John", "a" -> "A",
    "VAN DER BERG" -> "Van der berg". Blank input gives "".
    """
    if name is None:
        return ""
    name = name.strip()
    if not name:
        return ""
    return _capitalize_first(name)


def normalize_department(department: Optional[str]) -> str:
    if department is None:
        return UNKNOWN_DEPARTMENT
    department = department.strip()
    if not department:
        return UNKNOWN_DEPARTMENT
    return _capitalize_first(department)


def normalize_record(record: EmployeeRecord) -> EmployeeRecord:
    return record.model_copy(
        update={
            "first_name": normalize_name(record.first_name),
            "last_name": normalize_name(record.last_name),
            "department": normalize_department(record.department),
        }
    )


def dedup_key(record: EmployeeRecord) -> str:
    return f"{record.first_name}_{record.last_name}_{record.department}".lower()


def clean_records(records: Optional[Iterable[EmployeeRecord]]) -> List[EmployeeRecord]:
    """
    Normalize every record and drop duplicates in a single forward pass.

    Returns a new list in first-seen order. The input records are not
    modified.

    Raises:
        InvalidArgumentError: if ``records`` is None
    """
    if records is None:
        raise InvalidArgumentError("records", "Employee list cannot be None")

    seen: Set[str] = set()
    cleaned: List[EmployeeRecord] = []

    for record in records:
        normalized = normalize_record(record)
        key = dedup_key(normalized)
        if key in seen:
            logger.debug(f"Dropping duplicate employee: {normalized.full_name} ({normalized.department})")
            continue
        seen.add(key)
        cleaned.append(normalized)

    return cleaned
