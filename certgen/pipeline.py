"""
Certification pipeline driver.

Stages run in batch order, each consuming the whole roster before the
next starts:

    load -> clean -> calculate + classify -> letters

A failing letter is logged and recorded; the remaining employees are
still processed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Union

from .calculator import calculate
from .classifier import resolve
from .cleaner import clean_records
from .documents import build_payload
from .loader import load_report
from .models import (
    ClassifiedEmployee,
    EmployeeRecord,
    LoadReport,
    PipelineResult,
    RenderFailure,
)

logger = logging.getLogger("certgen.pipeline")


def classify_records(records: Iterable[EmployeeRecord]) -> List[ClassifiedEmployee]:
    classified = []
    for record in records:
        scored = calculate(record)
        classified.append(ClassifiedEmployee(record=scored, outcome=resolve(scored.final_score)))
    return classified


def summary_line(employee: ClassifiedEmployee) -> str:
    record = employee.record
    return (
        f"{record.full_name} | {record.department} | "
        f"{record.final_score:.2f} | {employee.outcome.value}"
    )


def run_pipeline(
    source: Union[str, Path, LoadReport],
    renderer=None,
) -> PipelineResult:
    """
    Run the whole roster through the pipeline.

    Args:
        source: roster file path, or an already loaded LoadReport
        renderer: object with ``render(payload) -> Path``; when None the
            letter payloads are built but nothing is written
    """
    logger.info("Loading employees...")
    report = source if isinstance(source, LoadReport) else load_report(source)
    logger.info(f"Loaded {len(report.records)} employees")

    logger.info("Cleaning employee data...")
    cleaned = clean_records(report.records)
    logger.info(f"{len(cleaned)} employees after cleaning")

    logger.info("Calculating final scores...")
    employees = classify_records(cleaned)
    for employee in employees:
        logger.debug(summary_line(employee))

    result = PipelineResult(
        loaded=len(report.records),
        employees=employees,
        skipped=report.skipped,
        source_error=report.source_error,
    )

    logger.info("Generating certification letters...")
    for employee in employees:
        payload = build_payload(employee.record)
        if payload is None:
            continue
        result.payloads.append(payload)

        if renderer is None:
            continue
        try:
            path = renderer.render(payload)
        except Exception as e:
            logger.exception(f"Error generating document for {payload.full_name}")
            result.failures.append(RenderFailure(full_name=payload.full_name, error=str(e)))
            continue
        result.documents.append(str(path))

    logger.info(
        f"Processing complete: {len(employees)} employees, "
        f"{len(result.documents)} documents, {len(result.failures)} failures"
    )
    return result
