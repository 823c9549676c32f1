"""
Certification letters.

Builds the letter payload for eligible employees and fills a DOCX letter
template with it. Placeholders use the mail-merge guillemets notation,
e.g. «FullName».
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Optional, Union

from docx import Document

from .calculator import round_half_away
from .classifier import is_eligible, resolve
from .exceptions import DocumentRenderError
from .models import CertificationPayload, EmployeeRecord
from .rules import (
    DOCUMENT_SCORE_DECIMAL_PLACES,
    EXCELLENCE_SCORE,
    EXCELLENT_BODY_TEXT,
    NOT_PROVIDED,
    STANDARD_BODY_TEXT,
)

logger = logging.getLogger("certgen.documents")

PLACEHOLDERS = {
    "full_name": "«FullName»",
    "department": "«Department»",
    "phone": "«Phone»",
    "email": "«Email»",
    "final_score": "«FinalScore»",
    "body_text": "«BodyText»",
}

DEFAULT_LAYOUT = (
    ("Certification Notice", "Title"),
    ("Name: «FullName»", None),
    ("Department: «Department»", None),
    ("Phone: «Phone»", None),
    ("Email: «Email»", None),
    ("Final score: «FinalScore»", None),
    ("«BodyText»", None),
)

_UNSAFE_FILENAME = re.compile(r'[\\/:*?"<>|]')


def format_score(score: float) -> str:
    value = round_half_away(score, DOCUMENT_SCORE_DECIMAL_PLACES)
    return f"{value:.{DOCUMENT_SCORE_DECIMAL_PLACES}f}"


def body_text(final_score: float) -> str:
    if final_score >= EXCELLENCE_SCORE:
        return EXCELLENT_BODY_TEXT.format(score=format_score(final_score))
    return STANDARD_BODY_TEXT


def _or_not_provided(value: Optional[str]) -> str:
    if value is None or not value.strip():
        return NOT_PROVIDED
    return value


def build_payload(record: EmployeeRecord) -> Optional[CertificationPayload]:
    """Letter payload for an eligible employee, or None below the passing score."""
    if not is_eligible(record.final_score):
        return None

    return CertificationPayload(
        full_name=f"{record.first_name} {record.last_name}",
        department=record.department,
        phone=_or_not_provided(record.phone),
        email=_or_not_provided(record.email),
        final_score=format_score(record.final_score),
        body_text=body_text(record.final_score),
        outcome=resolve(record.final_score),
    )


def document_filename(payload: CertificationPayload) -> str:
    name = _UNSAFE_FILENAME.sub("_", payload.full_name.strip()) or "employee"
    return f"{name}_Certification.docx"


def _replacements(payload: CertificationPayload) -> Dict[str, str]:
    values = payload.model_dump()
    return {placeholder: str(values[field]) for field, placeholder in PLACEHOLDERS.items()}


def _fill_paragraph(paragraph, replacements: Dict[str, str]) -> None:
    text = paragraph.text
    if "«" not in text:
        return
    for placeholder, value in replacements.items():
        text = text.replace(placeholder, value)
    # Setting text collapses the paragraph's runs into one
    paragraph.text = text


def _fill_container(container, replacements: Dict[str, str]) -> None:
    for paragraph in container.paragraphs:
        _fill_paragraph(paragraph, replacements)
    for table in container.tables:
        for row in table.rows:
            for cell in row.cells:
                for paragraph in cell.paragraphs:
                    _fill_paragraph(paragraph, replacements)


def _fill_document(document, replacements: Dict[str, str]) -> None:
    _fill_container(document, replacements)
    for section in document.sections:
        for part in (
            section.header,
            section.footer,
            section.first_page_header,
            section.first_page_footer,
            section.even_page_header,
            section.even_page_footer,
        ):
            # Linked parts have no definition of their own; reading one would add it
            if part.is_linked_to_previous:
                continue
            _fill_container(part, replacements)


class DocxRenderer:
    """
    Writes one DOCX letter per payload into ``output_dir``.

    With no ``template_path`` a built-in letter layout is used. Placeholders
    are filled in the body, tables, headers and footers. A paragraph that
    holds a placeholder is rewritten as a single run, so character
    formatting inside that paragraph is not kept.
    """

    def __init__(self, output_dir: Union[str, Path], template_path: Union[str, Path, None] = None):
        self.output_dir = Path(output_dir)
        self.template_path = Path(template_path) if template_path else None

    def _new_document(self):
        if self.template_path is not None:
            return Document(str(self.template_path))

        document = Document()
        for text, style in DEFAULT_LAYOUT:
            if style:
                document.add_paragraph(text, style=style)
            else:
                document.add_paragraph(text)
        return document

    def render(self, payload: CertificationPayload) -> Path:
        """
        Fill the template for ``payload`` and save it.

        Raises:
            DocumentRenderError: if the template cannot be loaded or the
                letter cannot be written
        """
        target = self.output_dir / document_filename(payload)

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            if target.exists():
                target.unlink()

            document = self._new_document()
            _fill_document(document, _replacements(payload))
            document.save(str(target))
        except Exception as e:
            raise DocumentRenderError(payload.full_name, str(e)) from e

        logger.info(f"Generated document: {target}")
        return target
