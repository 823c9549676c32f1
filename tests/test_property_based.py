"""
Property-based tests for the scoring and cleaning rules.
"""

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from certgen.calculator import compute_final_score
from certgen.classifier import resolve
from certgen.cleaner import clean_records, normalize_department, normalize_name
from certgen.models import CertificationOutcome, EmployeeRecord

# ---------------------------------------------------------------------------
# Shared strategies
# ---------------------------------------------------------------------------

finite_score_st = st.floats(allow_nan=False, allow_infinity=False)
int_score_st = st.integers(min_value=0, max_value=100)
name_st = st.text(max_size=12)


@st.composite
def employee_st(draw):
    return EmployeeRecord(
        first_name=draw(st.sampled_from(["john", "JOHN", " John ", "jane", "Jane", ""])),
        last_name=draw(st.sampled_from(["doe", "DOE", "smith", " Smith"])),
        department=draw(st.sampled_from(["engineering", "Engineering ", "sales", "", "  "])),
        theoretical_score=draw(int_score_st),
        practical_score=draw(int_score_st),
    )


# ---------------------------------------------------------------------------
# Classifier
# ---------------------------------------------------------------------------

@settings(max_examples=500)
@given(finite_score_st)
def test_bands_partition_real_line(score):
    outcome = resolve(score)
    if score < 70.0:
        assert outcome == CertificationOutcome.FAILED
    elif score < 90.0:
        assert outcome == CertificationOutcome.PASSED
    else:
        assert outcome == CertificationOutcome.PASSED_EXCELLENT


# ---------------------------------------------------------------------------
# Calculator
# ---------------------------------------------------------------------------

@settings(max_examples=300)
@given(int_score_st, int_score_st)
def test_swapping_scores_changes_result_unless_equal(theoretical, practical):
    assume(theoretical != practical)
    assert compute_final_score(theoretical, practical) != compute_final_score(practical, theoretical)


@given(int_score_st)
def test_equal_scores_are_unchanged(score):
    assert compute_final_score(score, score) == score


@given(int_score_st, int_score_st)
def test_final_score_between_inputs(theoretical, practical):
    final = compute_final_score(theoretical, practical)
    assert min(theoretical, practical) <= final <= max(theoretical, practical)


# ---------------------------------------------------------------------------
# Cleaner
# ---------------------------------------------------------------------------

@settings(max_examples=500)
@given(name_st)
def test_normalize_name_is_idempotent(name):
    once = normalize_name(name)
    assert normalize_name(once) == once


@given(name_st)
def test_normalize_department_is_idempotent(department):
    once = normalize_department(department)
    assert normalize_department(once) == once
    assert once != ""


@settings(max_examples=200)
@given(st.lists(employee_st(), max_size=15))
def test_clean_is_idempotent_and_unique(records):
    cleaned = clean_records(records)

    assert clean_records(cleaned) == cleaned

    keys = [(r.first_name.lower(), r.last_name.lower(), r.department.lower()) for r in cleaned]
    assert len(keys) == len(set(keys))
