import pytest


ROSTER_HEADER = "FirstName,LastName,Department,TheoreticalScore,PracticalScore"


@pytest.fixture
def write_roster(tmp_path):
    """Write roster lines (header added) to a CSV file and return its path."""

    def _write(*lines, header=ROSTER_HEADER, name="roster.csv"):
        path = tmp_path / name
        path.write_text("\n".join([header, *lines]) + "\n", encoding="utf-8")
        return path

    return _write
