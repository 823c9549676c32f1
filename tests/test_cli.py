from certgen.__main__ import main


def test_console_run_writes_letters(write_roster, tmp_path, capsys):
    roster = write_roster(
        "John,Doe,Engineering,80,90",
        "Jane,Smith,Sales,100,100",
        "Bob,Stone,Support,50,50",
    )
    out = tmp_path / "Output"

    assert main(["--input", str(roster), "--output-dir", str(out)]) == 0

    stdout = capsys.readouterr().out
    assert "Loaded 3 employees from CSV" in stdout
    assert "John Doe | Engineering | 86.00 | Passed" in stdout
    assert "Jane Smith | Sales | 100.00 | PassedExcellent" in stdout
    assert "Bob Stone | Support | 50.00 | Failed" in stdout
    assert "Processing complete" in stdout

    assert sorted(p.name for p in out.iterdir()) == [
        "Jane Smith_Certification.docx",
        "John Doe_Certification.docx",
    ]


def test_console_run_without_documents(write_roster, tmp_path, capsys):
    roster = write_roster("John,Doe,Engineering,80,90")
    out = tmp_path / "Output"

    main(["--input", str(roster), "--output-dir", str(out), "--no-documents"])

    assert "John Doe" in capsys.readouterr().out
    assert not out.exists()


def test_console_run_missing_input(tmp_path, capsys):
    assert main(["--input", str(tmp_path / "missing.csv"), "--no-documents"]) == 0
    assert "Loaded 0 employees from CSV" in capsys.readouterr().out


def test_console_reports_loaded_and_unique_counts(write_roster, capsys):
    roster = write_roster(
        "John,Doe,Engineering,80,90",
        "JOHN, doe ,engineering,80,90",
        "Jane,Smith,Sales,100,100",
    )

    main(["--input", str(roster), "--no-documents"])

    stdout = capsys.readouterr().out
    assert "Loaded 3 employees from CSV (2 after removing duplicates)" in stdout
    # One summary line per employee
    assert stdout.count("John Doe | Engineering") == 1
