from sonar_app.core.mappers import issues_to_dataframe, map_issue, map_severity


def test_severity_mapping():
    assert map_severity("BLOCKER") == 5
    assert map_severity("minor") == 2
    assert map_severity("INFO") == 1
    assert map_severity(None) == -99
    assert map_severity("UNKNOWN") == -99


def test_map_issue_unwraps_and_keeps_extra_keys():
    issue = map_issue({"issue": {"key": "AX-1", "status": "OPEN", "debt": "5min"}})
    assert issue.to_json() == {"key": "AX-1", "status": "OPEN", "debt": "5min"}


def test_empty_dataframe_has_core_columns():
    df = issues_to_dataframe([])
    assert df.empty
    assert "severity_value" in df.columns


def test_dataframe_dates_and_defaults():
    issue = map_issue({"key": "AX-1", "severity": "MAJOR", "creationDate": "2016-03-01T10:00:00+0100"})
    df = issues_to_dataframe([issue])
    row = df.iloc[0]
    assert row["assignee"] == "Unassigned"
    assert row["location_lines"] == 0
    assert row["creation_date"].year == 2016


def test_incomplete_text_range_counts_no_lines(caplog):
    broken = map_issue({"key": "AX-1", "status": "OPEN", "textRange": {"startLine": 5}})
    valid = map_issue(
        {"key": "AX-2", "status": "OPEN", "textRange": {"startLine": 1, "endLine": 2, "startOffset": 0, "endOffset": 4}}
    )
    with caplog.at_level("WARNING"):
        df = issues_to_dataframe([broken, valid])
    lines = df.set_index("key")["location_lines"]
    assert lines["AX-1"] == 0
    assert lines["AX-2"] == 2
    assert "AX-1" in caplog.text
