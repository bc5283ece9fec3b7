from sonar_app.core.config import DISPLAY_ORDER_ISSUE_LIST
from sonar_app.core.column_config import get_columns, load_column_sets


def test_column_sets_load():
    sets = load_column_sets()
    assert "detail" in sets and "core" in sets
    assert get_columns("locations") == ["line", "from", "to"]
    assert isinstance(get_columns("issue_list"), list)


def test_yaml_overrides(tmp_path):
    (tmp_path / "columns.yaml").write_text("sets:\n  issue_list: [Issue, severity]\n")
    sets = load_column_sets(tmp_path, reload=True)
    assert sets["issue_list"] == ["Issue", "severity"]
    assert "detail" in sets
    load_column_sets(reload=True)


def test_yaml_without_mapping_falls_back(tmp_path):
    (tmp_path / "columns.yaml").write_text("- Issue\n- severity\n")
    sets = load_column_sets(tmp_path, reload=True)
    assert sets["issue_list"] == list(DISPLAY_ORDER_ISSUE_LIST)
    assert sets["locations"] == ["line", "from", "to"]
    load_column_sets(reload=True)
