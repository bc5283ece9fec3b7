import pandas as pd

from sonar_app.visual.charts import severity_breakdown


def test_severity_breakdown():
    df = pd.DataFrame(
        [
            {"key": "AX-1", "severity": "MAJOR"},
            {"key": "AX-2", "severity": "BLOCKER"},
            {"key": "AX-3", "severity": "MAJOR"},
        ]
    )
    assert severity_breakdown(df) is not None


def test_severity_breakdown_empty():
    assert severity_breakdown(pd.DataFrame()) is None
