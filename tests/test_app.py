from sonar_app.app import ordered_pages


def test_preferred_pages_first():
    assert ordered_pages(["Debug", "Setup / Connection", "Issues", "Another"]) == [
        "Issues",
        "Setup / Connection",
        "Another",
        "Debug",
    ]
