from datetime import datetime

import pytz

from sonar_app.core.profiles import QualityProfile, build_header, is_stagnant, layout_visibility

RAW = {
    "key": "java-sonar-way",
    "name": "Sonar way",
    "language": "java",
    "languageName": "Java",
    "userUpdatedAt": "2015-01-10T12:00:00+0000",
    "lastUsed": "2016-02-01T08:00:00+0000",
    "activeRuleCount": 250,
}

NOW = datetime(2016, 3, 1, tzinfo=pytz.UTC)


def test_from_raw():
    profile = QualityProfile.from_raw(RAW)
    assert profile.language_name == "Java"
    assert profile.active_rule_count == 250
    assert profile.user_updated_at.year == 2015


def test_stagnant_after_a_year():
    profile = QualityProfile.from_raw(RAW)
    assert is_stagnant(profile, NOW)
    assert not is_stagnant(profile, datetime(2015, 12, 31))


def test_never_updated_is_not_stagnant():
    profile = QualityProfile.from_raw({**RAW, "userUpdatedAt": None})
    assert not is_stagnant(profile, NOW)


def test_header_context():
    ctx = build_header(QualityProfile.from_raw({**RAW, "lastUsed": None}), NOW)
    assert ctx.title == "Sonar way"
    assert ctx.language_url == "/?language=java"
    assert ctx.changelog_url == "/changelog?key=java-sonar-way"
    assert ctx.update_warning
    assert ctx.usage_warning
    assert ctx.used_label == "Never"


def test_layout_visibility():
    assert layout_visibility([]) == {"header": False, "details": False}
    assert layout_visibility([QualityProfile.from_raw(RAW)]) == {"header": True, "details": True}
