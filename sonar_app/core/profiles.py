"""Quality profile records and the data behind the profile page header."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any
from urllib.parse import urlencode

import pandas as pd
import pytz

from .config import STAGNANT_PROFILE_YEARS, TIMEZONE


def _parse_ts(val) -> pd.Timestamp | None:
    if not val:
        return None
    ts = pd.to_datetime(val, utc=True, errors="coerce")
    if ts is None or pd.isna(ts):
        return None
    return ts


@dataclass(slots=True)
class QualityProfile:
    key: str
    name: str
    language: str | None
    language_name: str | None
    user_updated_at: pd.Timestamp | None = None
    last_used: pd.Timestamp | None = None
    is_default: bool = False
    active_rule_count: int = 0

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> QualityProfile:
        return cls(
            key=raw.get("key"),
            name=raw.get("name"),
            language=raw.get("language"),
            language_name=raw.get("languageName") or raw.get("language"),
            user_updated_at=_parse_ts(raw.get("userUpdatedAt")),
            last_used=_parse_ts(raw.get("lastUsed")),
            is_default=bool(raw.get("isDefault", False)),
            active_rule_count=int(raw.get("activeRuleCount") or 0),
        )


@dataclass(slots=True)
class ProfileHeaderContext:
    title: str
    profile_key: str
    language_name: str | None
    language_url: str
    changelog_url: str
    updated_label: str
    update_warning: bool
    used_label: str
    usage_warning: bool


def _now(now: datetime | None) -> pd.Timestamp:
    if now is None:
        return pd.Timestamp.now(tz="UTC")
    ts = pd.Timestamp(now)
    return ts.tz_localize("UTC") if ts.tzinfo is None else ts


def is_stagnant(profile: QualityProfile, now: datetime | None = None) -> bool:
    """True when nobody has edited the profile for at least a whole year."""
    if profile.user_updated_at is None:
        return False
    return profile.user_updated_at + pd.DateOffset(years=STAGNANT_PROFILE_YEARS) <= _now(now)


def format_profile_date(ts: pd.Timestamp | None) -> str:
    if ts is None:
        return "Never"
    return ts.tz_convert(pytz.timezone(TIMEZONE)).strftime("%Y-%m-%d %H:%M")


def build_header(profile: QualityProfile, now: datetime | None = None) -> ProfileHeaderContext:
    return ProfileHeaderContext(
        title=profile.name,
        profile_key=profile.key,
        language_name=profile.language_name,
        language_url="/?" + urlencode({"language": profile.language or ""}),
        changelog_url="/changelog?" + urlencode({"key": profile.key}),
        updated_label=format_profile_date(profile.user_updated_at),
        update_warning=is_stagnant(profile, now),
        used_label=format_profile_date(profile.last_used),
        usage_warning=profile.last_used is None,
    )


def layout_visibility(profiles: Sequence[QualityProfile]) -> dict[str, bool]:
    """Header and details regions only make sense with at least one profile."""
    shown = len(profiles) > 0
    return {"header": shown, "details": shown}
