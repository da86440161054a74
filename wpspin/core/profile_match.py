"""BSSID-to-profile matching logic."""

from __future__ import annotations

from wpspin.core.mac import normalize
from wpspin.core.model import VendorProfile


def match_score(bssid: str, profile: VendorProfile) -> int:
    """Length of the longest profile prefix the BSSID starts with, 0 if none."""
    normalized = normalize(bssid)
    return max(
        (len(prefix) for prefix in profile.match.mac_prefix if normalized.startswith(prefix)),
        default=0,
    )


def profiles_for_bssid(bssid: str, profiles: dict[str, VendorProfile]) -> list[VendorProfile]:
    scored = [(match_score(bssid, profile), profile) for profile in profiles.values()]
    matched = [(score, profile) for score, profile in scored if score > 0]
    matched.sort(key=lambda item: (-item[0], item[1].id))
    return [profile for _, profile in matched]
