"""Profile loading and validation for YAML-based wpspin vendor profiles."""

from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validators

from wpspin.core.checksum import format_pin
from wpspin.core.errors import ProfileLoadError, ProfileValidationError
from wpspin.core.mac import normalize
from wpspin.core.model import MatchRules, StrategyId, VendorProfile

_PREFIX_RE = re.compile(r"^[0-9A-F]{6,12}$")
LOGGER = logging.getLogger(__name__)


class UniqueKeyLoader(yaml.SafeLoader):
    """YAML loader that rejects duplicate mapping keys."""


UniqueKeyLoader.yaml_implicit_resolvers = {
    key: list(value) for key, value in yaml.SafeLoader.yaml_implicit_resolvers.items()
}

for first_char, mappings in list(UniqueKeyLoader.yaml_implicit_resolvers.items()):
    UniqueKeyLoader.yaml_implicit_resolvers[first_char] = [
        (tag, regexp)
        for tag, regexp in mappings
        if tag != "tag:yaml.org,2002:bool"
    ]


def _construct_mapping(loader: UniqueKeyLoader, node: yaml.Node, deep: bool = False) -> dict[str, Any]:
    mapping: dict[str, Any] = {}
    for key_node, value_node in node.value:
        key = loader.construct_object(key_node, deep=deep)
        if key in mapping:
            raise ProfileValidationError(f"Duplicate key '{key}' in YAML document")
        mapping[key] = loader.construct_object(value_node, deep=deep)
    return mapping


UniqueKeyLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG,
    _construct_mapping,
)


@dataclass(frozen=True)
class LoadedProfiles:
    profiles: dict[str, VendorProfile]
    warnings: tuple[str, ...]


def _load_schema_validator() -> Any:
    schema_text = resources.files("wpspin.schemas").joinpath("profile.schema.json").read_text(
        encoding="utf-8"
    )
    schema = json.loads(schema_text)
    validator_cls = validators.validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema)


def _profile_dirs() -> tuple[Path, Path]:
    xdg_config = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    xdg_data = Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local/share"))
    return xdg_config / "wpspin/profiles", xdg_data / "wpspin/profiles"


def _read_yaml(path: Path | Traversable) -> dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ProfileLoadError(f"Could not read profile file {path}: {exc}") from exc

    try:
        loaded = yaml.load(content, Loader=UniqueKeyLoader)
    except yaml.YAMLError as exc:
        raise ProfileValidationError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ProfileValidationError(f"Profile file {path} must contain a mapping at root")
    return loaded


def _normalize_prefix(prefix: str, *, context: str) -> str:
    normalized = normalize(prefix.strip())
    if not _PREFIX_RE.match(normalized):
        raise ProfileValidationError(f"{context} must be 6-12 hex characters, got '{prefix}'")
    return normalized


def _normalize_strategy(code: int, *, context: str) -> StrategyId:
    strategy_id = StrategyId.from_code(code)
    if strategy_id is None:
        raise ProfileValidationError(f"{context} references unknown strategy code {code}")
    return strategy_id


def _normalize_static_pin(value: str) -> str:
    # Seven digits are a PIN body; eight digits are used verbatim.
    if len(value) == 7:
        return format_pin(int(value))
    return value


def _build_profile(doc: dict[str, Any], source: Path | Traversable) -> VendorProfile:
    validator = _load_schema_validator()
    try:
        validator.validate(doc)
    except ValidationError as exc:
        path = ".".join(str(p) for p in exc.path)
        where = f" ({path})" if path else ""
        raise ProfileValidationError(f"Schema validation failed for {source}{where}: {exc.message}") from exc

    prefixes = tuple(
        _normalize_prefix(prefix, context=f"{doc['id']}.match.mac_prefix")
        for prefix in doc["match"]["mac_prefix"]
    )
    strategies = tuple(
        _normalize_strategy(code, context=f"{doc['id']}.strategies")
        for code in doc.get("strategies", [])
    )
    static_pins = tuple(_normalize_static_pin(pin) for pin in doc.get("static_pins", []))

    return VendorProfile(
        id=doc["id"],
        name=doc["name"],
        match=MatchRules(mac_prefix=prefixes),
        strategies=strategies,
        static_pins=static_pins,
    )


def _iter_packaged_profile_paths() -> list[Traversable]:
    profile_root = resources.files("wpspin.profiles")
    return [item for item in profile_root.iterdir() if item.name.endswith((".yml", ".yaml"))]


def _iter_user_profile_paths() -> list[Path]:
    paths: list[Path] = []
    for directory in _profile_dirs():
        if not directory.exists() or not directory.is_dir():
            continue
        paths.extend(sorted(p for p in directory.iterdir() if p.suffix in {".yml", ".yaml"}))
    return paths


def load_profiles() -> LoadedProfiles:
    profiles: dict[str, VendorProfile] = {}
    warnings: list[str] = []

    for path in sorted(_iter_packaged_profile_paths(), key=lambda p: p.name):
        doc = _read_yaml(path)
        profile = _build_profile(doc, path)
        profiles[profile.id] = profile

    for path in _iter_user_profile_paths():
        doc = _read_yaml(path)
        profile = _build_profile(doc, path)
        if profile.id in profiles:
            warning = f"User profile '{profile.id}' overrides packaged profile"
            LOGGER.warning(warning)
            warnings.append(warning)
        profiles[profile.id] = profile

    return LoadedProfiles(profiles=profiles, warnings=tuple(warnings))
