"""Configuration loader: mapping / pyproject.toml → DocsConfig.

Format (``[tool.docpolicy]`` in pyproject.toml):

    severity = "error"                  # or "warning"
    require = ["classes", "functions"]  # enabled without exemptions

    [tool.docpolicy.methods]
    locations = ["instance", "static"]
    privacies = ["public"]
    ignores = [{ prefix = "test_" }, { suffix = "_impl" }]

    [tool.docpolicy.variables]
    exposures = ["exported"]

A doc type key may also be a boolean: true enables it without exemptions,
false leaves it unchecked. Unset locations/privacies/exposures are empty.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, TypeVar

from docpolicy.domain.exceptions.configuration import ConfigurationError
from docpolicy.domain.model.configuration import (
    BLOCK_DOC_TYPES,
    MEMBER_DOC_TYPES,
    DocRequirement,
    DocsConfig,
)
from docpolicy.domain.model.descriptor import BlockDescriptor, ExclusionDescriptor
from docpolicy.domain.model.enums import DocType, Severity
from docpolicy.domain.model.policy import Exposure, Ignore, Location, Privacy

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

TOOL_SECTION = "docpolicy"

_MEMBER_OPTIONS = frozenset({"locations", "privacies", "ignores"})
_BLOCK_OPTIONS = frozenset({"exposures"})
_IGNORE_KEYS = frozenset({"prefix", "suffix"})

E = TypeVar("E", bound=Enum)


def load_config(pyproject_path: Path) -> DocsConfig:
    """Load configuration from a pyproject.toml file.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed configuration, DocsConfig.default() if the file has no
        [tool.docpolicy] section

    Raises:
        ConfigurationError: If file is unreadable or section is invalid
    """
    try:
        with pyproject_path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(str(pyproject_path), "file not found") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(str(pyproject_path), f"invalid TOML: {e}") from e

    section = data.get("tool", {}).get(TOOL_SECTION)
    if section is None:
        logger.debug("No [tool.%s] in %s, using defaults", TOOL_SECTION, pyproject_path)
        return DocsConfig.default()

    return config_from_mapping(section)


def config_from_mapping(mapping: Mapping[str, object]) -> DocsConfig:
    """Build configuration from a raw mapping.

    Args:
        mapping: Raw configuration (e.g. parsed TOML table)

    Returns:
        Validated, fully defaulted configuration

    Raises:
        ConfigurationError: On unknown keys, names or wrong value shapes
    """
    if not isinstance(mapping, Mapping):
        raise ConfigurationError(TOOL_SECTION, f"expected table, got {type(mapping).__name__}")

    severity = Severity.ERROR
    requirements: dict[DocType, DocRequirement] = {}

    for key, value in mapping.items():
        match key:
            case "severity":
                severity = _parse_severity(value)
            case "require":
                for doc_type in _parse_names(key, value, DocType, "doc type"):
                    _add(requirements, key, DocRequirement.everywhere(doc_type))
            case _:
                doc_type = _parse_name(key, key, DocType, "doc type")
                requirement = _parse_requirement(doc_type, value)
                if requirement is not None:
                    _add(requirements, key, requirement)

    logger.debug(
        "Loaded configuration: %s",
        ", ".join(sorted(dt.value for dt in requirements)) or "nothing required",
    )
    return DocsConfig(requirements=requirements, severity=severity)


def _add(
    requirements: dict[DocType, DocRequirement],
    key: str,
    requirement: DocRequirement,
) -> None:
    if requirement.doc_type in requirements:
        raise ConfigurationError(key, f"'{requirement.doc_type.value}' configured twice")
    requirements[requirement.doc_type] = requirement


def _parse_severity(value: object) -> Severity:
    if not isinstance(value, str):
        raise ConfigurationError("severity", f"expected string, got {type(value).__name__}")
    try:
        return Severity[value.upper()]
    except KeyError:
        names = ", ".join(s.name.lower() for s in Severity)
        raise ConfigurationError(
            "severity", f"unknown severity '{value}', expected {names}"
        ) from None


def _parse_requirement(doc_type: DocType, value: object) -> DocRequirement | None:
    key = doc_type.value

    if isinstance(value, bool):
        return DocRequirement.everywhere(doc_type) if value else None

    if not isinstance(value, Mapping):
        raise ConfigurationError(key, f"expected table or boolean, got {type(value).__name__}")

    if doc_type in MEMBER_DOC_TYPES:
        _check_options(key, value, _MEMBER_OPTIONS)
        return DocRequirement(doc_type=doc_type, member=_parse_member(key, value))

    if doc_type in BLOCK_DOC_TYPES:
        _check_options(key, value, _BLOCK_OPTIONS)
        exposures = frozenset(
            _parse_names(f"{key}.exposures", value.get("exposures", []), Exposure, "exposure")
        )
        return DocRequirement(doc_type=doc_type, block=BlockDescriptor(exposures=exposures))

    _check_options(key, value, frozenset())
    return DocRequirement.everywhere(doc_type)


def _parse_member(key: str, value: Mapping[str, object]) -> ExclusionDescriptor:
    locations = _parse_names(f"{key}.locations", value.get("locations", []), Location, "location")
    privacies = _parse_names(f"{key}.privacies", value.get("privacies", []), Privacy, "privacy")
    ignores = _parse_ignores(f"{key}.ignores", value.get("ignores", []))
    return ExclusionDescriptor(
        locations=frozenset(locations),
        privacies=frozenset(privacies),
        ignores=ignores,
    )


def _parse_ignores(key: str, value: object) -> tuple[Ignore, ...]:
    if not isinstance(value, list):
        raise ConfigurationError(key, f"expected list, got {type(value).__name__}")

    ignores: list[Ignore] = []
    for index, item in enumerate(value):
        item_key = f"{key}[{index}]"
        if not isinstance(item, Mapping):
            raise ConfigurationError(item_key, f"expected table, got {type(item).__name__}")
        _check_options(item_key, item, _IGNORE_KEYS)
        for side in ("prefix", "suffix"):
            side_value = item.get(side)
            if side_value is not None and not isinstance(side_value, str):
                raise ConfigurationError(
                    f"{item_key}.{side}", f"expected string, got {type(side_value).__name__}"
                )
        ignores.append(Ignore(prefix=item.get("prefix"), suffix=item.get("suffix")))
    return tuple(ignores)


def _check_options(key: str, value: Mapping[str, object], allowed: frozenset[str]) -> None:
    unknown = sorted(set(value) - allowed)
    if unknown:
        expected = ", ".join(sorted(allowed)) or "no options"
        raise ConfigurationError(
            key, f"unknown option(s) {', '.join(unknown)}; expected {expected}"
        )


def _parse_names(key: str, value: object, enum_type: type[E], what: str) -> list[E]:
    if not isinstance(value, list):
        raise ConfigurationError(key, f"expected list, got {type(value).__name__}")
    return [_parse_name(key, item, enum_type, what) for item in value]


def _parse_name(key: str, value: object, enum_type: type[E], what: str) -> E:
    if not isinstance(value, str):
        raise ConfigurationError(key, f"expected string, got {type(value).__name__}")
    try:
        return enum_type(value)
    except ValueError:
        names = ", ".join(str(member.value) for member in enum_type)
        raise ConfigurationError(
            key, f"unknown {what} '{value}', expected one of {names}"
        ) from None
