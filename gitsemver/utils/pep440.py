"""
Semantic version to PEP 440 conversion.

Python packaging tools reject most semver pre-release labels, so a derived
version such as ``1.2.3-beta.dev.4+feature-x.deadbe`` has to be rewritten
before it can go into ``pyproject.toml`` or a wheel name::

    >>> to_pep440("1.2.3-beta.dev.4+feature-x.deadbe")
    '1.2.3b0.dev4+feature.x.deadbe'

Mapping rules:

- ``alpha``/``a`` -> ``a``, ``beta``/``b`` -> ``b``, ``rc``/``c``/``pre``/
  ``preview`` -> ``rc``. The number comes from a digit suffix (``rc1``) or
  the next numeric identifier (``rc.1``), defaulting to 0.
- ``dev`` followed by a number becomes ``.devN``.
- Build metadata becomes the local version label.

The result is normalized through :class:`packaging.version.Version`.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple, Union

from packaging.version import InvalidVersion, Version

from gitsemver.exceptions import ConversionError
from gitsemver.models.version import SemanticVersion
from gitsemver.utils.logger import get_logger

logger = get_logger("utils.pep440")

_PRE_LABELS = {
    "alpha": "a",
    "a": "a",
    "beta": "b",
    "b": "b",
    "rc": "rc",
    "c": "rc",
    "pre": "rc",
    "preview": "rc",
}

_LABEL_RE = re.compile(r"^(?P<label>[a-zA-Z]+)(?P<number>[0-9]*)$")
_LOCAL_ILLEGAL = re.compile(r"[^0-9A-Za-z.]+")


def _split_label(identifier: str) -> Optional[Tuple[str, Optional[int]]]:
    """Split ``rc1`` into ``("rc", 1)``; None if not a letters+digits label."""
    match = _LABEL_RE.match(identifier)
    if match is None:
        return None
    number = match.group("number")
    return match.group("label").lower(), int(number) if number else None


def _take_number(identifiers: List[str], index: int) -> Tuple[Optional[int], int]:
    """Return the numeric identifier at ``index`` (if any) and the next index."""
    if index < len(identifiers) and identifiers[index].isdigit():
        return int(identifiers[index]), index + 1
    return None, index


def to_pep440(version: Union[str, SemanticVersion]) -> str:
    """Convert a semantic version to a normalized PEP 440 version string.

    Args:
        version: Semver string or already parsed version.

    Returns:
        The PEP 440 rendering, normalized by ``packaging``.

    Raises:
        ConversionError: The version is not valid semver, or its pre-release
            uses labels that have no PEP 440 equivalent.
    """
    text = str(version)
    if isinstance(version, SemanticVersion):
        parsed = version
    else:
        from gitsemver.core.parser import parse_version

        parsed = parse_version(version)
        if parsed is None:
            raise ConversionError(f"Not a valid semantic version: {text!r}", version=text)

    pre: Optional[str] = None
    dev: Optional[int] = None

    identifiers = list(parsed.prerelease_identifiers)
    index = 0
    while index < len(identifiers):
        split = _split_label(identifiers[index])
        if split is None:
            raise ConversionError(
                f"Pre-release identifier {identifiers[index]!r} has no PEP 440 equivalent",
                version=text,
            )
        label, number = split
        index += 1
        if number is None:
            number, index = _take_number(identifiers, index)

        if label == "dev" and dev is None:
            dev = number if number is not None else 0
        elif label in _PRE_LABELS and pre is None and dev is None:
            pre = f"{_PRE_LABELS[label]}{number if number is not None else 0}"
        else:
            raise ConversionError(
                f"Pre-release label {label!r} cannot be expressed in PEP 440",
                version=text,
            )

    rendered = f"{parsed.major}.{parsed.minor}.{parsed.patch}"
    if pre is not None:
        rendered += pre
    if dev is not None:
        rendered += f".dev{dev}"
    if parsed.build:
        local = _LOCAL_ILLEGAL.sub(".", parsed.build).strip(".")
        if local:
            rendered += f"+{local}"

    try:
        normalized = str(Version(rendered))
    except InvalidVersion as exc:
        raise ConversionError(
            f"Cannot express {text} as PEP 440: {exc}",
            version=text,
        ) from exc

    logger.debug("Converted %s to PEP 440 %s", text, normalized)
    return normalized
