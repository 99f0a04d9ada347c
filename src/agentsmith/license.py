"""
License detection for agentsmith.

Only repositories under a recognized permissive open-source license are
assimilated. Detection is best effort and never raises.
"""

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# SPDX id -> lowercase phrases identifying the license text
PERMISSIVE_LICENSES: dict[str, list[str]] = {
    "MIT": ["mit license", "the mit license", "mit-license"],
    "Apache-2.0": ["apache license", "apache-2.0", "apache 2.0", "licensed under the apache license"],
    "BSD-2-Clause": ["bsd 2-clause", "bsd-2-clause", "simplified bsd", "freebsd license"],
    "BSD-3-Clause": ["bsd 3-clause", "bsd-3-clause", "new bsd", "modified bsd"],
    "0BSD": ["zero-clause bsd", "0bsd"],
    "GPL-2.0": ["gnu general public license v2", "gpl-2.0", "gplv2", "gnu gpl v2"],
    "GPL-3.0": ["gnu general public license v3", "gpl-3.0", "gplv3", "gnu gpl v3"],
    "LGPL-2.1": ["gnu lesser general public license v2.1", "lgpl-2.1", "lgplv2.1"],
    "LGPL-3.0": ["gnu lesser general public license v3", "lgpl-3.0", "lgplv3"],
    "AGPL-3.0": ["gnu affero general public license", "agpl-3.0", "agplv3"],
    "ISC": ["isc license"],
    "MPL-2.0": ["mozilla public license", "mpl-2.0", "mpl 2.0"],
    "Unlicense": ["unlicense", "this is free and unencumbered software"],
    "CC0-1.0": ["cc0", "creative commons zero", "cc0-1.0"],
    "WTFPL": ["wtfpl", "do what the fuck you want"],
    "Zlib": ["zlib license"],
    "BlueOak-1.0.0": ["blue oak model license"],
}

PROPRIETARY_PHRASES = [
    "all rights reserved",
    "proprietary",
    "confidential",
    "not for redistribution",
    "may not be copied",
]

# Checked in priority order
LICENSE_FILES = [
    "LICENSE",
    "LICENSE.md",
    "LICENSE.txt",
    "LICENCE",
    "LICENCE.md",
    "LICENCE.txt",
    "license",
    "license.md",
    "license.txt",
    "COPYING",
    "COPYING.md",
    "COPYING.txt",
]

_PYPROJECT_LICENSE_PATTERN = re.compile(r'license\s*=\s*(?:\{\s*text\s*=\s*)?"([^"]+)"', re.IGNORECASE)


@dataclass
class LicenseInfo:
    """Result of license detection."""

    detected: bool
    name: str | None = None
    spdx_id: str | None = None
    permissive: bool = False
    file: str | None = None


def _is_permissive_id(license_id: str) -> bool:
    return any(key.lower() == license_id.lower() for key in PERMISSIVE_LICENSES)


def identify_license(content: str) -> LicenseInfo:
    """Identify a license from its text.

    Args:
        content: License file content.

    Returns:
        LicenseInfo; ``detected`` is False if nothing was recognized.
    """
    lower_content = content.lower()

    for spdx_id, phrases in PERMISSIVE_LICENSES.items():
        if any(phrase in lower_content for phrase in phrases):
            return LicenseInfo(detected=True, name=spdx_id, spdx_id=spdx_id, permissive=True)

    for phrase in PROPRIETARY_PHRASES:
        if phrase in lower_content and "mit" not in lower_content:
            return LicenseInfo(detected=True, name="Proprietary", permissive=False)

    return LicenseInfo(detected=False)


def detect_license(repo_path: str | Path) -> LicenseInfo:
    """Detect the license of a repository.

    Looks at license files first, then the ``license`` field of
    package.json and pyproject.toml.

    Args:
        repo_path: Repository root.

    Returns:
        LicenseInfo describing what was found.
    """
    root = Path(repo_path)

    for filename in LICENSE_FILES:
        license_path = root / filename
        if not license_path.is_file():
            continue

        try:
            content = license_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug(f"Cannot read {license_path}: {e}")
            continue

        info = identify_license(content)
        if info.detected:
            info.file = filename
            return info

        # File exists but the license is not recognized
        return LicenseInfo(detected=True, name="Unknown", permissive=False, file=filename)

    package_json = root / "package.json"
    if package_json.is_file():
        try:
            package = json.loads(package_json.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            package = None

        license_id = package.get("license") if isinstance(package, dict) else None
        if isinstance(license_id, str) and license_id:
            return LicenseInfo(
                detected=True,
                name=license_id,
                spdx_id=license_id,
                permissive=_is_permissive_id(license_id),
                file="package.json",
            )

    pyproject = root / "pyproject.toml"
    if pyproject.is_file():
        try:
            match = _PYPROJECT_LICENSE_PATTERN.search(pyproject.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            match = None

        if match:
            license_name = match.group(1).strip()
            return LicenseInfo(
                detected=True,
                name=license_name,
                spdx_id=license_name,
                permissive=_is_permissive_id(license_name),
                file="pyproject.toml",
            )

    return LicenseInfo(detected=False)


def format_license_status(info: LicenseInfo) -> str:
    """Describe a detection result in one line."""
    if not info.detected:
        return "No license detected"
    if info.permissive:
        return f"{info.name} (permissive)"
    return f"{info.name} (not permissive)"
