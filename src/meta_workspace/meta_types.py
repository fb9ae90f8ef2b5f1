"""Meta file kind detection.

The editor groups workspace files by the kind of vehicle data they carry.
Detection looks for well-known root element and container names in the
content first and falls back to hints in the file name.
"""

from __future__ import annotations

_CONTENT_MARKERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("handling", ("CHandlingDataMgr", "HandlingData")),
    ("vehicles", ("CVehicleModelInfo__InitDataList", "InitDatas")),
    ("carcols", ("CVehicleModelInfoVarGlobal",)),
    ("carvariations", ("CVehicleModelInfoVariation", "variationData")),
    ("vehiclelayouts", ("CVehicleLayoutData", "vehicleLayouts", "VehicleLayouts", "CVehicleMetadataMgr")),
)

_NAME_HINTS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("handling", ("handling",)),
    ("vehicles", ("vehicles",)),
    ("carcols", ("carcols",)),
    ("carvariations", ("carvariation",)),
    ("vehiclelayouts", ("vehiclelayout",)),
    ("modkits", ("modkit",)),
)


# Fallback used when parsing: modkits live in carcols files, and "vehicles"
# is tested last so a combined name such as vehicles_carcols counts as carcols.
_PARSE_NAME_HINTS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("handling", ("handling",)),
    ("carcols", ("carcols", "modkit")),
    ("carvariations", ("carvariation",)),
    ("vehiclelayouts", ("vehiclelayout",)),
    ("vehicles", ("vehicles",)),
)


def _match_name(file_name: str, table: tuple[tuple[str, tuple[str, ...]], ...]) -> str | None:
    name = file_name.lower()
    for meta_type, hints in table:
        if any(hint in name for hint in hints):
            return meta_type
    return None


def meta_type_from_file_name(file_name: str) -> str | None:
    """Guess the meta kind from a file name alone, case-insensitively.

    This is the grouping the workspace listing shows, where modkits are their
    own kind.
    """
    return _match_name(file_name, _NAME_HINTS)


def detect_meta_type(content: str, file_name: str | None = None) -> str | None:
    """Return the meta kind of ``content``, or ``None`` if unrecognised.

    Content markers win over the file name, so a renamed ``handling.meta``
    that really holds vehicle definitions is reported as ``vehicles``.
    """
    for meta_type, markers in _CONTENT_MARKERS:
        if any(marker in content for marker in markers):
            return meta_type
    if file_name:
        return _match_name(file_name, _PARSE_NAME_HINTS)
    return None


def relative_to_root(path: str, root: str) -> str:
    """Return ``path`` relative to the workspace ``root`` using ``/`` separators.

    Paths outside the root come back unchanged apart from separator
    normalisation.
    """
    full = path.replace("\\", "/")
    prefix = root.replace("\\", "/").rstrip("/")
    if full.lower().startswith(prefix.lower() + "/"):
        return full[len(prefix) + 1:]
    return full
