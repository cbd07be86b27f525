from __future__ import annotations

"""
Scan Settings Validation Service.

Gatekeeper between untrusted settings (config.json, CLI overrides) and the
folder index. Coerces types, clamps the depth bound, and fills missing keys
with defaults, reporting every correction as a warning.
"""

import logging
from typing import Any, Dict, List, Tuple

from photoindex.domain.config import get_default_scan_settings
from photoindex.domain.constants import DISPLAY_MODES

logger = logging.getLogger(__name__)

MAX_DEPTH_CEILING = 500


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_scan_settings(
        settings: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a scan settings dictionary.

    Args:
        settings: Raw settings data (usually a dictionary).
        strict: If True, raise on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized settings and warnings.

    Raises:
        TypeError: In strict mode, for values of the wrong type.
        ValueError: In strict mode, for values out of range.
    """
    warnings: List[str] = []
    defaults = get_default_scan_settings()

    if not isinstance(settings, dict):
        msg = f"Invalid settings type: expected dict, received {type(settings).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(settings)

    merged["max_depth"] = _as_depth(merged.get("max_depth"), defaults["max_depth"], warnings, strict)
    merged["persist_after_scan"] = _as_bool(
        merged.get("persist_after_scan"), defaults["persist_after_scan"],
        "persist_after_scan", warnings, strict
    )
    merged["exclusion_list"] = _as_list_str(
        merged.get("exclusion_list"), defaults["exclusion_list"],
        "exclusion_list", warnings, strict
    )
    merged["display_mode"] = _as_choice(
        merged.get("display_mode"), defaults["display_mode"], DISPLAY_MODES,
        "display_mode", warnings, strict
    )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_depth(value: Any, fallback: int, warnings: List[str], strict: bool) -> int:
    """Accept non-negative integers up to MAX_DEPTH_CEILING."""
    if value is None:
        return fallback

    if isinstance(value, str) and not strict:
        try:
            value = int(value.strip())
            warnings.append(f"Field 'max_depth' converted from string to {value}.")
        except ValueError:
            warnings.append(f"Invalid field 'max_depth': '{value}' is not a number. Using fallback.")
            return fallback

    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Invalid field 'max_depth': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if value < 0 or value > MAX_DEPTH_CEILING:
        msg = f"Field 'max_depth' out of range (0..{MAX_DEPTH_CEILING}): {value}."
        if strict:
            raise ValueError(msg)
        clamped = min(max(value, 0), MAX_DEPTH_CEILING)
        warnings.append(f"{msg} Clamped to {clamped}.")
        return clamped

    return value


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """
    Ensure input is a list of stripped strings.

    An explicitly empty list is kept: it disables exclusions altogether.
    """
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        warnings.append(f"Field '{field}' converted from CSV string to list.")
        return [x.strip() for x in value.split(",") if x.strip()]

    if isinstance(value, list):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str) and item.strip():
                out.append(item.strip())
            else:
                msg = f"Invalid item in '{field}[{i}]': expected non-empty str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


def _as_choice(
        value: Any,
        fallback: str,
        choices: Tuple[str, ...],
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    if value is None:
        return fallback
    if isinstance(value, str) and value.strip().lower() in choices:
        return value.strip().lower()

    msg = f"Invalid field '{field}': {value!r} is not one of {', '.join(choices)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
