"""YAML loader for region-code tables.

Region names are not bundled with the library. Applications that want
district-level names provide a YAML file mapping 6-digit codes to names:

    regions:
      "110000": 北京市
      "110100": 市辖区
      "110105": 朝阳区

Codes must be quoted so YAML keeps their leading digits as strings.
"""

import os
import threading
from pathlib import Path
from typing import Optional

import yaml

from cn_idcard.core.checksum import is_digits
from cn_idcard.logging import get_logger
from cn_idcard.region.lookup import MappingRegionLookup, ProvinceRegionLookup, RegionLookup

logger = get_logger(__name__)


def load_regions_from_yaml(path: Path | str) -> dict[str, str]:
    """Load a region-code table from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        Mapping of 6-digit region code to region name.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the YAML structure is invalid.
        yaml.YAMLError: If the YAML is malformed.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Region file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML structure: expected dict, got {type(data).__name__}")

    regions_data = data.get("regions", {})

    if not isinstance(regions_data, dict):
        raise ValueError(
            f"Invalid regions structure: expected dict, got {type(regions_data).__name__}"
        )

    regions = {}
    for code, name in regions_data.items():
        if not isinstance(code, str) or len(code) != 6 or not is_digits(code):
            raise ValueError(f"Region code must be a quoted 6-digit string, got {code!r}")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Region {code} has an empty or non-string name")
        regions[code] = name.strip()

    return regions


def load_regions_from_yaml_safe(path: Path | str) -> tuple[dict[str, str], Optional[str]]:
    """Load regions with error handling, returning any error message.

    Returns:
        Tuple of (regions, error_message). If successful, error_message is None.
        If failed, regions is an empty dict.
    """
    try:
        return load_regions_from_yaml(path), None
    except FileNotFoundError as e:
        return {}, str(e)
    except ValueError as e:
        return {}, f"Configuration error: {e}"
    except yaml.YAMLError as e:
        return {}, f"YAML parsing error: {e}"


# Global region lookup (singleton-like)
_region_lookup: Optional[RegionLookup] = None
_region_lookup_lock = threading.Lock()


def get_region_lookup() -> RegionLookup:
    """Get the global region lookup.

    Loads the table from CN_IDCARD_REGION_FILE if set; otherwise, or if the
    file cannot be loaded, falls back to province-level lookup.

    Returns:
        Global RegionLookup instance.
    """
    global _region_lookup

    with _region_lookup_lock:
        if _region_lookup is None:
            region_file = os.getenv("CN_IDCARD_REGION_FILE")
            if region_file:
                regions, error = load_regions_from_yaml_safe(region_file)
                if error:
                    logger.warning(
                        "Falling back to province lookup",
                        extra={"event": "config_warning", "error": error},
                    )
                    _region_lookup = ProvinceRegionLookup()
                else:
                    logger.info(
                        "Loaded region table",
                        extra={"path": region_file, "regions": len(regions)},
                    )
                    _region_lookup = MappingRegionLookup(regions)
            else:
                _region_lookup = ProvinceRegionLookup()

    return _region_lookup


def reset_region_lookup() -> None:
    """Reset the global region lookup (for testing)."""
    global _region_lookup
    with _region_lookup_lock:
        _region_lookup = None
