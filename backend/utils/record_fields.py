"""
Accessors for loosely-shaped JSON records (vessels, fleets, locations).

Records come straight from the data files and the same logical value can sit
under different keys. Each accessor walks an ordered list of candidate keys
and returns the first one that is present and not null.
"""
import json
from typing import Any, Dict, Iterable, List, Optional

from configs.config import (
    VESSEL_FIELD_KEYS,
    FLEET_ID_KEYS,
    VESSEL_ID_KEYS,
    LOCATION_VESSEL_ID_KEYS,
    FLEET_NAME_KEYS,
    FLEET_VESSEL_LIST_KEYS,
    VESSEL_FLEET_REF_KEYS,
)
from enums import VesselField


def pick_first(record: Any, keys: Iterable[str], default: Any = None) -> Any:
    """Return the value of the first key in ``keys`` that is present and not None."""
    if not isinstance(record, dict):
        return default
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return default


def resolve_field(record: Dict[str, Any], field) -> Optional[str]:
    """
    Resolve a logical vessel field (name, flag, mmsi) to a string.

    Returns None when no candidate key holds a value. Non-string values
    (e.g. numeric MMSI) are converted with str().
    """
    keys = VESSEL_FIELD_KEYS[VesselField(field).value]
    value = pick_first(record, keys)
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def get_fleet_json_id(fleet):
    return pick_first(fleet, FLEET_ID_KEYS)


def get_vessel_json_id(vessel):
    return pick_first(vessel, VESSEL_ID_KEYS)


def get_location_vessel_id(location):
    return pick_first(location, LOCATION_VESSEL_ID_KEYS)


def get_fleet_name(fleet) -> str:
    return pick_first(fleet, FLEET_NAME_KEYS, default="N/A")


def get_fleet_id_from_vessel(vessel):
    # vessels.json points back to fleets.json
    return pick_first(vessel, VESSEL_FLEET_REF_KEYS)


def get_fleet_vessel_ids(fleet) -> Optional[List[Any]]:
    """Raw vessel id list declared on a fleet, or None if the fleet declares none."""
    ids = pick_first(fleet, FLEET_VESSEL_LIST_KEYS)
    return ids if isinstance(ids, list) else None


def index_key(value):
    """Dict key for a raw id. Object and array ids (e.g. {"$oid": ...}) become their JSON encoding."""
    if isinstance(value, (dict, list)):
        return json.dumps(value, sort_keys=True, separators=(",", ":"))
    return value


def normalize_vessel_ref(ref) -> str:
    """Fleet vessel entries are either plain ids or objects carrying one."""
    if isinstance(ref, dict):
        ref_id = pick_first(ref, ("id", "_id"))
        if ref_id is None:
            return json.dumps(ref, sort_keys=True, separators=(",", ":"))
        return str(ref_id)
    return str(ref)
