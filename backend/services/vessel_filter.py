"""
Vessel Filter Service - Multi-field substring search over vessel records.

Each logical field (name, flag, mmsi) is matched independently: any needle
found as a case-insensitive substring, or the null/empty flags. Fields with
nothing to check are left out, and the remaining field results are combined
with AND or OR.
"""
import logging
from typing import Any, Dict, List, Optional

from enums import Combinator, VesselField
from schemas.vessel_filter import FieldFilter, VesselFilterSpec
from services.errors import FleetNotFoundError, NoActiveFilter, NoMatches, ScopeResolutionFailed
from utils.api_helpers import parse_vessel_filter_args
from utils.record_fields import resolve_field


def match_field(value: Optional[str], entry: FieldFilter) -> Optional[bool]:
    """
    Match one resolved field value against its filter entry.

    Returns None when the entry has no applicable checks (the field is then
    excluded from the record decision), otherwise the OR of its checks.
    """
    checks = []
    if entry.needles:
        checks.append(value is not None and any(needle in value.lower() for needle in entry.needles))
    if entry.is_null:
        checks.append(value is None)
    if entry.is_empty:
        checks.append(value is not None and value.strip() == "")
    if not checks:
        return None
    return any(checks)


def match_record(record: Dict[str, Any], spec: VesselFilterSpec) -> bool:
    results = []
    for name in VesselField:
        result = match_field(resolve_field(record, name), spec.field(name))
        if result is not None:
            results.append(result)

    if not results:
        return False
    if spec.op == Combinator.OR:
        return any(results)
    return all(results)


def evaluate(spec: VesselFilterSpec, candidates: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Return the candidates matching ``spec``, in their original order."""
    return [record for record in candidates if match_record(record, spec)]


def resolve_scope(snapshot, fleet_json_id: str) -> List[Dict[str, Any]]:
    try:
        return snapshot.fleet_vessels(fleet_json_id)
    except FleetNotFoundError as e:
        logging.warning(f"Vessel filter scope lookup failed: {e}")
        raise ScopeResolutionFailed(f"Unable to resolve vessels for fleet '{fleet_json_id}'")


def filter_vessels(args, snapshot) -> List[Dict[str, Any]]:
    """
    Run a /api/vessels/filter query against one data snapshot.

    - fleetJsonId with no field filters lists that fleet's vessels as-is.
    - no field filters and no fleetJsonId is rejected (NoActiveFilter).
    - an empty result raises NoMatches.
    """
    spec = parse_vessel_filter_args(args)

    candidates = None
    if spec.fleet_json_id is not None:
        candidates = resolve_scope(snapshot, spec.fleet_json_id)

    if not spec.has_active_fields:
        if candidates is None:
            raise NoActiveFilter(
                "Provide at least one of name, flag, mmsi (or an IsNull/IsEmpty flag), "
                "or a fleetJsonId to list a fleet"
            )
        if candidates:
            return candidates
        raise NoMatches(f"Fleet '{spec.fleet_json_id}' has no vessels")

    if candidates is None:
        candidates = snapshot.vessels

    matches = evaluate(spec, candidates)
    logging.info(
        f"Vessel filter op={spec.op.value} scope={spec.fleet_json_id} "
        f"fields={[f.value for f in spec.active_fields]}: {len(matches)}/{len(candidates)} matched"
    )
    if not matches:
        raise NoMatches("No vessels matched the given filters")
    return matches
