"""
Fleet Data Store - In-memory snapshot of vessels, fleets and vessel locations.

The three collections are read from JSON files. A reload builds a complete new
snapshot and swaps it in; readers take ``store.snapshot`` once per request and
keep using that object, so they never see a mix of old and new data.
"""
import json
import logging
import os
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Dict, List, Optional

from services.errors import DataNotLoadedError, FleetNotFoundError
from utils.record_fields import (
    get_fleet_json_id,
    get_vessel_json_id,
    get_location_vessel_id,
    get_fleet_name,
    get_fleet_id_from_vessel,
    get_fleet_vessel_ids,
    index_key,
    normalize_vessel_ref,
)


@dataclass(frozen=True)
class FleetDataSnapshot:
    vessels: List[Dict[str, Any]]
    fleets: List[Dict[str, Any]]
    locations: List[Dict[str, Any]]
    vessel_map: Dict[Any, Dict[str, Any]] = field(default_factory=dict)
    fleet_map: Dict[Any, Dict[str, Any]] = field(default_factory=dict)
    location_map: Dict[Any, List[Dict[str, Any]]] = field(default_factory=dict)
    fleet_counts: Dict[Any, int] = field(default_factory=dict)

    @classmethod
    def build(cls, vessels, fleets, locations) -> "FleetDataSnapshot":
        """Index raw collections and precompute per-fleet vessel counts."""
        vessel_map = {}
        for i, vessel in enumerate(vessels):
            vessel_id = get_vessel_json_id(vessel)
            vessel_map[index_key(vessel_id) if vessel_id is not None else f"idx:{i}"] = vessel

        fleet_map = {}
        for i, fleet in enumerate(fleets):
            fleet_id = get_fleet_json_id(fleet)
            fleet_map[index_key(fleet_id) if fleet_id is not None else f"idx:{i}"] = fleet

        location_map = {}
        for i, location in enumerate(locations):
            vessel_id = get_location_vessel_id(location)
            location_map.setdefault(index_key(vessel_id) if vessel_id is not None else f"idx:{i}", []).append(location)

        # A fleet listing its vessels explicitly is counted from that list;
        # otherwise count the vessels that reference it.
        fleet_counts = {}
        counted_from_fleets = set()
        for i, fleet in enumerate(fleets):
            fleet_id = get_fleet_json_id(fleet)
            fleet_id = index_key(fleet_id) if fleet_id is not None else f"idx:{i}"
            ids = get_fleet_vessel_ids(fleet)
            if ids is not None:
                fleet_counts[fleet_id] = len(ids)
                counted_from_fleets.add(fleet_id)
            else:
                fleet_counts[fleet_id] = 0

        for vessel in vessels:
            fleet_id = index_key(get_fleet_id_from_vessel(vessel))
            if fleet_id is None or fleet_id in counted_from_fleets:
                continue
            fleet_counts[fleet_id] = fleet_counts.get(fleet_id, 0) + 1

        return cls(
            vessels=vessels,
            fleets=fleets,
            locations=locations,
            vessel_map=vessel_map,
            fleet_map=fleet_map,
            location_map=location_map,
            fleet_counts=fleet_counts,
        )

    def get_vessel(self, vessel_json_id) -> Optional[Dict[str, Any]]:
        vessel = self.vessel_map.get(vessel_json_id)
        if vessel is not None:
            return vessel
        for candidate in self.vessel_map.values():
            if str(get_vessel_json_id(candidate)) == str(vessel_json_id):
                return candidate
        return None

    def find_fleet(self, fleet_json_id) -> Optional[Dict[str, Any]]:
        for fleet in self.fleets:
            if str(get_fleet_json_id(fleet)) == str(fleet_json_id):
                return fleet
        return None

    def fleet_vessel_ids(self, fleet_json_id) -> List[Any]:
        """Vessel ids exactly as declared on the fleet (empty if none)."""
        fleet = self.find_fleet(fleet_json_id)
        if fleet is None:
            raise FleetNotFoundError(fleet_json_id)
        return get_fleet_vessel_ids(fleet) or []

    def fleet_vessels(self, fleet_json_id) -> List[Dict[str, Any]]:
        """Full vessel records for a fleet, in fleet order; unknown ids are skipped."""
        vessel_ids = [normalize_vessel_ref(ref) for ref in self.fleet_vessel_ids(fleet_json_id)]
        by_id = {normalize_vessel_ref(get_vessel_json_id(v)): v for v in self.vessels}
        return [by_id[vessel_id] for vessel_id in vessel_ids if vessel_id in by_id]

    def fleet_summaries(self) -> List[Dict[str, Any]]:
        summaries = []
        for i, fleet in enumerate(self.fleets):
            fleet_id = get_fleet_json_id(fleet)
            fleet_id = fleet_id if fleet_id is not None else f"idx:{i}"
            summaries.append({
                "fleetJsonId": fleet_id,
                "name": get_fleet_name(fleet),
                "vesselsCount": self.fleet_counts.get(index_key(fleet_id), 0),
            })
        return summaries


def _read_json_array(path: str) -> List[Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array, got {type(data).__name__}")
    return data


class FleetDataStore:
    """Holds the current FleetDataSnapshot and replaces it on reload."""

    def __init__(self, data_dir: str, vessels_file: str = "vessels.json",
                 fleets_file: str = "fleets.json", locations_file: str = "vesselLocations.json"):
        self.data_dir = data_dir
        self.paths = {
            "vessels": os.path.join(data_dir, vessels_file),
            "fleets": os.path.join(data_dir, fleets_file),
            "locations": os.path.join(data_dir, locations_file),
        }
        self._lock = RLock()
        self._snapshot: Optional[FleetDataSnapshot] = None

    @property
    def loaded(self) -> bool:
        return self._snapshot is not None

    @property
    def snapshot(self) -> FleetDataSnapshot:
        snap = self._snapshot
        if snap is None:
            raise DataNotLoadedError("Data not loaded")
        return snap

    def load(self) -> FleetDataSnapshot:
        """Read all data files and swap in a new snapshot. The old one is kept on failure."""
        # Concurrent reloads run one at a time, so the last one to finish
        # always carries the newest files.
        with self._lock:
            vessels = _read_json_array(self.paths["vessels"])
            fleets = _read_json_array(self.paths["fleets"])
            locations = _read_json_array(self.paths["locations"])
            snap = FleetDataSnapshot.build(vessels, fleets, locations)
            self._snapshot = snap
        logging.info(
            f"Loaded {len(vessels)} vessels, {len(fleets)} fleets, "
            f"{len(locations)} locations from {self.data_dir}"
        )
        return snap

    reload = load


def current_snapshot(app) -> FleetDataSnapshot:
    """Snapshot of the store registered on ``app`` under DATA_STORE."""
    store = app.config.get("DATA_STORE")
    if store is None:
        raise DataNotLoadedError("Data store not initialized")
    return store.snapshot
