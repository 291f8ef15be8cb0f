import json
import os
import sys
import threading
import time
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
import services.fleet_data_store as fleet_data_store
from services.fleet_data_store import FleetDataStore, FleetDataSnapshot
from services.errors import DataNotLoadedError, FleetNotFoundError


VESSELS = [
    {"_id": "v1", "name": "Alpha", "fleetId": "f1"},
    {"_id": "v2", "name": "Bravo", "fleetId": "f1"},
    {"_id": "v3", "name": "Charlie", "fleet_id": "f2"},
    {"_id": "v4", "name": "Delta", "fleet": "f2"},
    {"name": "No Id"},
]
FLEETS = [
    {"id": "f1", "name": "Explicit", "vessels": ["v2", "v1", "v404"]},
    {"_id": "f2", "title": "Referenced"},
    {"id": 3, "name": "Objects", "vesselIds": [{"id": "v3"}, {"_id": "v4"}]},
    {"name": "Anonymous"},
]
LOCATIONS = [
    {"vesselId": "v1", "lat": 1, "lon": 2},
    {"vessel_id": "v1", "lat": 3, "lon": 4},
    {"_id": "v3", "lat": 5, "lon": 6},
    {"lat": 0, "lon": 0},
]


def write_data(path, vessels=VESSELS, fleets=FLEETS, locations=LOCATIONS):
    for name, data in (("vessels.json", vessels), ("fleets.json", fleets), ("vesselLocations.json", locations)):
        with open(os.path.join(path, name), "w", encoding="utf-8") as f:
            json.dump(data, f)


@pytest.fixture
def snapshot():
    return FleetDataSnapshot.build(VESSELS, FLEETS, LOCATIONS)


def test_maps_fall_back_to_index_keys(snapshot):
    assert snapshot.vessel_map["v1"]["name"] == "Alpha"
    assert snapshot.vessel_map["idx:4"]["name"] == "No Id"
    assert snapshot.fleet_map["f2"]["title"] == "Referenced"
    assert "idx:3" in snapshot.fleet_map
    assert len(snapshot.location_map["v1"]) == 2
    assert "idx:3" in snapshot.location_map


def test_fleet_counts_prefer_explicit_lists(snapshot):
    assert snapshot.fleet_counts["f1"] == 3
    assert snapshot.fleet_counts["f2"] == 2
    assert snapshot.fleet_counts[3] == 2
    assert snapshot.fleet_counts["idx:3"] == 0


def test_fleet_summaries(snapshot):
    assert snapshot.fleet_summaries() == [
        {"fleetJsonId": "f1", "name": "Explicit", "vesselsCount": 3},
        {"fleetJsonId": "f2", "name": "Referenced", "vesselsCount": 2},
        {"fleetJsonId": 3, "name": "Objects", "vesselsCount": 2},
        {"fleetJsonId": "idx:3", "name": "Anonymous", "vesselsCount": 0},
    ]


def test_get_vessel(snapshot):
    assert snapshot.get_vessel("v2")["name"] == "Bravo"
    assert snapshot.get_vessel("missing") is None


def test_fleet_vessels_keeps_fleet_order_and_skips_unknown(snapshot):
    assert [v["_id"] for v in snapshot.fleet_vessels("f1")] == ["v2", "v1"]
    assert [v["_id"] for v in snapshot.fleet_vessels("3")] == ["v3", "v4"]
    assert snapshot.fleet_vessels("f2") == []


def test_fleet_vessel_ids_and_unknown_fleet(snapshot):
    assert snapshot.fleet_vessel_ids("f1") == ["v2", "v1", "v404"]
    with pytest.raises(FleetNotFoundError):
        snapshot.fleet_vessel_ids("nope")
    with pytest.raises(FleetNotFoundError):
        snapshot.fleet_vessels("nope")


def test_store_requires_load(tmp_path):
    store = FleetDataStore(str(tmp_path))
    assert not store.loaded
    with pytest.raises(DataNotLoadedError):
        store.snapshot


def test_reload_swaps_snapshot(tmp_path):
    write_data(str(tmp_path))
    store = FleetDataStore(str(tmp_path))
    first = store.load()
    assert store.snapshot is first

    write_data(str(tmp_path), vessels=[{"_id": "new"}])
    second = store.reload()
    assert second is not first
    assert store.snapshot.vessels == [{"_id": "new"}]
    # old snapshot is untouched
    assert len(first.vessels) == len(VESSELS)


def test_failed_reload_keeps_previous_snapshot(tmp_path):
    write_data(str(tmp_path))
    store = FleetDataStore(str(tmp_path))
    first = store.load()

    with open(os.path.join(str(tmp_path), "fleets.json"), "w", encoding="utf-8") as f:
        f.write("{not json")
    with pytest.raises(ValueError):
        store.reload()
    assert store.snapshot is first


def test_non_array_file_is_rejected(tmp_path):
    write_data(str(tmp_path), vessels={"vessels": []})
    with pytest.raises(ValueError):
        FleetDataStore(str(tmp_path)).load()


def test_object_ids_are_indexed(tmp_path):
    # Mongo export style ids: {"$oid": ...} objects instead of strings
    write_data(
        str(tmp_path),
        vessels=[
            {"_id": {"$oid": "a1"}, "name": "Alpha", "fleetId": {"$oid": "f1"}},
            {"_id": {"$oid": "a2"}, "name": "Bravo"},
        ],
        fleets=[
            {"_id": {"$oid": "f1"}, "name": "Referenced"},
            {"_id": {"$oid": "f2"}, "name": "Listed", "vessels": [{"$oid": "a2"}, {"$oid": "gone"}]},
        ],
        locations=[{"vesselId": {"$oid": "a1"}, "lat": 1, "lon": 2}],
    )
    snap = FleetDataStore(str(tmp_path)).load()

    assert snap.vessel_map['{"$oid":"a1"}']["name"] == "Alpha"
    assert len(snap.location_map['{"$oid":"a1"}']) == 1
    assert snap.fleet_summaries() == [
        {"fleetJsonId": {"$oid": "f1"}, "name": "Referenced", "vesselsCount": 1},
        {"fleetJsonId": {"$oid": "f2"}, "name": "Listed", "vesselsCount": 2},
    ]
    assert [v["name"] for v in snap.fleet_vessels({"$oid": "f2"})] == ["Bravo"]


def test_concurrent_reloads_run_one_at_a_time(tmp_path, monkeypatch):
    write_data(str(tmp_path))
    store = FleetDataStore(str(tmp_path))
    read = fleet_data_store._read_json_array
    active = []
    overlaps = []

    def slow_read(path):
        active.append(path)
        if len(active) > 1:
            overlaps.append(list(active))
        time.sleep(0.02)
        try:
            return read(path)
        finally:
            active.remove(path)

    monkeypatch.setattr(fleet_data_store, "_read_json_array", slow_read)
    threads = [threading.Thread(target=store.reload) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert overlaps == []
    assert len(store.snapshot.vessels) == len(VESSELS)
