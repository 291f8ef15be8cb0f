# Project Configuration
import os

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# =============================
# Service
# =============================
SERVICE_NAME = os.getenv("SERVICE_NAME", "fleet-service")
PORT = int(os.getenv("PORT", "3010"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Comma-separated list of origins allowed to call /api/*
FRONTEND_ORIGINS = os.getenv("FRONTEND_ORIGINS", "http://localhost:3000,http://localhost:3010")

# =============================
# Data files
# =============================
def resolve_data_dir(value):
    """A relative DATA_DIR is taken relative to backend/, not the working directory."""
    if not value:
        return os.path.join(BASE_DIR, "data")
    return value if os.path.isabs(value) else os.path.normpath(os.path.join(BASE_DIR, value))


# All JSON files live in the same directory
DATA_DIR = resolve_data_dir(os.getenv("DATA_DIR"))

DATA_FILES = {
    "vessels": os.getenv("VESSELS_FILE", "vessels.json"),
    "fleets": os.getenv("FLEETS_FILE", "fleets.json"),
    "locations": os.getenv("LOCATIONS_FILE", "vesselLocations.json"),
}

# =============================
# Record key candidates (first non-missing wins)
# =============================
VESSEL_FIELD_KEYS = {
    "name": ("name", "vesselName", "title"),
    "flag": ("flag", "country", "Flag"),
    "mmsi": ("mmsi", "MMSI", "mmsi_number", "mmsiNumber"),
}

FLEET_ID_KEYS = ("id", "_id")
VESSEL_ID_KEYS = ("_id",)
LOCATION_VESSEL_ID_KEYS = ("vesselId", "vessel_id", "_id")
FLEET_NAME_KEYS = ("name", "title")
FLEET_VESSEL_LIST_KEYS = ("vessels", "vesselIds", "vesselsIds", "vessels_list")
VESSEL_FLEET_REF_KEYS = ("fleetId", "fleet_id", "fleet")

# =============================
# Route listing
# =============================
EXAMPLE_BASE_URL = os.getenv("EXAMPLE_BASE_URL", f"http://localhost:{PORT}")

EXAMPLE_PATH_VALUES = {
    "vessel_json_id": "VESSEL123",
    "fleet_json_id": "FLEET123",
}

FILTER_EXAMPLE_QUERY = "?name=maersk&name=msc&op=or&fleetJsonId=FLEET123"
