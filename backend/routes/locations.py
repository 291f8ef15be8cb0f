"""
Vessel Location Routes - Position reports from vesselLocations.json.
"""
from flask import Blueprint, jsonify, current_app
import logging
import traceback
from services.errors import DataNotLoadedError
from services.fleet_data_store import current_snapshot

locations_bp = Blueprint("locations", __name__)


@locations_bp.route("/vessellocations", methods=["GET"])
def get_locations_summary():
    try:
        data = current_snapshot(current_app)
        return jsonify({
            "status": "success",
            "results": len(data.locations),
            "data": {"locations": data.locations}
        })
    except DataNotLoadedError as e:
        return jsonify({"error": str(e)}), 503
    except Exception:
        logging.error(f"Error in get_locations_summary: {traceback.format_exc()}")
        return jsonify({"error": "Unable to load vessel locations"}), 500


@locations_bp.route("/api/vessellocations", methods=["GET"])
def get_locations():
    try:
        return jsonify(current_snapshot(current_app).locations)
    except DataNotLoadedError as e:
        return jsonify({"error": str(e)}), 503
    except Exception:
        logging.error(f"Error in get_locations: {traceback.format_exc()}")
        return jsonify({"error": "Unable to load vessel locations"}), 500
