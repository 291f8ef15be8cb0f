"""
Fleet Routes - Fleet summaries and per-fleet vessel lists.
"""
from flask import Blueprint, jsonify, current_app
import logging
import traceback
from services.errors import DataNotLoadedError, FleetNotFoundError
from services.fleet_data_store import current_snapshot

fleets_bp = Blueprint("fleets", __name__)


@fleets_bp.route("/fleets", methods=["GET"])
def get_fleets_summary():
    """Fleet names and vessel counts wrapped in a status envelope."""
    try:
        summaries = current_snapshot(current_app).fleet_summaries()
        return jsonify({
            "status": "success",
            "results": len(summaries),
            "data": {"fleets": summaries}
        })
    except DataNotLoadedError as e:
        return jsonify({"error": str(e)}), 503
    except Exception:
        logging.error(f"Error in get_fleets_summary: {traceback.format_exc()}")
        return jsonify({"error": "Unable to load fleets"}), 500


@fleets_bp.route("/api/fleets", methods=["GET"])
def get_fleets():
    try:
        return jsonify(current_snapshot(current_app).fleet_summaries())
    except DataNotLoadedError as e:
        return jsonify({"error": str(e)}), 503
    except Exception:
        logging.error(f"Error in get_fleets: {traceback.format_exc()}")
        return jsonify({"error": "Unable to load fleets"}), 500


@fleets_bp.route("/api/fleets/<string:fleet_json_id>/vessels", methods=["GET"])
def get_fleet_vessel_ids(fleet_json_id):
    """Vessel ids as declared on the fleet."""
    try:
        vessel_ids = current_snapshot(current_app).fleet_vessel_ids(fleet_json_id)
        return jsonify({"vesselIds": vessel_ids})
    except FleetNotFoundError:
        return jsonify({"error": "Fleet not found"}), 404
    except DataNotLoadedError as e:
        return jsonify({"error": str(e)}), 503
    except Exception:
        logging.error(f"Error in get_fleet_vessel_ids: {traceback.format_exc()}")
        return jsonify({"error": "Unable to load vessel IDs for fleet"}), 500


@fleets_bp.route("/api/fleets/<string:fleet_json_id>/vessels/full", methods=["GET"])
def get_fleet_vessels(fleet_json_id):
    """Full vessel records for the fleet, in the fleet's own order."""
    try:
        vessels = current_snapshot(current_app).fleet_vessels(fleet_json_id)
        return jsonify({"vessels": vessels})
    except FleetNotFoundError:
        return jsonify({"error": "Fleet not found"}), 404
    except DataNotLoadedError as e:
        return jsonify({"error": str(e)}), 503
    except Exception:
        logging.error(f"Error in get_fleet_vessels: {traceback.format_exc()}")
        return jsonify({"error": "Unable to load vessels for fleet"}), 500
