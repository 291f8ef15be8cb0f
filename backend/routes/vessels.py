"""
Vessel Routes - Vessel listings, details and multi-field search.
"""
from flask import Blueprint, request, jsonify, current_app
import logging
import traceback
from services.errors import DataNotLoadedError, VesselFilterError
from services.fleet_data_store import current_snapshot
from services.vessel_filter import filter_vessels

vessels_bp = Blueprint("vessels", __name__)


@vessels_bp.route("/vessels", methods=["GET"])
def get_vessels_summary():
    """List all vessels wrapped in a status envelope."""
    try:
        data = current_snapshot(current_app)
        return jsonify({
            "status": "success",
            "results": len(data.vessels),
            "data": {"vessels": data.vessels}
        })
    except DataNotLoadedError as e:
        return jsonify({"error": str(e)}), 503
    except Exception:
        logging.error(f"Error in get_vessels_summary: {traceback.format_exc()}")
        return jsonify({"error": "Unable to load vessels"}), 500


@vessels_bp.route("/vessels/<string:vessel_json_id>", methods=["GET"])
def get_vessel(vessel_json_id):
    """Get one vessel by its vessels.json id."""
    try:
        data = current_snapshot(current_app)
        vessel = data.get_vessel(vessel_json_id)
        if vessel is None:
            return jsonify({"error": f"Vessel not found: {vessel_json_id}"}), 404
        return jsonify({"status": "success", "data": {"vessel": vessel}})
    except DataNotLoadedError as e:
        return jsonify({"error": str(e)}), 503
    except Exception:
        logging.error(f"Error in get_vessel: {traceback.format_exc()}")
        return jsonify({"error": "Unable to load vessel"}), 500


@vessels_bp.route("/api/vessels", methods=["GET"])
def get_vessels():
    """Raw vessels.json contents."""
    try:
        return jsonify(current_snapshot(current_app).vessels)
    except DataNotLoadedError as e:
        return jsonify({"error": str(e)}), 503
    except Exception:
        logging.error(f"Error in get_vessels: {traceback.format_exc()}")
        return jsonify({"error": "Unable to load vessels"}), 500


@vessels_bp.route("/api/vessels/filter", methods=["GET"])
def get_filtered_vessels():
    """
    Search vessels by name / flag / mmsi.

    Query params:
    - name, flag, mmsi: case-insensitive substrings, repeatable (any may match)
    - nameIsNull, flagIsEmpty, ...: match missing / blank values
    - op (or operator / logic): and | or, combines fields (default and)
    - fleetJsonId: only search inside this fleet; alone, lists the fleet

    Returns a JSON array of matching vessel records.
    400 for bad params or no filters at all, 502 if the fleet cannot be
    resolved, 404 when nothing matched.
    """
    try:
        # One snapshot for the whole request, even if a reload lands meanwhile
        data = current_snapshot(current_app)
        return jsonify(filter_vessels(request.args, data))
    except VesselFilterError as e:
        return jsonify(e.to_dict()), e.status_code
    except DataNotLoadedError as e:
        return jsonify({"error": str(e)}), 503
    except Exception:
        logging.error(f"Error in get_filtered_vessels: {traceback.format_exc()}")
        return jsonify({"error": "Unable to filter vessels"}), 500
