"""
System Routes - Service status, health, data reload and route listing.
"""
import logging
from datetime import datetime, timezone
from flask import Blueprint, jsonify, current_app
from configs.config import SERVICE_NAME
from utils.route_listing import list_routes

configs_bp = Blueprint("configs", __name__)


def _now_iso():
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@configs_bp.route("/", methods=["GET"])
def index():
    return jsonify({"status": "ok", "service": SERVICE_NAME, "timestamp": _now_iso()})


@configs_bp.route("/api/health", methods=["GET"])
@configs_bp.route("/healthz", methods=["GET"])
def health_check():
    """Health check endpoint for deployment monitoring."""
    try:
        store = current_app.config.get("DATA_STORE")
        if store is None or not store.loaded:
            return jsonify({"status": "unhealthy", "data_loaded": False}), 503

        data = store.snapshot
        return jsonify({
            "status": "healthy",
            "data_loaded": True,
            "counts": {
                "vessels": len(data.vessels),
                "fleets": len(data.fleets),
                "locations": len(data.locations),
            }
        }), 200
    except Exception as e:
        logging.error(f"Health check failed: {e}")
        return jsonify({
            "status": "unhealthy",
            "error": str(e)
        }), 503


@configs_bp.route("/reload", methods=["POST"])
def reload_data():
    """Re-read the data files. On failure the previously loaded data stays in place."""
    store = current_app.config.get("DATA_STORE")
    if store is None:
        return jsonify({"error": "Data store not initialized"}), 500
    try:
        store.reload()
        return jsonify({"status": "reloaded"})
    except Exception as e:
        logging.error(f"Data reload failed: {e}")
        return jsonify({"error": "reload failed"}), 500


@configs_bp.route("/api/allroutes", methods=["GET"])
def get_all_routes():
    """List every registered route with curl / PowerShell examples."""
    try:
        routes = list_routes(current_app)
        return jsonify({
            "file": current_app.import_name,
            "count": len(routes),
            "routes": routes,
            "scannedAt": _now_iso(),
        })
    except Exception as e:
        logging.error(f"Error listing routes: {e}")
        return jsonify({"error": "Failed to scan routes", "detail": str(e)}), 500
