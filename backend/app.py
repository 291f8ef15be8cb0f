# backend/app.py
from flask import Flask
from flask_cors import CORS
from dotenv import load_dotenv
import logging
import os
import sys

load_dotenv()

from configs import config
from routes.configs import configs_bp
from routes.vessels import vessels_bp
from routes.fleets import fleets_bp
from routes.locations import locations_bp
from services.fleet_data_store import FleetDataStore

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# --- Initialize Flask app ---
app = Flask(__name__)
# Read allowed frontend origins from environment; default to common local dev ports
origin_list = [o.strip() for o in config.FRONTEND_ORIGINS.split(",") if o.strip()]
CORS(app, resources={r"/api/*": {"origins": origin_list}})

# --- Register Blueprints ---
app.register_blueprint(configs_bp)
app.register_blueprint(vessels_bp)
app.register_blueprint(fleets_bp)
app.register_blueprint(locations_bp)


def load_app_data(data_dir=None):
    """Create the data store and load vessels, fleets and locations into it."""
    store = FleetDataStore(
        data_dir or config.DATA_DIR,
        vessels_file=config.DATA_FILES["vessels"],
        fleets_file=config.DATA_FILES["fleets"],
        locations_file=config.DATA_FILES["locations"],
    )
    app.config["DATA_STORE"] = store
    store.load()
    return store


try:
    load_app_data()
except Exception as e:
    # Routes answer 503 until a successful POST /reload
    logging.error(f"Initial data load failed: {e}")


if __name__ == "__main__":
    if not app.config["DATA_STORE"].loaded:
        logging.error("Service start aborted due to data load error.")
        sys.exit(1)
    logging.info(f"Service running on port {config.PORT}")
    app.run(host="0.0.0.0", port=config.PORT, debug=os.getenv("FLASK_DEBUG", "0") == "1")
