"""HTTP boundary for the simulation engine."""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request, send_from_directory
from loguru import logger
from pydantic import ValidationError

from ..config import default_config
from ..core.engine import SimulationEngine
from .schemas import SimulationRequest, SimulationResponse


STATIC_DIR = Path(__file__).parent / "static"


def create_app(settings: Optional[Dict[str, Any]] = None, engine: Optional[SimulationEngine] = None) -> Flask:
    """
    Build the Flask application.

    Args:
        settings: Validated settings dictionary, defaults are used if omitted
        engine: Engine to run requests on, built from ``settings`` if omitted

    Returns:
        Flask app
    """
    settings = settings or default_config()
    server_settings = settings['server']

    static_dir = Path(server_settings['static_dir']) if server_settings['static_dir'] else STATIC_DIR
    app = Flask(__name__, static_folder=str(static_dir))

    if engine is None:
        engine_settings = settings['engine']
        engine = SimulationEngine(
            seed=engine_settings['random_seed'],
            max_host_count=engine_settings['max_host_count'],
            max_cloudlet_count=engine_settings['max_cloudlet_count'],
        )

    cors_origins = server_settings['cors_origins']

    @app.after_request
    def add_cors_headers(response):
        origin = request.headers.get("Origin")
        if "*" in cors_origins:
            response.headers["Access-Control-Allow-Origin"] = "*"
        elif origin and origin in cors_origins:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers.add("Vary", "Origin")
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        return response

    @app.route('/', methods=['GET'])
    def index():
        return send_from_directory(app.static_folder, "index.html")

    @app.route('/health', methods=['GET'])
    def health_check():
        return jsonify({
            "status": "ok",
            "timestamp": datetime.now().isoformat()
        }), 200

    @app.route('/run-simulation', methods=['POST'])
    def run_simulation():
        """
        Run one estimation for the posted configuration.

        Request body:
        {
            "hostCount": 2, "pesPerHost": 4, "ramPerHost": 16384, "mipsPerPe": 1000,
            "vmCount": 5, "pesPerVm": 1, "ramPerVm": 2048,
            "cloudletCount": 10, "cloudletLength": 10000
        }
        """
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            logger.warning("Simulation request without a JSON object body")
            return jsonify({
                "error": "Invalid simulation request.",
                "message": "Request body must be a JSON object"
            }), 400

        try:
            sim_request = SimulationRequest.model_validate(payload)
        except ValidationError as e:
            details = [
                {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
                for err in e.errors()
            ]
            logger.warning(f"Simulation request failed schema validation: {details}")
            return jsonify({
                "error": "Invalid simulation request.",
                "message": f"{len(details)} field(s) failed validation",
                "details": details
            }), 400

        config = sim_request.to_config()
        logger.info(f"Received simulation request: {config.vm_count} VMs, "
                    f"{config.cloudlet_count} Cloudlets.")

        try:
            outcome = engine.run(config)
        except Exception as e:
            logger.exception(f"Simulation failed: {e}")
            return jsonify({
                "error": "Error processing simulation request.",
                "message": str(e)
            }), 500

        if not outcome.ok:
            return jsonify({
                "error": "Invalid simulation configuration.",
                **outcome.error.to_dict()
            }), 400

        response = SimulationResponse.from_result(outcome.result)
        logger.info("Simulation finished. Sent results back to client.")
        return jsonify(response.model_dump(by_alias=True)), 200

    return app


def run_server(settings: Optional[Dict[str, Any]] = None) -> None:
    """Start the HTTP server and block."""
    settings = settings or default_config()
    server_settings = settings['server']

    app = create_app(settings)

    logger.info(f"Backend server started on http://{server_settings['host']}:{server_settings['port']}")
    app.run(
        host=server_settings['host'],
        port=server_settings['port'],
        debug=server_settings['debug'],
        threaded=True
    )
