# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from flask import Flask, jsonify, request
from flask_cors import CORS
import logging
from os import getenv, path
from .config import Config
from .utility import MultiLineFormatter, GunicornWorkerFilter, NoDockerHealthcheckFilter
from .version import __version__
from flask import g
import time

# Configure logging
level = (logging.DEBUG if getenv("FLASK_ENV") == "development" or getenv("DEBUG_LOGGING") != None else logging.INFO)

formatter = MultiLineFormatter(f'[%(worker_id)s] %(asctime)-21s %(levelname)-8s %(name)-12s | %(message)s', datefmt="%Y-%m-%d %H:%M:%S")
handler = logging.StreamHandler()
handler.setFormatter(formatter)
handler.addFilter(GunicornWorkerFilter())  # Add the Gunicorn worker ID filter
logging.basicConfig(level=level, handlers=[handler])
logger = logging.getLogger("portfolio")
logger.setLevel(level)

from .assets import AssetManager, AssetStore
from .filters import TEMPLATE_FILTERS
from .themes import ThemeManager
from .bp.api import api_bp
from .bp.healthcheck import bp_healthcheck
from .bp.pages import pages_bp
from .bp.posts import posts_bp

app = Flask(__name__)
app.config.from_object(Config)
app.debug = app.debug or (getenv("FLASK_DEBUG", False) != False or getenv("FLASK_ENV", False) == "development")

app.jinja_env.filters.update(TEMPLATE_FILTERS)
app.jinja_env.globals.update(version=__version__)

app.extensions["asset_manager"] = AssetManager(AssetStore(app.config["CONTENT_DIR"]))
app.extensions["theme_manager"] = ThemeManager.discover(path.join(app.root_path, str(app.template_folder)), app.config["DEFAULT_THEME"])

logger.info("Serving content from %s", app.extensions["asset_manager"].store.root)
logger.info("Themes: %s (default: %s)", ", ".join(app.extensions["theme_manager"].themes()), app.config["DEFAULT_THEME"])

request_logger = logging.getLogger("portfolio.request")
request_logger.addFilter(NoDockerHealthcheckFilter())

@app.before_request
def start_timer():
    g.request_start_time = time.time()  # Store request start time for logging later

@app.after_request
def log_request(response):
    """Log the request and response details."""
    # method path status_code remote_addr duration user_agent
    query_string = f"?{request.query_string.decode()}" if request.query_string else ""
    remote_addr = request.headers.get('X-Forwarded-For', request.remote_addr or "Unknown").split(',')[0].strip()
    request_logger.info(
        '%s %s%s %s %s %s "%s"',
        request.method,
        request.path,
        query_string,
        response.status_code,
        remote_addr,
        f"{(time.time() - g.get('request_start_time', time.time())):.2f}s",
        request.headers.get('User-Agent', 'Unknown')
    )

    return response

CORS(app, resources = {
    "/api/*": {
        "origins": app.config["CORS_ORIGINS"]
    }
})

app.register_blueprint(pages_bp)
app.register_blueprint(posts_bp)
app.register_blueprint(api_bp, url_prefix='/api')
app.register_blueprint(bp_healthcheck, url_prefix='/')
logger.info("Portfolio version %s starting up", __version__)

@app.errorhandler(500)
def handle_internal_error(error):
    """Handle internal server errors."""
    import traceback

    # Get full traceback for debugging
    tb_str = traceback.format_exc()
    logger.error(f"Internal server error: {error}\nTraceback:\n{tb_str}")

    # In debug mode, return detailed error information including traceback
    if app.debug:
        return jsonify({
            "error": "Internal server error",
            "message": str(error),
            "traceback": tb_str,
            "endpoint": request.path if request else "Unknown",
            "method": request.method if request else "Unknown"
        }), 500
    else:
        return "An internal server error occurred. Please try again later.", 500

@app.errorhandler(404)
def handle_not_found(error):
    """Handle 404 errors."""
    logger.warning(f"404 error: {request.path} not found")
    return jsonify({"error": "Endpoint not found"}), 404
