# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from flask import Blueprint, current_app, jsonify, request, make_response
from datetime import datetime, timedelta, timezone
from jinja2 import TemplateNotFound
from ..assets import current_asset_manager
from ..errors import PortfolioError
from ..themes import current_theme_manager
from ..version import __version__
from typing import Dict, Any
import os
import threading

bp_healthcheck = Blueprint('healthcheck', __name__)

# In-memory cache for healthcheck, per worker process
_healthcheck_cache: Dict[str, Any] = {
    "response": None,
    "timestamp": None,
    "status_code": None
}
_healthcheck_cache_lock = threading.Lock()

class Healthcheck:
    def __init__(self, app, assets, themes, os_env):
        self.app = app
        self.assets = assets
        self.themes = themes
        self.os_env = os_env
        self.overall_healthy = True
        self.result = {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "version": __version__,
            "checks": {},
            "environment": "development" if app.debug else "production"
        }

    def run(self):
        self.check_posts()
        self.check_data()
        self.check_themes()
        self.check_environment()
        self.result["status"] = "healthy" if self.overall_healthy else "unhealthy"
        return self.result, self.overall_healthy

    def check_posts(self):
        posts = self.assets.store.list_files("posts", suffix=".md")
        failures = {}
        for path in posts:
            slug = path.removeprefix("posts/").removesuffix(".md")
            try:
                self.assets.get_post(slug)
            except PortfolioError as e:
                failures[slug] = str(e)

        if not posts:
            status, message = "degraded", "No posts found in the content bundle"
        elif failures:
            status, message = "unhealthy", f"{len(failures)} of {len(posts)} posts failed to load"
            self.overall_healthy = False
        else:
            status, message = "healthy", f"{len(posts)} posts loaded"

        self.result["checks"]["posts"] = {
            "status": status,
            "message": message,
            "details": {
                "content_root": str(self.assets.store.root),
                "post_count": len(posts),
                "failures": failures
            }
        }

    def check_data(self):
        try:
            resume = self.assets.get_data()
            self.result["checks"]["data"] = {
                "status": "healthy",
                "message": "data.yaml loaded",
                "details": {
                    "name": resume.name,
                    "experience_entries": len(resume.experience)
                }
            }
        except PortfolioError as e:
            self.overall_healthy = False
            self.result["checks"]["data"] = {
                "status": "unhealthy",
                "message": f"data.yaml failed to load: {str(e)}",
                "details": {}
            }

    def check_themes(self):
        missing = []
        for theme in self.themes.themes():
            try:
                self.app.jinja_env.get_template(f"{theme}/base.html")
            except TemplateNotFound:
                missing.append(theme)

        if missing:
            self.overall_healthy = False
        self.result["checks"]["themes"] = {
            "status": "unhealthy" if missing else "healthy",
            "message": "All themes have a base template" if not missing else "Some themes have no base template",
            "details": {
                "default_theme": self.themes.default_theme,
                "themes": self.themes.themes(),
                "missing_base_template": missing
            }
        }

    def check_environment(self):
        optional_vars = ["PORTFOLIO_CONTENT_DIR", "PORTFOLIO_THEME"]
        missing_optional = [var for var in optional_vars if not self.os_env.get(var)]
        self.result["checks"]["environment"] = {
            "status": "degraded" if missing_optional else "healthy",
            "message": "Environment variables configured properly" if not missing_optional else "Some optional environment variables missing, using defaults",
            "details": {
                "missing_optional": missing_optional
            }
        }

@bp_healthcheck.route("/api/health")
@bp_healthcheck.route("/api/healthcheck")
@bp_healthcheck.route("/health")
@bp_healthcheck.route("/healthcheck")
def health():
    """Health check of the content bundle, data file and themes."""

    # ?c=1 allows a cached report up to a minute old
    use_cache = request.args.get("c") == "1"
    now = datetime.now(timezone.utc)

    with _healthcheck_cache_lock:
        cache_valid = (
            _healthcheck_cache["response"] is not None and
            _healthcheck_cache["timestamp"] is not None and
            (now - _healthcheck_cache["timestamp"]) < timedelta(minutes=1)
        )
        if use_cache and cache_valid:
            resp = make_response(jsonify(_healthcheck_cache["response"]), _healthcheck_cache["status_code"])
            resp.headers["X-Cache"] = "HIT"
            return resp

    hc = Healthcheck(current_app, current_asset_manager(), current_theme_manager(), os.environ)
    health_status, overall_healthy = hc.run()

    status_code = 200 if overall_healthy else 503

    with _healthcheck_cache_lock:
        _healthcheck_cache["response"] = health_status
        _healthcheck_cache["timestamp"] = now
        _healthcheck_cache["status_code"] = status_code

    resp = make_response(jsonify(health_status), status_code)
    resp.headers["X-Cache"] = "MISS"
    return resp
