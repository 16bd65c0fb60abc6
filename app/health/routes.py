# package imports
from flask_smorest import Blueprint
from flask.views import MethodView
from flask import current_app
import logging
import time
from sqlalchemy import text

# project imports
from external.database import db

logger = logging.getLogger(__name__)

bp = Blueprint(
    "health", __name__, description="Health check endpoints", url_prefix="/health"
)


@bp.route("/")
class HealthCheck(MethodView):
    def get(self):
        """Basic health check endpoint"""
        return {
            "status": "healthy",
            "timestamp": time.time(),
            "version": "1.0.0",
            "environment": current_app.config.get("ENV", "development"),
            "uptime": time.time() - current_app.start_time
            if hasattr(current_app, "start_time")
            else None,
        }


@bp.route("/ready")
class ReadinessCheck(MethodView):
    def get(self):
        """Readiness check: the database answers a trivial query"""
        readiness_status = {"ready": True, "timestamp": time.time(), "checks": {}}

        try:
            db.session.execute(text("SELECT 1"))
            readiness_status["checks"]["database"] = True
        except Exception:
            logger.exception("Database readiness check failed")
            readiness_status["checks"]["database"] = False
            readiness_status["ready"] = False

        return readiness_status, 200 if readiness_status["ready"] else 503
