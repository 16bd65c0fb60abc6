from importlib import import_module
import logging
from main.config import settings

logger = logging.getLogger(__name__)


def register_blueprints(app, api):
    """Dynamically register all blueprints from app modules"""
    modules = ["advocates", "health"]
    for module in modules:
        mod = import_module(f"app.{module}.routes")
        bp = mod.bp

        # Register with Flask-Smorest API instead of directly with app
        api.register_blueprint(bp)
        logger.info(f"Registered blueprint for {module}")


def register_commands(app):
    from app.advocates.management.commands.seed_advocates import (
        init_db_command,
        seed_advocates,
    )

    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_advocates)


def create_root_routes(app):
    @app.route("/status")
    def status():
        return {"status": "running", "environment": settings.ENV}
