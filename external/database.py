from functools import partial
import json
import logging

from flask_sqlalchemy import SQLAlchemy

logger = logging.getLogger(__name__)

# Process-wide handle; bound to an app once in main.setup.configure_app.
# JSON columns keep non-ASCII text as-is so a LIKE on "santé" finds it.
db = SQLAlchemy(
    engine_options={"json_serializer": partial(json.dumps, ensure_ascii=False)}
)


def init_db():
    import app.advocates.models  # noqa - imports all models

    db.create_all()
    logger.info("Database initialized")
