from sqlalchemy import inspect
from external.database import db


class CreatedAtMixin:
    # Set once by the database at insert; never updated
    created_at = db.Column(db.DateTime, server_default=db.func.now())


class BaseModel(db.Model, CreatedAtMixin):
    __abstract__ = True

    def to_dict(self):
        return {
            attr.key: getattr(self, attr.key)
            for attr in inspect(self).mapper.column_attrs
        }
