from external.database import db
from app.libs.models import BaseModel
from sqlalchemy.dialects.postgresql import JSONB


class Advocate(BaseModel):
    """
    Directory entry for a single advocate.

    Rows are written only by the seed command; the API reads them. Specialties
    are stored as a JSON list (JSONB on PostgreSQL) in the `payload` column and
    always default to an empty list.
    """

    __tablename__ = "advocates"

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.Text, nullable=False)
    last_name = db.Column(db.Text, nullable=False)
    city = db.Column(db.Text, nullable=False)
    degree = db.Column(db.Text, nullable=False)
    specialties = db.Column(
        "payload",
        db.JSON().with_variant(JSONB, "postgresql"),
        nullable=False,
        default=list,
    )
    years_of_experience = db.Column(db.Integer, nullable=False)
    phone_number = db.Column(db.BigInteger, nullable=False)

    __table_args__ = (
        db.Index("advocates_name_idx", "first_name", "last_name"),
        db.Index("advocates_city_idx", "city"),
        db.Index("advocates_degree_idx", "degree"),
        db.Index("advocates_experience_idx", "years_of_experience"),
        db.Index(
            "advocates_specialties_gin_idx",
            "payload",
            postgresql_using="gin",
        ),
    )

    def __repr__(self):
        return f"<Advocate {self.first_name} {self.last_name}>"
