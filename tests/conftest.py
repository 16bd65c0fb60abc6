"""Shared fixtures: one app per session backed by in-memory SQLite."""

import pytest
from sqlalchemy.pool import StaticPool

from external.database import db, init_db
from main.setup import create_app
from app.advocates.management.commands.seed_advocates import replace_advocates

FIXTURE_ADVOCATES = [
    {
        "firstName": "John",
        "lastName": "Doe",
        "city": "Austin",
        "degree": "MD",
        "specialties": ["Bipolar", "LGBTQ"],
        "yearsOfExperience": 10,
        "phoneNumber": 5551234567,
    },
    {
        "firstName": "Jane",
        "lastName": "Smith",
        "city": "Dallas",
        "degree": "PhD",
        "specialties": ["Oncology", "Chronic pain"],
        "yearsOfExperience": 8,
        "phoneNumber": 5559876543,
    },
    {
        "firstName": "Sarah",
        "lastName": "Lee",
        "city": "Austin",
        "degree": "PhD",
        "specialties": ["Oncology", "Sleep issues"],
        "yearsOfExperience": 14,
        "phoneNumber": 5551238765,
    },
    {
        "firstName": "Michael",
        "lastName": "Brown",
        "city": "Houston",
        "degree": "MSW",
        "specialties": ["Trauma & PTSD"],
        "yearsOfExperience": 5,
        "phoneNumber": 5556543210,
    },
    {
        "firstName": "Emily",
        "lastName": "Davis",
        "city": "Boston",
        "degree": "MD",
        "specialties": ["Pediatrics", "Sliding scale 50% fee"],
        "yearsOfExperience": 7,
        "phoneNumber": 5553210987,
    },
]


@pytest.fixture(scope="session")
def app():
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": "sqlite://",
            "SQLALCHEMY_ENGINE_OPTIONS": {
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
            },
        }
    )

    with app.app_context():
        init_db()
        replace_advocates(FIXTURE_ADVOCATES)

    yield app

    with app.app_context():
        db.drop_all()


@pytest.fixture
def app_context(app):
    with app.app_context():
        yield


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def repository(app, app_context):
    return app.extensions["advocate_repository"]


@pytest.fixture
def reseed(app):
    """
    Put the fixture rows back after a test that rewrites the table.

    Yields a helper that seeds the fixture rows plus any extra records.
    """

    def seed_with(*extra):
        replace_advocates(FIXTURE_ADVOCATES + list(extra))

    yield seed_with
    with app.app_context():
        replace_advocates(FIXTURE_ADVOCATES)
