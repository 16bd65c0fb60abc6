# python imports
import logging

# package imports
from flask_smorest import Blueprint
from flask.views import MethodView
from flask import current_app

# project imports
from app.libs.schemas import PaginationQueryArgs, ValidationErrorSchema
from app.libs.errors import APIError, ServerError

# app imports
from .services import AdvocateService
from .validation import validate_list_params, validate_search_params
from .schemas import AdvocateListSchema, AdvocateSearchArgs, AdvocateSearchSchema

logger = logging.getLogger(__name__)

bp = Blueprint(
    "advocates", __name__, description="Advocate directory", url_prefix="/advocates"
)


def get_advocate_service():
    """Service bound to the repository built once in create_app"""
    return AdvocateService(current_app.extensions["advocate_repository"])


@bp.route("")
class AdvocateList(MethodView):
    @bp.arguments(PaginationQueryArgs, location="query")
    @bp.response(200, AdvocateListSchema)
    @bp.alt_response(400, schema=ValidationErrorSchema, description="Invalid page or limit")
    def get(self, args):
        """List advocates with pagination"""
        params = validate_list_params(args)
        try:
            return get_advocate_service().list_advocates(params)
        except APIError:
            raise
        except Exception:
            logger.exception("List API error")
            raise ServerError("Failed to fetch advocates")


@bp.route("/search")
class AdvocateSearch(MethodView):
    @bp.arguments(AdvocateSearchArgs, location="query")
    @bp.response(200, AdvocateSearchSchema)
    @bp.alt_response(400, schema=ValidationErrorSchema, description="Invalid q, page or limit")
    def get(self, args):
        """
        Search advocates.

        Every whitespace-separated term of `q` must appear in at least one of
        first name, last name, city, degree, specialties, years of experience
        or phone number. An empty or missing `q` returns the same rows as the
        plain listing.
        """
        params = validate_search_params(args)
        try:
            return get_advocate_service().search_advocates(params)
        except APIError:
            raise
        except Exception:
            logger.exception("Search API error")
            raise ServerError("Failed to search advocates")
