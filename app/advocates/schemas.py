from marshmallow import Schema, fields
from app.libs.schemas import PaginationQueryArgs, PaginationSchema


class AdvocateSchema(Schema):
    id = fields.Int(dump_only=True)
    first_name = fields.Str(required=True, data_key="firstName")
    last_name = fields.Str(required=True, data_key="lastName")
    city = fields.Str(required=True)
    degree = fields.Str(required=True)
    specialties = fields.List(fields.Str(), required=True)
    years_of_experience = fields.Int(required=True, data_key="yearsOfExperience")
    phone_number = fields.Int(required=True, data_key="phoneNumber")
    created_at = fields.DateTime(dump_only=True, data_key="createdAt")


class AdvocateSearchArgs(PaginationQueryArgs):
    q = fields.Str(required=False)


class AdvocateListSchema(Schema):
    data = fields.List(fields.Nested(AdvocateSchema), required=True)
    pagination = fields.Nested(PaginationSchema, required=True)


class AdvocateSearchSchema(AdvocateListSchema):
    query = fields.Str(required=True, allow_none=True)
