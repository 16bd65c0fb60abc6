from marshmallow import Schema, fields


class PaginationQueryArgs(Schema):
    # Raw strings; range checks and defaults live in the validators so that
    # rejections carry a stable error code
    page = fields.Str(required=False)
    limit = fields.Str(required=False)


class PaginationSchema(Schema):
    page = fields.Int(required=True)
    limit = fields.Int(required=True)
    total = fields.Int(required=True)
    total_pages = fields.Int(required=True, data_key="totalPages")
    has_next = fields.Bool(required=True, data_key="hasNext")
    has_prev = fields.Bool(required=True, data_key="hasPrev")


class ValidationErrorSchema(Schema):
    error = fields.Str(required=True)
    message = fields.Str(required=True)
    code = fields.Str(allow_none=True)
