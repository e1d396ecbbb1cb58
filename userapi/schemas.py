"""Marshmallow schemas describing the bodies the user service returns."""

from __future__ import annotations

from marshmallow import INCLUDE, Schema, fields


class BaseSchema(Schema):
    """Base schema tolerating extra keys the service may add to a body."""

    class Meta:
        unknown = INCLUDE


class UserSchema(BaseSchema):
    """Shape of a user as returned by ``POST /users`` and ``PATCH /users/{id}``."""

    id = fields.Integer(required=True, strict=True)
    name = fields.String(required=True)
    email = fields.String(required=True)


class SessionSchema(BaseSchema):
    """Shape of the login response of ``POST /session``."""

    access_token = fields.String(required=True, data_key="accessToken")


class ProblemSchema(BaseSchema):
    """Error body fields worth surfacing in failure messages."""

    message = fields.String()
    detail = fields.String()
    title = fields.String()
    code = fields.String()
    status = fields.Integer()
