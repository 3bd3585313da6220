"""Signup and login routes."""

from flask import Blueprint, jsonify, request

from ledgerapi.api.context import get_services
from ledgerapi.domain.errors import ValidationError

auth_bp = Blueprint("auth", __name__)


def json_body() -> dict:
    """Return the request's JSON object.

    Raises:
        ValidationError: If the body is missing or not a JSON object
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


@auth_bp.route("/signup", methods=["POST"])
def signup():
    data = json_body()
    get_services().accounts.signup(email=data.get("email"), password=data.get("password"))
    return jsonify({"message": "User created"}), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    data = json_body()
    token = get_services().accounts.login(email=data.get("email"), password=data.get("password"))
    return jsonify({"token": token}), 200
