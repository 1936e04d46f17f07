from functools import wraps
from flask import current_app, jsonify, request

from library_api.schemas.book import validate_payload
from library_api.utils.params import coerce_params

LOCATIONS = ("body", "params", "query")


def _read(location):
    if location == "body":
        return request.get_json(silent=True) or {}
    if location == "params":
        return coerce_params(request.view_args or {})
    return coerce_params(request.args.to_dict())


def validate(schema, location="body"):
    """
    Request gate: validates one part of the request against ``schema``.

    The validated model is passed on to the view as a keyword argument named
    after the location (``body=``, ``params=``, ``query=``). For ``params`` the
    raw path arguments are replaced by it.
    """
    if location not in LOCATIONS:
        raise ValueError(f"Unknown request location: {location}")

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                result = validate_payload(schema, _read(location))
            except Exception as e:
                current_app.logger.exception(f"[validate] {schema.__name__} on {location} failed: {e}")
                return jsonify({"success": False, "error": str(e) or "Server Error"}), 500

            if not result.ok:
                return jsonify({
                    "success": False,
                    "errors": [issue.to_dict() for issue in result.issues],
                }), 400

            if location == "params":
                raw = request.view_args or {}
                kwargs = {k: v for k, v in kwargs.items() if k not in raw}
            kwargs[location] = result.value
            return fn(*args, **kwargs)
        return wrapper
    return decorator
