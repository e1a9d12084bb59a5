from flask import current_app, jsonify
from werkzeug.exceptions import BadRequest
from contentdesk.domain.exceptions import ContentDeskError, StoreError


def _error_response(kind, message, status_code):
    response = jsonify({
        "error": kind,
        "message": message
    })
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(ContentDeskError)
    def handle_content_error(error):
        if isinstance(error, StoreError):
            current_app.logger.exception("Store failure")
        return _error_response(type(error).__name__, str(error), error.status_code)

    @app.errorhandler(BadRequest)
    def handle_bad_request(error):
        return _error_response("BadRequest", error.description, 400)
