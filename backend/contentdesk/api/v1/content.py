# contentdesk/api/v1/content.py
from urllib.parse import urlparse
from flask import current_app, jsonify, request
from werkzeug.exceptions import BadRequest
from contentdesk.application.content import (
    create_draft,
    edit_content,
    forward_content,
    get_content,
    list_content,
    publish_and_notify,
    publish_content,
)
from contentdesk.extensions import get_gateway, get_policy, get_store
from contentdesk.normalizers.content import normalize_content
from . import v1_bp


def _json_body():
    data = request.get_json(silent=True)
    if data is None:
        if request.is_json and request.get_data():
            raise BadRequest("Request body is not valid JSON")
        return {}
    if not isinstance(data, dict):
        raise BadRequest("Request body must be a JSON object")
    return data


def _optional_str(data, key):
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise BadRequest(f"'{key}' must be a string")
    return value


def _published_filter():
    raw = request.args.get("published")
    if raw is None or raw == "":
        return None
    lowered = raw.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise BadRequest("'published' must be 'true' or 'false'")


# ------------------------
# Content
# ------------------------

@v1_bp.route("/content", methods=["GET"])
def list_content_items():
    items = list_content(store=get_store(), published=_published_filter())
    return jsonify([normalize_content(item) for item in items])


@v1_bp.route("/content/<content_id>", methods=["GET"])
def get_content_item(content_id):
    item = get_content(store=get_store(), content_id=content_id)
    return jsonify(normalize_content(item))


@v1_bp.route("/content", methods=["POST"])
def create_content_item():
    data = _json_body()

    item = create_draft(
        store=get_store(),
        policy=get_policy(),
        topic=_optional_str(data, "topic"),
        raw_html=_optional_str(data, "body"),
        external_doc_ref=_optional_str(data, "externalDocRef"),
    )
    return jsonify(normalize_content(item)), 201


@v1_bp.route("/content/<content_id>", methods=["PUT"])
def update_content_item(content_id):
    data = _json_body()

    raw_html = _optional_str(data, "body")
    if raw_html is None:
        raise BadRequest("'body' is required")

    item = edit_content(
        store=get_store(),
        policy=get_policy(),
        content_id=content_id,
        topic=_optional_str(data, "topic"),
        raw_html=raw_html,
    )
    return jsonify(normalize_content(item)), 200


@v1_bp.route("/content/<content_id>/publish", methods=["PATCH"])
def publish_content_item(content_id):
    item = publish_content(store=get_store(), content_id=content_id)
    return jsonify(normalize_content(item)), 200


@v1_bp.route("/content/<content_id>/publish-and-notify", methods=["POST"])
def publish_and_notify_content_item(content_id):
    outcome = publish_and_notify(
        store=get_store(),
        gateway=get_gateway(),
        content_id=content_id,
        target_url=current_app.config.get("NOTIFY_WEBHOOK_URL"),
        timeout_ms=current_app.config["NOTIFY_TIMEOUT_MS"],
    )
    return jsonify(outcome.to_dict()), 200


@v1_bp.route("/content/<content_id>/forward", methods=["POST"])
def forward_content_item(content_id):
    data = _json_body()

    target_url = _optional_str(data, "url")
    if not target_url:
        raise BadRequest("'url' is required")
    if urlparse(target_url).scheme not in ("http", "https"):
        raise BadRequest("'url' must be an http(s) URL")

    extra = {key: value for key, value in data.items() if key != "url"}

    response = forward_content(
        store=get_store(),
        gateway=get_gateway(),
        content_id=content_id,
        target_url=target_url,
        extra=extra,
        timeout_ms=current_app.config["NOTIFY_TIMEOUT_MS"],
    )

    if not response.ok:
        return jsonify({
            "ok": False,
            "forwardStatus": response.status,
            "forwardResponseBody": response.body,
        }), 500

    return jsonify({"ok": True, "forwardStatus": response.status}), 200
