from flask import Flask, send_file, current_app
from .config import config_by_name
from .extensions import db, migrate, GATEWAY_KEY, POLICY_KEY
from .api.v1 import v1_bp
from .errors import register_error_handlers
from .gateways.notification import NotificationGateway
from .utils.sanitize import SanitizationPolicy
from .cli import content_cli
from flask_swagger_ui import get_swaggerui_blueprint
import os


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)

    app.extensions[GATEWAY_KEY] = NotificationGateway()
    app.extensions[POLICY_KEY] = SanitizationPolicy.from_config(app.config)

    if app.config["CREATE_TABLES_ON_STARTUP"]:
        from . import models  # noqa: F401  registers tables

        with app.app_context():
            db.create_all()

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api")
    register_error_handlers(app)
    app.cli.add_command(content_cli)

    # -------------------------------------------------
    # Serve OpenAPI YAML
    # -------------------------------------------------
    @app.route("/openapi/content.yaml", methods=["GET"], endpoint="openapi_content")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "content_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("content_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/content.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Content Desk API",
            "deepLinking": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    app.logger.info(
        "Notification forwarding %s",
        "enabled" if app.config.get("NOTIFY_WEBHOOK_URL") else "not configured",
    )

    return app
