from flask import current_app
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
migrate = Migrate()

GATEWAY_KEY = "contentdesk.gateway"
POLICY_KEY = "contentdesk.sanitize_policy"


def get_gateway():
    return current_app.extensions[GATEWAY_KEY]


def get_policy():
    return current_app.extensions[POLICY_KEY]


def get_store():
    from contentdesk.store import ContentStore

    return ContentStore(db.session)
