import os
from dotenv import load_dotenv

load_dotenv()


def _csv(name):
    raw = os.getenv(name)
    if not raw:
        return None
    return {part.strip() for part in raw.split(",") if part.strip()}


def _attribute_map(name):
    """Parse "a:href|target,img:src|alt,*:class" into {tag: {attrs}}."""
    raw = os.getenv(name)
    if not raw:
        return None

    mapping = {}
    for entry in raw.split(","):
        tag, _, attrs = entry.partition(":")
        tag = tag.strip()
        if not tag:
            continue
        mapping.setdefault(tag, set()).update(
            attr.strip() for attr in attrs.split("|") if attr.strip()
        )
    return mapping or None


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CREATE_TABLES_ON_STARTUP = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Publish notifications; an empty URL disables forwarding
    NOTIFY_WEBHOOK_URL = os.getenv("NOTIFY_WEBHOOK_URL") or None
    NOTIFY_TIMEOUT_MS = int(os.getenv("NOTIFY_TIMEOUT_MS", "10000"))

    # None falls back to the default sanitization policy
    SANITIZE_ALLOWED_TAGS = _csv("SANITIZE_ALLOWED_TAGS")
    SANITIZE_ALLOWED_ATTRIBUTES = _attribute_map("SANITIZE_ALLOWED_ATTRIBUTES")
    SANITIZE_ALLOWED_SCHEMES = _csv("SANITIZE_ALLOWED_SCHEMES")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    CREATE_TABLES_ON_STARTUP = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///contentdesk.db")


class TestingConfig(BaseConfig):
    TESTING = True
    CREATE_TABLES_ON_STARTUP = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    NOTIFY_WEBHOOK_URL = None


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")


config_by_name = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig
}
