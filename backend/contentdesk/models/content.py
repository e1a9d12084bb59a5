from contentdesk.extensions import db
from .base import BaseModel


class Content(BaseModel):
    __tablename__ = "content"

    topic = db.Column(db.String(500), nullable=False, default="Untitled")
    body = db.Column(db.Text, nullable=False, default="")
    published = db.Column(db.Boolean, nullable=False, default=False, index=True)

    date_approved = db.Column(db.DateTime(timezone=True), nullable=True, index=True)
    date_published = db.Column(db.DateTime(timezone=True), nullable=True, index=True)

    # Reference to an external authoring document; not validated
    external_doc_ref = db.Column(db.String(255), nullable=True)

    # Append-only list of {"content": html, "date": iso8601}
    versions = db.Column(db.JSON, nullable=False, default=list)

    @property
    def status(self):
        return "published" if self.published else "draft"
