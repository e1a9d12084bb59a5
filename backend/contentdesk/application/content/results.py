# contentdesk/application/content/results.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from contentdesk.models.content import Content
from contentdesk.normalizers.content import normalize_content


@dataclass(frozen=True)
class Forwarded:
    status: int

    def to_dict(self) -> Dict[str, Any]:
        return {"forwarded": True, "forwardStatus": self.status}


@dataclass(frozen=True)
class NotConfigured:
    reason: str = "not configured"

    def to_dict(self) -> Dict[str, Any]:
        return {"forwarded": False, "reason": self.reason}


@dataclass(frozen=True)
class Failed:
    """Delivery did not succeed: either a non-2xx status or a transport error."""
    status: Optional[int] = None
    response_body: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"forwarded": False}
        if self.error is not None:
            data["forwardError"] = self.error
        else:
            data["forwardStatus"] = self.status
            data["forwardResponseBody"] = self.response_body
        return data


NotifyResult = Union[Forwarded, NotConfigured, Failed]


@dataclass(frozen=True)
class PublishOutcome:
    item: Content
    notification: NotifyResult

    @property
    def forwarded(self) -> bool:
        return isinstance(self.notification, Forwarded)

    def to_dict(self) -> Dict[str, Any]:
        # The publish already committed, so the workflow is ok whatever
        # happened to the notification.
        return {
            "ok": True,
            "published": True,
            **self.notification.to_dict(),
            "item": normalize_content(self.item),
        }
