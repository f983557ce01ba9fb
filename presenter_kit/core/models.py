from __future__ import annotations
from typing import Any
from pydantic import BaseModel


class FieldPreview(BaseModel):
    # Subject attribute the preview was taken from
    name: str

    # Value as the subject returns it
    raw: Any

    # Value as the presenter hands it to a template
    escaped: Any

    # True when escaping altered the value
    changed: bool

    @classmethod
    def capture(cls, name: str, raw: Any, escaped: Any) -> FieldPreview:
        return cls(name=name, raw=raw, escaped=escaped, changed=raw != escaped)
