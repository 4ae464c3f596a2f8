"""Protocol messages

Outbound (once, at session start):
    {"type": "component-composer-schema", "payload": ComponentComposerSchema}

Inbound (any number of times):
    {"type": "component-composer-ui", "payload": ComponentDescription}
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ValidationError

from uicomposer.schema import ComponentComposerSchema, ComponentDescription

log = logging.getLogger(__name__)

SCHEMA_MESSAGE = "component-composer-schema"
UI_MESSAGE = "component-composer-ui"


class SchemaMessage(BaseModel):
    type: Literal["component-composer-schema"] = SCHEMA_MESSAGE
    payload: ComponentComposerSchema

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class UIMessage(BaseModel):
    type: Literal["component-composer-ui"] = UI_MESSAGE
    payload: ComponentDescription


def parse_inbound(data: Any) -> UIMessage | None:
    """Parse an inbound message, or return None if it should be ignored.

    Only mappings with a recognized ``type`` and a mapping payload that
    validates as a component description are accepted.
    """
    if not isinstance(data, Mapping):
        log.debug(f"Ignoring non-object message: {data!r}")
        return None

    message_type = data.get("type")
    if message_type != UI_MESSAGE:
        log.debug(f"Ignoring message with unrecognized type: {message_type!r}")
        return None

    payload = data.get("payload")
    if not isinstance(payload, Mapping):
        log.debug(f"Ignoring '{UI_MESSAGE}' message with non-object payload")
        return None

    try:
        return UIMessage.model_validate({"type": message_type, "payload": payload})
    except ValidationError as e:
        log.debug(f"Ignoring malformed '{UI_MESSAGE}' payload: {e}")
        return None
