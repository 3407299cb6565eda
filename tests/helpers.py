from collections.abc import Mapping

from pydantic import BaseModel

from reserial.core.models.response import ResponseHead


def response(status_code: int, headers: Mapping[str, str] | None = None) -> ResponseHead:
    return ResponseHead.of(status_code, headers)


class DecodableValue(BaseModel):
    string: str


PLIST_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
    <key>string</key>
    <string>string</string>
</dict>
</plist>
"""
