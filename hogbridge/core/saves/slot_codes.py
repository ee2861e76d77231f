from __future__ import annotations

import re

SLOT_CODE_PATTERN = re.compile(r"HL-\d{2}-\d{2}", re.ASCII)


def decode_payload_text(payload: bytes) -> str:
    # Save payloads are mostly binary; only the embedded ASCII strings matter.
    return payload.decode("utf-8", errors="replace")


def find_slot_codes(text: str, pattern: re.Pattern[str] = SLOT_CODE_PATTERN) -> list[str]:
    return [match.group(0) for match in pattern.finditer(text)]
