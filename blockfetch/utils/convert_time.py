import datetime
import re
from typing import Optional


# Nodes send RFC 3339 with nanoseconds, datetime keeps microseconds
_FRACTION = re.compile(r"\.(\d+)")


def rfc3339_to_datetime(value: Optional[str]) -> Optional[datetime.datetime]:
    if not value:
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)

    parsed = datetime.datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed
