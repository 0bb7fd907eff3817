from datetime import datetime


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO timestamp as returned by the API."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
