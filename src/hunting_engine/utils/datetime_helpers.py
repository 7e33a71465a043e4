from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_hunt_date(value: datetime) -> str:
    """Calendar date used when hunts are summarized for playbook synthesis."""
    return value.strftime("%Y-%m-%d")
