"""MongoDB repositories for hunts and playbooks."""
from __future__ import annotations

from hunting_engine.services.mongo.hunts_repo import (
    create_hunt,
    get_hunt_by_id,
    list_hunts,
    get_recent_hunts_for_sub_channel,
    delete_hunt_by_id,
    parse_object_id,
)

from hunting_engine.services.mongo.playbooks_repo import (
    get_playbook_by_sub_channel,
    upsert_playbook,
    list_playbooks,
)

__all__ = [
    # Hunts
    "create_hunt",
    "get_hunt_by_id",
    "list_hunts",
    "get_recent_hunts_for_sub_channel",
    "delete_hunt_by_id",
    "parse_object_id",

    # Playbooks
    "get_playbook_by_sub_channel",
    "upsert_playbook",
    "list_playbooks",
]
