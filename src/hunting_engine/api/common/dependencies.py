"""
Shared FastAPI dependencies.

Collaborators are provided per request so tests (or alternative backends)
can swap them through `app.dependency_overrides`.
"""
from hunting_engine.services.discovery.entity_discovery import EntityDiscovery
from hunting_engine.services.synthesis.synthesis_client import SynthesisClient


_synthesis_client = SynthesisClient()
_entity_discovery = None


def get_synthesis_client() -> SynthesisClient:
    """Dependency to get the (process-wide) synthesis client."""
    return _synthesis_client


def get_entity_discovery() -> EntityDiscovery:
    """Dependency to get the configured entity discovery collaborator."""
    global _entity_discovery
    if _entity_discovery is None:
        _entity_discovery = EntityDiscovery()
    return _entity_discovery
