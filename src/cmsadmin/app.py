"""Composition root: builds the stores for one admin session.

Every call to ``build_app`` returns fresh store instances. Rendering code
receives the ``AdminApp`` (or the individual stores) explicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cmsadmin.config import CmsAdminConfig
from cmsadmin.content.seed import demo_state
from cmsadmin.content.store import Clock, DomainStore, utc_now
from cmsadmin.preferences.storage import JsonFileKeyValueStore, KeyValueStore
from cmsadmin.preferences.store import PreferencesStore
from cmsadmin.session import SessionStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AdminApp:
    """The stores backing one admin session, plus the config they came from."""

    config: CmsAdminConfig
    domain: DomainStore
    preferences: PreferencesStore
    session: SessionStore


def build_app(
    config: CmsAdminConfig | None = None,
    *,
    storage: KeyValueStore | None = None,
    clock: Clock = utc_now,
) -> AdminApp:
    """Construct an AdminApp from ``config``.

    Args:
        config: Loaded configuration; defaults when omitted.
        storage: Preference storage; a JSON file at
            ``config.storage.preferences_file`` when omitted.
        clock: Timestamp source for the domain store and seed data.
    """
    config = config or CmsAdminConfig()
    if storage is None:
        storage = JsonFileKeyValueStore(config.storage.preferences_path)

    domain = DomainStore(clock=clock, on_schema_delete=config.content.on_schema_delete)
    if config.content.seed_demo:
        domain.replace_state(demo_state(clock))
    logger.debug(
        "Built admin app: %d content types, %d entries",
        len(domain.schemas),
        len(domain.entries),
    )
    return AdminApp(
        config=config,
        domain=domain,
        preferences=PreferencesStore(storage),
        session=SessionStore(),
    )
