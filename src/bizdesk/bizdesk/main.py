from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module, load_settings

from .container import Container, build_container
from .payroll.model import PayrollPolicy
from .storage.json_file_store import JsonFileStore
from .storage.memory_store import InMemoryStore
from .storage.port import KeyValueStore

logger = logging.getLogger("bizdesk")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def build_store(settings) -> KeyValueStore:
    backend = str(getattr(settings, "STORAGE_BACKEND", "json")).lower()
    if backend == "memory":
        return InMemoryStore()
    if backend != "json":
        raise ValueError(f"Unknown STORAGE_BACKEND: {backend}")
    return JsonFileStore(Path(getattr(settings, "DATA_DIR", "data")))


def create_container() -> Container:
    load_dotenv(override=False)

    settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    store = build_store(settings)
    policy = PayrollPolicy(floor_net_salary_at_zero=bool(getattr(settings, "FLOOR_NET_SALARY_AT_ZERO", False)))
    container = build_container(store=store, payroll_policy=policy)

    if getattr(settings, "DEBUG", False):
        logger.debug(
            "settings=%s backend=%s data_dir=%s",
            get_settings_module(),
            getattr(settings, "STORAGE_BACKEND", "json"),
            getattr(settings, "DATA_DIR", "data"),
        )
    return container
