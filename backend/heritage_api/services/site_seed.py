import json
import logging
from pathlib import Path

from sqlmodel import Session, func, select

from heritage_api.models.site import HeritageSite

logger = logging.getLogger(__name__)

SEED_FIELDS = {
    "name": "name",
    "description": "description",
    "countryName": "country_name",
    "location": "location",
    "img": "img",
}


def load_seed_file(path: str | Path) -> list[HeritageSite]:
    """Parse a JSON array of site objects into unsaved ``HeritageSite`` rows."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError(f"Seed file {path} must contain a JSON array")
    sites = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ValueError(f"Seed entry {i} in {path} is not an object")
        sites.append(
            HeritageSite(
                **{
                    column: str(item.get(key) or "")
                    for key, column in SEED_FIELDS.items()
                }
            )
        )
    return sites


def seed_sites(session: Session, path: str | Path) -> int:
    """Load sites from ``path`` if the table is empty. Returns rows inserted."""
    existing = session.exec(select(func.count()).select_from(HeritageSite)).one()
    if existing:
        logger.info(f"Skipping site seed, {existing} sites already present")
        return 0
    sites = load_seed_file(path)
    session.add_all(sites)
    session.commit()
    logger.info(f"Seeded {len(sites)} heritage sites from {path}")
    return len(sites)
