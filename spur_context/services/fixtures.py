# spur_context/services/fixtures.py
from pathlib import Path
from typing import Optional, TypeVar, Union

from spur_context.core.config import settings
from spur_context.schemas.base import SpurModel
from spur_context.schemas.context import IpContext
from spur_context.services.codec import decode
import logging

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=SpurModel)


def iter_fixture_files(directory: Optional[Union[str, Path]] = None) -> list[Path]:
    """
    Saved API responses (*.json) in `directory`, sorted by name.
    Defaults to settings.FIXTURES_DIR; a missing directory yields no files.

    Save a new one with:
        curl -s "https://api.spur.us/v2/context/<IP>" -H "Token: $TOKEN" | jq . > <dir>/vpn_x.json
    """
    root = Path(directory) if directory is not None else settings.FIXTURES_DIR
    if not root.is_dir():
        logger.warning("Fixture directory %s does not exist", root)
        return []

    files = sorted(p for p in root.glob("*.json") if p.is_file())
    logger.info("Found %d fixture file(s) in %s", len(files), root)
    return files


def load_fixture(path: Union[str, Path], model_cls: type[M] = IpContext) -> M:
    """Read one fixture file and decode it (IpContext unless told otherwise)."""
    raw = Path(path).read_bytes()
    return decode(model_cls, raw)
