import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, UploadFile

from postguard.api.checks import Validators
from postguard.components.uploads import UploadCandidate
from postguard.rules.loader import load_rules
from postguard.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(os.environ.get("POSTGUARD_RULES", self.base_dir / "rules.yaml"))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def _load_rules(path: Path) -> Rules:
    return load_rules(path)


def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return _load_rules(settings.rules_path)


def get_validators(rules: Rules = Depends(get_rules)) -> Validators:
    return Validators.from_rules(rules)


# --- Uploads ---
def upload_candidate(file: UploadFile) -> UploadCandidate:
    """
    Wrap a multipart upload without reading it into memory.

    The size comes from the multipart parser when known, otherwise from the
    spooled file itself.
    """
    size = file.size
    if size is None:
        file.file.seek(0, os.SEEK_END)
        size = file.file.tell()
        file.file.seek(0)

    return UploadCandidate(
        filename=file.filename,
        size_bytes=size,
        content=file.file,
        content_type=file.content_type,
    )
