"""
Pet state persistence: one human-readable JSON file per local profile.

The whole record is rewritten on every save. There is no locking; two
concurrent feeds resolve as last writer wins.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

import settings
from models.pet import PetState

logger = logging.getLogger(__name__)


class StateStoreError(Exception):
    """Raised when the state file exists but cannot be read or written."""


class StateStore:
    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else settings.state_path()

    def load(self) -> PetState:
        """Return the stored state, or the default pet on first run."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("No state at %s, starting a new pet", self.path)
            return PetState()
        except OSError as e:
            raise StateStoreError(f"cannot read {self.path}: {e}") from e

        try:
            return PetState.model_validate(json.loads(raw))
        except (ValueError, ValidationError) as e:
            raise StateStoreError(f"corrupt state file {self.path}: {e}") from e

    def save(self, state: PetState) -> None:
        """Write to a private sibling file, then swap it into place."""
        data = json.dumps(state.model_dump(mode="json"), indent=2)
        tmp_path = None
        try:
            self.path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
            # mkstemp creates the file 0600
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StateStoreError(f"cannot write {self.path}: {e}") from e
