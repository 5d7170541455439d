import os
from pathlib import Path

from .constants import KEY_FILE_MODE, KEY_FILE_NAME, KEY_LEN, STORE_DIR_NAME
from .errors import (
    AlreadyInitialized,
    KeyFileNotFound,
    MissingExportTarget,
    MissingKeyFile,
    NotInitialized,
)
from .utils import KeyMaterial


class KeyStore:
    """The per-repository key directory.

    Presence of the directory, not its content, marks the repo as initialized.
    The directory is created before any key byte is written, and creation fails
    if it already exists, so an existing key is never overwritten.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    @classmethod
    def for_git_dir(cls, git_dir: Path) -> "KeyStore":
        return cls(Path(git_dir) / STORE_DIR_NAME)

    @property
    def key_path(self) -> Path:
        return self.path / KEY_FILE_NAME

    @property
    def initialized(self) -> bool:
        return self.path.exists()

    def assert_not_initialized(self):
        if self.initialized:
            raise AlreadyInitialized()

    def _create_dir(self):
        try:
            self.path.mkdir()
        except FileExistsError as e:
            raise AlreadyInitialized() from e

    def _write_key(self, raw: bytes):
        fd = os.open(self.key_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, KEY_FILE_MODE)
        with os.fdopen(fd, "wb") as fh:
            fh.write(raw)

    def initialize(self, raw: bytes | None = None) -> KeyMaterial:
        """Create the store with fresh (or given) key material."""
        raw = os.urandom(KEY_LEN) if raw is None else raw
        key = KeyMaterial.from_bytes(raw)
        self._create_dir()
        self._write_key(raw)
        return key

    def install(self, key: KeyMaterial):
        """Store key material imported from elsewhere."""
        self._create_dir()
        self._write_key(key.to_bytes())

    def load(self) -> KeyMaterial:
        if not self.key_path.exists():
            raise NotInitialized()
        return KeyMaterial.from_bytes(self.key_path.read_bytes())

    def export(self, target: Path | None):
        if not target:
            raise MissingExportTarget()
        if not self.key_path.exists():
            raise NotInitialized()
        raw = self.key_path.read_bytes()
        fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, KEY_FILE_MODE)
        # an existing target keeps its old mode under O_CREAT
        os.fchmod(fd, KEY_FILE_MODE)
        with os.fdopen(fd, "wb") as fh:
            fh.write(raw)


def load_key_file(key_file: Path | None) -> KeyMaterial:
    if not key_file:
        raise MissingKeyFile()
    key_file = Path(key_file)
    if not key_file.is_file():
        raise KeyFileNotFound(key_file)
    return KeyMaterial.from_bytes(key_file.read_bytes())
