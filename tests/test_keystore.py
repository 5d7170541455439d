import os
import stat
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from gitprivatize.errors import (
    AlreadyInitialized,
    InvalidKey,
    KeyFileNotFound,
    MissingExportTarget,
    MissingKeyFile,
    NotInitialized,
)
from gitprivatize.keystore import KeyStore, load_key_file
from gitprivatize.utils import KeyMaterial


class KeyStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = TemporaryDirectory()
        self.tmp_path = Path(self.tmpdir.name)
        self.store = KeyStore.for_git_dir(self.tmp_path)

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def test_layout(self):
        self.assertEqual(self.store.key_path, self.tmp_path / "git-privatize" / "key")

    def test_initialize(self):
        self.assertFalse(self.store.initialized)
        key = self.store.initialize()
        self.assertTrue(self.store.initialized)
        self.assertEqual(len(self.store.key_path.read_bytes()), 48)
        self.assertEqual(self.store.load(), key)

    def test_key_file_is_private(self):
        self.store.initialize()
        mode = stat.S_IMODE(os.stat(self.store.key_path).st_mode)
        self.assertEqual(mode & 0o077, 0)

    def test_second_initialize_keeps_key(self):
        self.store.initialize()
        before = self.store.key_path.read_bytes()
        with self.assertRaises(AlreadyInitialized):
            self.store.initialize()
        self.assertEqual(self.store.key_path.read_bytes(), before)

    def test_directory_alone_marks_initialized(self):
        self.store.path.mkdir()
        with self.assertRaises(AlreadyInitialized):
            self.store.assert_not_initialized()
        with self.assertRaises(AlreadyInitialized):
            self.store.initialize()

    def test_initialize_rejects_bad_key_before_creating_dir(self):
        with self.assertRaises(InvalidKey):
            self.store.initialize(b"short")
        self.assertFalse(self.store.initialized)

    def test_load_without_init(self):
        with self.assertRaises(NotInitialized):
            self.store.load()

    def test_install(self):
        key = KeyMaterial.from_bytes(bytes(range(48)))
        self.store.install(key)
        self.assertEqual(self.store.key_path.read_bytes(), bytes(range(48)))
        with self.assertRaises(AlreadyInitialized):
            self.store.install(key)

    def test_export(self):
        key = self.store.initialize()
        target = self.tmp_path / "exported.key"
        self.store.export(target)
        self.assertEqual(load_key_file(target), key)

    def test_export_is_private(self):
        self.store.initialize()
        target = self.tmp_path / "exported.key"
        target.write_bytes(b"old")
        os.chmod(target, 0o644)
        self.store.export(target)
        self.assertEqual(stat.S_IMODE(os.stat(target).st_mode), 0o600)
        self.assertEqual(target.read_bytes(), self.store.key_path.read_bytes())

    def test_export_without_target(self):
        self.store.initialize()
        with self.assertRaises(MissingExportTarget):
            self.store.export(None)

    def test_export_without_init(self):
        with self.assertRaises(NotInitialized):
            self.store.export(self.tmp_path / "exported.key")


class LoadKeyFileTests(unittest.TestCase):
    def test_missing_path(self):
        with self.assertRaises(MissingKeyFile):
            load_key_file(None)

    def test_nonexistent(self):
        with TemporaryDirectory() as d:
            with self.assertRaises(KeyFileNotFound):
                load_key_file(Path(d) / "nope")

    def test_wrong_size(self):
        with TemporaryDirectory() as d:
            p = Path(d) / "key"
            p.write_bytes(b"\x01" * 10)
            with self.assertRaises(InvalidKey):
                load_key_file(p)


if __name__ == "__main__":
    unittest.main()
