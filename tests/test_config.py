import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from fellmore.core.audit import append_audit, audit_sink
from fellmore.core.config import CONFIG_ENV, FellmoreConfig, load_config, resolve_config_path


class ConfigTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_defaults_without_file(self):
        self.assertEqual(load_config(None), FellmoreConfig())

    def test_load_values(self):
        path = self.dir / "fellmore.yaml"
        path.write_text(
            "game:\n  prompt: '>> '\n  clear_screen: false\naudit:\n  enabled: true\n  path: logs/audit.jsonl\n",
            encoding="utf-8",
        )
        cfg = load_config(path)
        self.assertEqual(cfg.prompt, ">> ")
        self.assertFalse(cfg.clear_screen)
        self.assertTrue(cfg.audit_enabled)
        self.assertEqual(Path(cfg.audit_path), (self.dir / "logs" / "audit.jsonl").resolve())

    def test_empty_file_uses_defaults(self):
        path = self.dir / "fellmore.yaml"
        path.write_text("", encoding="utf-8")
        cfg = load_config(path)
        self.assertEqual(cfg.prompt, "> ")
        self.assertFalse(cfg.audit_enabled)

    def test_missing_explicit_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config(resolve_config_path(str(self.dir / "nope.yaml")))

    def test_non_mapping_file(self):
        path = self.dir / "fellmore.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with self.assertRaises(ValueError):
            load_config(path)

    def test_section_must_be_mapping(self):
        for section in ["game", "audit"]:
            path = self.dir / "fellmore.yaml"
            path.write_text(f"{section}:\n  - prompt\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_config(path)

    def test_flags_must_be_booleans(self):
        for text in ["game:\n  clear_screen: \"false\"\n", "audit:\n  enabled: \"no\"\n", "audit:\n  enabled: 1\n"]:
            path = self.dir / "fellmore.yaml"
            path.write_text(text, encoding="utf-8")
            with self.assertRaises(ValueError, msg=text):
                load_config(path)

    def test_resolve_from_env(self):
        path = self.dir / "custom.yaml"
        path.write_text("{}", encoding="utf-8")
        with mock.patch.dict(os.environ, {CONFIG_ENV: str(path)}):
            self.assertEqual(resolve_config_path(None), path)

    def test_resolve_from_parent_directory(self):
        (self.dir / "fellmore.yaml").write_text("{}", encoding="utf-8")
        nested = self.dir / "a" / "b"
        nested.mkdir(parents=True)
        with mock.patch.dict(os.environ, {}, clear=True), mock.patch.object(Path, "cwd", return_value=nested):
            self.assertEqual(resolve_config_path(None), self.dir / "fellmore.yaml")


class AuditTests(unittest.TestCase):
    def test_append_audit_writes_json_lines(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "audit.jsonl"
            append_audit({"event": "death", "room": 6}, str(path))
            audit_sink(str(path))({"event": "quit", "room": 1})

            lines = path.read_text(encoding="utf-8").splitlines()
            self.assertEqual(len(lines), 2)
            first = json.loads(lines[0])
            self.assertEqual(first["event"], "death")
            self.assertEqual(first["room"], 6)
            self.assertTrue(first["ts"].endswith("Z"))
            self.assertEqual(json.loads(lines[1])["event"], "quit")


if __name__ == "__main__":
    unittest.main()
