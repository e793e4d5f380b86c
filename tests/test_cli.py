"""Tests for size_cli.cli."""
import io
import json
import os
import tempfile
import unittest
from unittest import mock

from rich.console import Console

from size_cli import cli
from size_cli.core import config as config_module


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = self._tmp.name
        os.makedirs(os.path.join(self.root, "d"))
        for name, size in (("a", 100), ("b", 1500), ("c", 1500000)):
            with open(os.path.join(self.root, "d", name), "wb") as f:
                f.write(b"\0" * size)
        self.out = io.StringIO()
        self.err = io.StringIO()
        rc = os.path.join(self.root, "rc.json")
        for target, attr, value in (
            (cli, "console", Console(file=self.out, width=200)),
            (cli, "err_console", Console(file=self.err, width=200)),
            (config_module, "CONFIG_PATHS", [rc]),
        ):
            patcher = mock.patch.object(target, attr, value)
            patcher.start()
            self.addCleanup(patcher.stop)

    def run_cli(self, *argv: str) -> str:
        cli.main(list(argv))
        return self.out.getvalue().strip()

    def test_default_output(self) -> None:
        self.assertEqual(self.run_cli("-C", self.root, "d"), "1.43 mb")

    def test_raw(self) -> None:
        self.assertEqual(self.run_cli("-C", self.root, "d", "--raw"), "1501600")

    def test_flags(self) -> None:
        self.assertEqual(self.run_cli("-C", self.root, "d/a,d/b", "-l", "-u", "-d", "1"), "1.6 KILOBYTES")

    def test_missing_path_warns_on_stderr(self) -> None:
        self.assertEqual(self.run_cli("-C", self.root, "missing"), "0")
        self.assertIn("Path not found", self.err.getvalue())
        self.assertIn("No files found", self.err.getvalue())

    def test_quiet(self) -> None:
        self.run_cli("-C", self.root, "missing", "-q")
        self.assertEqual(self.err.getvalue(), "")

    def test_verbose_goes_to_stderr(self) -> None:
        self.assertEqual(self.run_cli("-C", self.root, "d", "-v"), "1.43 mb")
        err = self.err.getvalue()
        self.assertIn("Average: 488.80 kb", err)
        self.assertIn("Files:   3", err)

    def test_format_subcommand(self) -> None:
        self.assertEqual(self.run_cli("format", "19999", "-l", "-u", "-d", "4"), "19.5303 KILOBYTES")
        self.assertEqual(self.out.getvalue().splitlines()[-1], "19.5303 KILOBYTES")

    def test_format_subcommand_many(self) -> None:
        self.assertEqual(self.run_cli("format", "0xff", "2048", "-f", "X").splitlines(), ["0xFF", "0x2 kb"])

    def test_overflow_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli("format", str(2**64))
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("too large", self.err.getvalue())

    def test_invalid_decimals_exit(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli("-C", self.root, "d", "-d", "-2")
        self.assertEqual(ctx.exception.code, 1)
        self.assertEqual(self.out.getvalue(), "")

    def test_config_from_file(self) -> None:
        with open(config_module.CONFIG_PATHS[0], "w", encoding="utf-8") as f:
            f.write('{"long": true, "decimals": 0}')
        self.assertEqual(self.run_cli("-C", self.root, "d"), "1 megabytes")
        self.assertEqual(self.run_cli("format", "2560", "-d", "1").splitlines()[-1], "2.5 kilobytes")

    def test_hidden_flag(self) -> None:
        with open(os.path.join(self.root, "d", ".hidden"), "wb") as f:
            f.write(b"\0" * 400)
        self.assertEqual(self.run_cli("-C", self.root, "d", "--raw"), "1501600")
        for flag in ("-a", "--all", "--force"):
            self.out.truncate(0)
            self.out.seek(0)
            self.assertEqual(self.run_cli("-C", self.root, "d", "--raw", flag), "1502000")

    def test_config_init_then_show(self) -> None:
        self.run_cli("config", "--show")
        self.assertIn("No config found", self.err.getvalue())
        self.run_cli("config", "--init")
        self.assertIn("Created config", self.err.getvalue())
        self.assertTrue(os.path.isfile(config_module.CONFIG_PATHS[0]))
        shown = json.loads(self.run_cli("config", "--show"))
        self.assertEqual(shown, config_module.DEFAULTS)

    def test_config_init_does_not_clobber(self) -> None:
        with open(config_module.CONFIG_PATHS[0], "w", encoding="utf-8") as f:
            f.write('{"decimals": 3}')
        self.run_cli("config", "--init")
        self.assertIn("already exists", self.err.getvalue())
        self.assertEqual(config_module.load()["decimals"], 3)


if __name__ == "__main__":
    unittest.main()
