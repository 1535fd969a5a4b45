import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from lox.main import main


class MainTestCase(unittest.TestCase):

    def setUp(self):
        self.directory = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.directory.cleanup()

    def script(self, source):
        path = os.path.join(self.directory.name, "script.lox")
        with open(path, "w", encoding="utf-8") as file:
            file.write(source)
        return path

    def lox(self, *argv):
        """Runs main with argv. Returns (exit status, stdout, stderr)."""
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            try:
                status = main(list(argv))
            except SystemExit as exit:
                status = exit.code
        return status, stdout.getvalue(), stderr.getvalue()

    def test_exit_status(self):
        cases = {
            "print \"ok\";": (0, "ok\n"),
            "print 1": (65, ""),
            "print 1 / 0;": (70, ""),
            "print 1; x = 2; print 3;": (70, "1\n"),
        }
        for case, (status, output) in cases.items():
            self.assertEqual((status, output), self.lox(self.script(case))[:2], case)

    def test_missing_file(self):
        status, __, stderr = self.lox(os.path.join(self.directory.name, "missing.lox"))
        self.assertEqual(66, status)
        self.assertIn("could not be opened", stderr)

    def test_debug_dumps(self):
        path = self.script("print -1;")

        status, stdout, __ = self.lox(path, "--tokens")
        self.assertEqual(0, status)
        self.assertEqual(["PRINT print null", "MINUS - null", "NUMBER 1 1.0", "SEMICOLON ; null", "EOF  null"],
                         stdout.splitlines())

        status, stdout, __ = self.lox(path, "--ast")
        self.assertEqual(0, status)
        self.assertEqual("(print (- 1))\n", stdout)

    def test_debug_dumps_scan_once(self):
        path = self.script("print @ 1;")

        status, stdout, stderr = self.lox(path, "--tokens", "--ast")
        self.assertEqual(65, status)
        self.assertEqual(1, stderr.count("Unexpected character."))
        self.assertTrue(stdout.endswith("(print 1)\n"), stdout)


if __name__ == '__main__':
    unittest.main()
