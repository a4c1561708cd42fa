import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from material_theme_css.cli import main

REPO_ROOT = Path(__file__).resolve().parents[1]
FIXTURE = REPO_ROOT / "tests" / "fixtures" / "baseline_theme.json"


class TestCli(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            try:
                main(argv)
                code = 0
            except SystemExit as e:
                code = e.code
        return code, out.getvalue(), err.getvalue()

    def test_converts_theme_file(self):
        output = os.path.join(self.tmp.name, "theme.css")
        code, out, _ = self._run(["-i", str(FIXTURE), "-o", output])

        self.assertEqual(code, 0)
        self.assertIn("Success!", out)
        css = Path(output).read_text(encoding="utf-8")
        self.assertIn("--md-sys-color-primary: 103, 80, 164; /* Locked Color */", css)
        self.assertIn("--md-sys-color-primary-container-950:", css)
        self.assertNotIn("--md-sys-color-outline-variant-", css)

    def test_default_output_goes_to_working_directory(self):
        cwd = os.getcwd()
        os.chdir(self.tmp.name)
        self.addCleanup(os.chdir, cwd)

        code, out, _ = self._run(["--input", str(FIXTURE)])

        self.assertEqual(code, 0)
        self.assertTrue(os.path.exists(os.path.join(self.tmp.name, "baseline_theme-rgb.css")))
        self.assertIn("baseline_theme-rgb.css", out)

    def test_missing_input_file_exits_1(self):
        missing = os.path.join(self.tmp.name, "missing.json")
        code, _, err = self._run(["-i", missing, "-o", os.path.join(self.tmp.name, "x.css")])
        self.assertEqual(code, 1)
        self.assertIn("An error occurred", err)

    def test_invalid_json_exits_1(self):
        bad = os.path.join(self.tmp.name, "bad.json")
        Path(bad).write_text("{oops", encoding="utf-8")
        code, _, err = self._run(["-i", bad, "-o", os.path.join(self.tmp.name, "x.css")])
        self.assertEqual(code, 1)
        self.assertIn("An error occurred", err)

    def test_non_utf8_input_exits_1(self):
        bad = os.path.join(self.tmp.name, "latin1.json")
        Path(bad).write_bytes(b'{"light": {"primary": "\xff"}, "dark": {}}')
        code, _, err = self._run(["-i", bad, "-o", os.path.join(self.tmp.name, "x.css")])
        self.assertEqual(code, 1)
        self.assertIn("An error occurred", err)

    def test_unencodable_role_name_exits_1(self):
        theme = os.path.join(self.tmp.name, "surrogate.json")
        Path(theme).write_text('{"light": {"bad\\ud800": "#6750A4"}, "dark": {}}', encoding="utf-8")
        code, _, err = self._run(["-i", theme, "-o", os.path.join(self.tmp.name, "x.css")])
        self.assertEqual(code, 1)
        self.assertIn("An error occurred", err)

    def test_unwritable_output_exits_1(self):
        output = os.path.join(self.tmp.name, "no-such-dir", "x.css")
        code, _, _ = self._run(["-i", str(FIXTURE), "-o", output])
        self.assertEqual(code, 1)

    def test_input_is_required(self):
        code, _, _ = self._run([])
        self.assertEqual(code, 2)

    def test_version(self):
        code, out, _ = self._run(["-v"])
        self.assertEqual(code, 0)
        self.assertIn("1.0.0", out)


if __name__ == "__main__":
    unittest.main()
