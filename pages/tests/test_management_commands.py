import tempfile
from io import StringIO
from pathlib import Path
from unittest.mock import patch

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import CommandError
from django.template import TemplateDoesNotExist
from django.test import SimpleTestCase


class BuildStaticCommandTest(SimpleTestCase):
    """Test the build_static management command."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.output = Path(self.tmpdir.name) / "public"

    def _build(self, **kwargs):
        out = StringIO()
        err = StringIO()
        call_command("build_static", output=str(self.output), stdout=out, stderr=err, **kwargs)
        return out.getvalue(), err.getvalue()

    def test_builds_pages_and_copies_files(self):
        out, _ = self._build()

        self.assertTrue((self.output / "index.html").is_file())
        self.assertTrue((self.output / "resume.html").is_file())
        self.assertTrue((self.output / "css" / "style.css").is_file())
        self.assertTrue((self.output / "js" / "script.js").is_file())
        self.assertEqual(
            (self.output / "resume" / "VarshithResume.pdf").read_bytes(),
            (settings.RESUME_DIR / "VarshithResume.pdf").read_bytes(),
        )
        self.assertIn("Static site generated in", out)

    def test_resume_page_links_point_at_pdf_file(self):
        self._build()

        html = (self.output / "resume.html").read_text(encoding="utf-8")
        self.assertIn('src="/resume/VarshithResume.pdf"', html)
        self.assertIn('href="/resume/VarshithResume.pdf" download', html)
        self.assertNotIn('"/resume"', html)
        self.assertNotIn("/resume?download=true", html)

    def test_index_uses_copied_assets(self):
        self._build()

        html = (self.output / "index.html").read_text(encoding="utf-8")
        self.assertIn('href="/css/style.css"', html)
        self.assertIn('src="/js/script.js"', html)
        self.assertIn('href="/resume.html"', html)
        self.assertNotIn("/static/", html)

    def test_access_key_injected(self):
        with self.settings(WEB3FORMS_ACCESS_KEY="form-key-123"):
            _, err = self._build()

        html = (self.output / "index.html").read_text(encoding="utf-8")
        self.assertIn('value="form-key-123"', html)
        self.assertNotIn("WEB3FORMS_ACCESS_KEY is not set", err)

    def test_warns_without_access_key(self):
        with self.settings(WEB3FORMS_ACCESS_KEY=""):
            _, err = self._build()

        self.assertIn("WEB3FORMS_ACCESS_KEY is not set", err)
        self.assertTrue((self.output / "index.html").is_file())

    def test_missing_resume_directory_is_skipped(self):
        with self.settings(RESUME_DIR=Path(self.tmpdir.name) / "missing"):
            _, err = self._build()

        self.assertIn("Resume directory not found", err)
        self.assertFalse((self.output / "resume").exists())
        self.assertTrue((self.output / "index.html").is_file())

    @patch("pages.management.commands.build_static.render_to_string")
    def test_missing_home_template_fails(self, mock_render):
        mock_render.side_effect = TemplateDoesNotExist("pages/home.html")

        with self.assertRaises(CommandError):
            self._build()

    @patch("pages.management.commands.build_static.render_to_string")
    def test_missing_resume_template_is_skipped(self, mock_render):
        mock_render.side_effect = ["<html></html>", TemplateDoesNotExist("pages/resume.html")]

        _, err = self._build()

        self.assertTrue((self.output / "index.html").is_file())
        self.assertFalse((self.output / "resume.html").exists())
        self.assertIn("Skipping missing template pages/resume.html", err)
