"""
Export the portfolio as a static site.

Renders the home and resume viewer templates to plain HTML, copies the static
assets and the bundled resume PDF next to them, and rewrites the links that
point at the dynamic PDF routes so the output can be served by any static host.
"""

import re
import shutil
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.template import TemplateDoesNotExist
from django.template.loader import render_to_string
from django.test.utils import override_settings

from pages.context_processors import site_context

PLAIN_STATIC_STORAGE = {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"}


class Command(BaseCommand):
    help = "Build a static copy of the site (index.html, resume.html, assets and resume PDF)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--output",
            default=None,
            help="Output directory (default: BASE_DIR/public)",
        )

    def handle(self, *args, **options):
        output_dir = Path(options["output"] or Path(settings.BASE_DIR) / "public")
        output_dir.mkdir(parents=True, exist_ok=True)
        self.resume_url = f"/resume/{settings.RESUME_FILENAME}"

        self._copy_static_assets(output_dir)
        self._copy_resume_files(output_dir)

        if not settings.WEB3FORMS_ACCESS_KEY:
            self.stderr.write(self.style.WARNING("WEB3FORMS_ACCESS_KEY is not set. Contact form will not submit."))

        self._build_page("pages/home.html", output_dir / "index.html", required=True)
        self._build_page("pages/resume.html", output_dir / "resume.html", required=False)

        self.stdout.write(self.style.SUCCESS(f"Static site generated in: {output_dir}"))

    def _copy_static_assets(self, output_dir):
        for static_dir in settings.STATICFILES_DIRS:
            static_dir = Path(static_dir)
            if static_dir.is_dir():
                shutil.copytree(static_dir, output_dir, dirs_exist_ok=True)
                self.stdout.write(f"  ✓ Copied assets from {static_dir}")

    def _copy_resume_files(self, output_dir):
        resume_dir = Path(settings.RESUME_DIR)
        if not resume_dir.is_dir():
            self.stderr.write(self.style.WARNING(f"Resume directory not found: {resume_dir}"))
            return

        out_resume_dir = output_dir / "resume"
        out_resume_dir.mkdir(parents=True, exist_ok=True)
        for entry in resume_dir.iterdir():
            if entry.is_file():
                shutil.copy2(entry, out_resume_dir / entry.name)
                self.stdout.write(f"  ✓ Copied {entry.name}")

    def _build_page(self, template_name, output_path, required):
        try:
            html = self._render(template_name)
        except TemplateDoesNotExist as e:
            if required:
                raise CommandError(f"Cannot read template {template_name}") from e
            self.stderr.write(self.style.WARNING(f"Skipping missing template {template_name}"))
            return

        output_path.write_text(self.rewrite_links(html), encoding="utf-8")
        self.stdout.write(f"  ✓ Wrote {output_path.name}")

    def _render(self, template_name):
        # Unhashed asset names so the URLs match the copied files
        storages = {**settings.STORAGES, "staticfiles": PLAIN_STATIC_STORAGE}
        with override_settings(STORAGES=storages):
            return render_to_string(template_name, site_context(None))

    def rewrite_links(self, html):
        """Point links at the exported files instead of the dynamic routes."""
        html = html.replace(f'"{settings.STATIC_URL}', '"/')
        html = re.sub(r'href="/resume\?download=true"', f'href="{self.resume_url}" download', html)
        html = re.sub(r'(href|src)="/resume"', rf'\1="{self.resume_url}"', html)
        html = re.sub(r'href="/resume/view"', 'href="/resume.html"', html)
        return html
