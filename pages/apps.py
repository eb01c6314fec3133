import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class PagesConfig(AppConfig):
    name = "pages"
    verbose_name = "Portfolio pages"

    def ready(self):
        resume_path = settings.RESUME_DIR / settings.RESUME_FILENAME
        if resume_path.is_file():
            logger.info(f"Serving resume from {resume_path}")
        else:
            # Not fatal, the resume routes answer 404 until the file is bundled
            logger.warning(f"Resume file missing at startup: {resume_path}")
