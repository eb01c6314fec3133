import logging

from django.conf import settings
from django.core.files.storage import storages

logger = logging.getLogger(__name__)

TRUE_VALUES = {"true", "on", "yes", "1"}
FALSE_VALUES = {"false", "off", "no", "0", ""}


def get_resume_filename():
    return getattr(settings, "RESUME_FILENAME", "VarshithResume.pdf")


def get_resume_storage():
    return storages["resume"]


def resume_exists():
    storage = get_resume_storage()
    filename = get_resume_filename()
    if not storage.exists(filename):
        logger.warning(f"Resume file not found: {filename} in {getattr(storage, 'location', storage)}")
        return False
    return True


def open_resume():
    """Open the resume for reading. OSError propagates to the caller."""
    return get_resume_storage().open(get_resume_filename(), "rb")


def read_resume():
    with open_resume() as f:
        return f.read()


def content_disposition(download=False):
    disposition = "attachment" if download else "inline"
    return f"{disposition}; filename={get_resume_filename()}"


def parse_download_flag(value):
    """
    Convert the ``download`` query parameter to a bool.

    Accepts true/on/yes/1 and false/off/no/0 in any case. A missing or
    empty value means False. Anything else raises ValueError.
    """
    if value is None:
        return False
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value for download: {value!r}")
