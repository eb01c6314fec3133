from django.conf import settings
from django.core.exceptions import SuspiciousFileOperation
from django.core.files.storage import FileSystemStorage


class ResumeStorage(FileSystemStorage):
    """Read-only storage for files bundled with the site (the resume PDF)."""

    def __init__(self, location=None, **kwargs):
        if location is None:
            location = settings.RESUME_DIR
        super().__init__(location=location, **kwargs)

    def open(self, name, mode="rb"):
        if any(flag in mode for flag in "wa+x"):
            raise SuspiciousFileOperation(f"Resume storage is read-only, cannot open {name!r} with mode {mode!r}")
        return super().open(name, mode)

    def _save(self, name, content):
        raise SuspiciousFileOperation(f"Resume storage is read-only, cannot save {name!r}")

    def delete(self, name):
        raise SuspiciousFileOperation(f"Resume storage is read-only, cannot delete {name!r}")
