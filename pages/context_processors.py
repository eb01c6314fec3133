from django.conf import settings


def site_context(request):
    return {
        "RESUME_FILENAME": getattr(settings, "RESUME_FILENAME", ""),
        "WEB3FORMS_ACCESS_KEY": getattr(settings, "WEB3FORMS_ACCESS_KEY", ""),
    }
