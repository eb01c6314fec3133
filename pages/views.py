import logging

from django.http import FileResponse, HttpResponse, HttpResponseBadRequest, HttpResponseNotFound
from django.shortcuts import render
from django.views.decorators.http import require_safe

from pages.decorators import track_page_visit
from pages.resume import (
    content_disposition,
    open_resume,
    parse_download_flag,
    read_resume,
    resume_exists,
)

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


def _pdf_response(content, disposition):
    response = HttpResponse(content, content_type=PDF_CONTENT_TYPE)
    response["Content-Disposition"] = disposition
    return response


@require_safe
def home(request):
    return render(request, "pages/home.html")


@require_safe
@track_page_visit
def resume(request):
    try:
        download = parse_download_flag(request.GET.get("download"))
    except ValueError as e:
        logger.info(f"Rejected resume request: {e}")
        return HttpResponseBadRequest()

    if not resume_exists():
        return HttpResponseNotFound()

    return _pdf_response(read_resume(), content_disposition(download))


@require_safe
def resume_view(request):
    return render(request, "pages/resume.html")


@require_safe
@track_page_visit
def resume_pdf(request):
    if not resume_exists():
        return HttpResponseNotFound()

    response = FileResponse(open_resume(), content_type=PDF_CONTENT_TYPE)
    response["Content-Disposition"] = content_disposition(download=False)
    return response


@require_safe
@track_page_visit
def resume_file(request):
    if not resume_exists():
        return HttpResponseNotFound()

    return _pdf_response(read_resume(), content_disposition(download=False))
