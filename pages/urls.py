from django.urls import path

from .views import home, resume, resume_file, resume_pdf, resume_view

urlpatterns = [
    path("", home, name="home"),
    path("home", home, name="home_alias"),
    path("resume", resume, name="resume"),
    path("resume/view", resume_view, name="resume_view"),
    path("resume.pdf", resume_pdf, name="resume_pdf"),
    path("files/resume", resume_file, name="resume_file"),
]
