from django.conf import settings
from django.contrib.sitemaps import Sitemap
from django.urls import reverse


class StaticViewSitemap(Sitemap):
    changefreq = "monthly"
    priority = 0.5

    @property
    def protocol(self):
        # https in production, http in development
        return "http" if settings.DEBUG else "https"

    def items(self):
        return ["home", "resume_view"]

    def location(self, item):
        return reverse(item)


sitemaps = {
    "static": StaticViewSitemap,
}
