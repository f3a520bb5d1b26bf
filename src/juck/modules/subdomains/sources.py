"""Built-in subdomain sources."""

from .models import SubdomainSource
from .parsers import parse_crtsh, parse_threatcrowd, parse_urlscan

THREATCROWD = SubdomainSource(
    name="threatcrowd",
    label="ThreatCrowd",
    url_template="http://ci-www.threatcrowd.org/searchApi/v2/domain/report/?domain={domain}",
    parser=parse_threatcrowd,
)

CRTSH = SubdomainSource(
    name="crtsh",
    label="Crt.sh",
    url_template="https://crt.sh/?q=%25.{domain}&output=json",
    parser=parse_crtsh,
)

URLSCAN = SubdomainSource(
    name="urlscan",
    label="URLScan",
    url_template="https://urlscan.io/api/v1/search/?q=domain:{domain}",
    parser=parse_urlscan,
)

# Merged output follows this order.
SOURCES: dict[str, SubdomainSource] = {
    source.name: source for source in (THREATCROWD, CRTSH, URLSCAN)
}
