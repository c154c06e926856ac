"""Panel registry: display titles for every report panel.

// [LAW:one-source-of-truth] All panel titles live here.
// [LAW:locality-or-seam] Adding a panel = one ModuleId member + one entry here.

Pure data with no dependencies beyond core.modules.
"""

from dataclasses import dataclass

from logdeck.core.modules import ModuleId


@dataclass(frozen=True)
class PanelSpec:
    """Display specification for a report panel."""

    module: ModuleId
    title: str      # "Unique visitors per day"


# Ordered like ModuleId (canonical order).
PANEL_REGISTRY: list[PanelSpec] = [
    PanelSpec(ModuleId.VISITORS, "Unique visitors per day"),
    PanelSpec(ModuleId.REQUESTS, "Requested Files (URLs)"),
    PanelSpec(ModuleId.REQUESTS_STATIC, "Static Requests"),
    PanelSpec(ModuleId.NOT_FOUND, "Not Found URLs (404s)"),
    PanelSpec(ModuleId.HOSTS, "Visitor Hostnames and IPs"),
    PanelSpec(ModuleId.OS, "Operating Systems"),
    PanelSpec(ModuleId.BROWSERS, "Browsers"),
    PanelSpec(ModuleId.VISIT_TIMES, "Time Distribution"),
    PanelSpec(ModuleId.VIRTUAL_HOSTS, "Virtual Hosts"),
    PanelSpec(ModuleId.REFERRERS, "Referrers URLs"),
    PanelSpec(ModuleId.REFERRING_SITES, "Referring Sites"),
    PanelSpec(ModuleId.KEYPHRASES, "Keyphrases from Google's search engine"),
    PanelSpec(ModuleId.GEO_LOCATION, "Geo Location"),
    PanelSpec(ModuleId.STATUS_CODES, "HTTP Status Codes"),
]

# Derived lookup
PANEL_TITLES = {s.module: s.title for s in PANEL_REGISTRY}
