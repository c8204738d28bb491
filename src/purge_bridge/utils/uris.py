"""Uri helpers"""
from urllib import parse

__all__ = ["join", "zone_endpoint"]


def join(*parts: str, quote: bool = False) -> str:
    """Join uri parts onto a base, keeping any path the base already has."""
    if not parts:
        return ""

    base = parts[0]
    if not base.endswith("/"):
        base += "/"

    return parse.urljoin(
        base,
        "/".join(
            (parse.quote(part.strip("/"), safe="") if quote else part.strip("/"))
            for part in parts[1:]
        ),
    )


def zone_endpoint(api_base: str, zone_id: str, action: str) -> str:
    """Url of a per-zone API action, e.g. ``zones/<id>/purge_cache``."""
    # dots escaped so "." / ".." stay a literal segment under zones/
    segment = parse.quote(zone_id.strip("/"), safe="").replace(".", "%2E")
    return join(api_base, "zones", segment, action)
