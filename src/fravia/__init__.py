"""Menu-ordering search workflow: phase catalog, query construction, hygiene."""

from importlib import metadata


def get_version() -> str:
    try:
        return metadata.version("fravia-mcp")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = ["get_version"]
