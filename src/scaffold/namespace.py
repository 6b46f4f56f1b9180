# src/scaffold/namespace.py

from .errors import ConfigurationError
from .logs import getAppLogger


def _transform_segment(segment: str, *, first: bool) -> str:
    parts = segment.split("-")
    # top-level group keeps hyphens as dots; leaf segments collapse them
    return ".".join(parts) if first else "".join(parts)


def derive_namespace(prefix: str, path: str) -> str:
    """Derive a dotted namespace from a colon-delimited module path.

    The first path segment turns ``-`` into ``.``; later segments drop
    ``-`` entirely so they stay valid as single identifiers.

    Examples:
        derive_namespace("com.example", ":data:api-client")
            → "com.example.data.apiclient"
        derive_namespace("com.example", ":core-ui:theme")
            → "com.example.core.ui.theme"

    Raises:
        ConfigurationError: If ``prefix`` is blank or the path has no
            usable segments.
    """
    if not prefix or not prefix.strip():
        xmsg = f"Namespace prefix must not be blank (got {prefix!r})"
        raise ConfigurationError(xmsg, value=prefix)

    segments = path.removeprefix(":").split(":")
    if not path.strip(":") or any(not s for s in segments):
        xmsg = f"Cannot derive namespace from module path {path!r}"
        raise ConfigurationError(xmsg, value=path)

    transformed = [
        _transform_segment(segment, first=index == 0)
        for index, segment in enumerate(segments)
    ]
    namespace = f"{prefix}.{'.'.join(transformed)}"
    getAppLogger().trace(f"[DERIVE] path={path} → namespace={namespace}")
    return namespace
