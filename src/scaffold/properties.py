# src/scaffold/properties.py
"""Flag source backed by ``.properties`` files."""

from collections.abc import Iterable, Mapping
from pathlib import Path

from .constants import PROP_PACKAGE_NAME
from .errors import ConfigurationError
from .logs import getAppLogger


def parse_properties(text: str) -> dict[str, str]:
    """Parse ``key=value`` / ``key: value`` lines.

    Blank lines and lines starting with ``#`` or ``!`` are ignored. Only the
    first separator splits, so values may contain ``=`` or ``:``.
    """
    result: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line[0] in "#!":
            continue
        cut = min(
            (i for i in (line.find("="), line.find(":")) if i >= 0),
            default=-1,
        )
        if cut < 0:
            result[line] = ""
            continue
        result[line[:cut].strip()] = line[cut + 1 :].strip()
    return result


def load_properties(path: Path) -> dict[str, str]:
    if not path.exists():
        xmsg = f"Properties file not found: {path}"
        raise FileNotFoundError(xmsg)
    return parse_properties(path.read_text(encoding="utf-8"))


class FlagSource:
    """Read-only view over merged property values.

    Later sources override earlier ones; ``overrides`` win over everything.
    """

    def __init__(
        self,
        values: Mapping[str, str] | None = None,
        overrides: Mapping[str, str] | None = None,
    ) -> None:
        self._values: dict[str, str] = dict(values or {})
        self._values.update(overrides or {})

    @classmethod
    def from_files(
        cls,
        paths: Iterable[Path],
        overrides: Mapping[str, str] | None = None,
    ) -> "FlagSource":
        logger = getAppLogger()
        merged: dict[str, str] = {}
        for path in paths:
            logger.trace(f"[properties] Loading {path}")
            merged.update(load_properties(path))
        return cls(merged, overrides)

    def as_dict(self) -> dict[str, str]:
        return dict(self._values)

    def string_property(self, name: str) -> str | None:
        return self._values.get(name)

    def boolean_property(self, name: str, default: bool) -> bool:  # noqa: FBT001
        """Only ``true`` (any case) is truthy; other values are false."""
        raw = self._values.get(name)
        if raw is None:
            return default
        return raw.strip().lower() == "true"

    def package_name(self) -> str:
        """Return the required ``package.name`` property.

        Raises:
            ConfigurationError: If the property is missing or blank.
        """
        value = self.string_property(PROP_PACKAGE_NAME)
        if value is None or not value.strip():
            xmsg = (
                f"Required property '{PROP_PACKAGE_NAME}' is missing or empty. "
                f"Add: {PROP_PACKAGE_NAME}=com.yourcompany.yourapp"
            )
            raise ConfigurationError(xmsg, value=value)
        return value.strip()
