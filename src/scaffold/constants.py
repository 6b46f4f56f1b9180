# src/scaffold/constants.py
"""Central constants used across the project."""


# --- env keys ---
DEFAULT_ENV_LOG_LEVEL: str = "LOG_LEVEL"
# Environment signals that an IDE is importing the project model.
IDE_SYNC_ENV_VARS: tuple[str, ...] = ("IDEA_SYNC_ACTIVE", "SCAFFOLD_IDE_SYNC")

# --- program defaults ---
DEFAULT_LOG_LEVEL: str = "info"

# --- flag names (read from property files) ---
PROP_DEBUG_ONLY: str = "app.debugOnly"
PROP_ENABLE_IOS: str = "app.enableIos"
PROP_PACKAGE_NAME: str = "package.name"

# --- flag defaults ---
DEFAULT_DEBUG_ONLY: bool = False
DEFAULT_ENABLE_IOS: bool = False

# --- pruning ---
VARIANT_PLACEHOLDER: str = "{VARIANT}"
DISABLED_DESCRIPTION: str = "DISABLED"
DEFAULT_ACTIVE_VARIANT: str = "debug"
RELEASE_BUILD_TYPE: str = "release"
DEFAULT_BUILD_TYPES: tuple[str, ...] = ("debug", RELEASE_BUILD_TYPE)

# --- config defaults ---
DEFAULT_STRICT_CONFIG: bool = False
DEFAULT_PROPERTIES_FILE: str = "gradle.properties"
