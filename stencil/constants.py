"""
Constants for the Stencil code emitter.
"""
from pathlib import Path
import os

# Application information
APP_NAME = "stencil"
APP_VERSION = "0.1.0"
APP_DESCRIPTION = "Structured source-code emitter for generated C++ headers"

# Paths
CONFIG_DIR = Path(os.path.expanduser("~/.config/stencil"))
CONFIG_FILE = CONFIG_DIR / "config.toml"
LOG_DIR = CONFIG_DIR / "logs"

# Logging
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {extra[logger_name]} | {message}"
LOG_ROTATION = "10 MB"
LOG_RETENTION = "10 days"

# Lexical output
INDENT_UNIT = "\t"
STATEMENT_TERMINATOR = ";"
LINE_BREAK = "\n"
BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"
OUTPUT_ENCODING = "utf-8"

# Annotation keywords consumed by the reflection build step
PROPERTY_ANNOTATION = "UPROPERTY"
FUNCTION_ANNOTATION = "UFUNCTION"
CLASS_ANNOTATION = "UCLASS"
STRUCT_ANNOTATION = "USTRUCT"
DEFAULT_STRUCT_SPECIFIERS = "BlueprintType"
GENERATED_BODY_MARKER = "GENERATED_BODY()"

# Export macro: <PROJECT>_API
EXPORT_MACRO_SUFFIX = "_API"
DEFAULT_PROJECT_NAME = "Game"

# Localized text accessors
LOCALIZED_TEXT_TYPE = "FText"
TEXT_RESOLVER_FUNCTION = "GetPropertyText"
DEFAULT_RESERVED_NAMES = (
    "Text",
    "DisplayName",
    "MenuText",
    "CreatedBy",
    "StageDirections",
)

# Version control backends
VCS_BACKENDS = ("none", "git", "perforce")
VCS_COMMAND_TIMEOUT = 30  # seconds
