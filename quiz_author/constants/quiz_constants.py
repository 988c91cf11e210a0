"""Question-related constants shared across UI and core layers."""

CSV_HEADER: str = "id,name,options,points,published"
CSV_SEPARATOR: str = ","
CSV_TRUE: str = "true"
CSV_FALSE: str = "false"

COPY_NAME_PREFIX: str = "Copy of "
APPEND_OPTION_INDEX: int = -1
