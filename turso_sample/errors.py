class ConfigurationError(ValueError):
    """Raised when required settings are missing or invalid."""


class SchemaNotFoundError(LookupError):
    """Raised when the source catalog has no table with the requested name."""

    def __init__(self, table_name):
        self.table_name = table_name
        super().__init__(f"Table '{table_name}' not found in source schema")
