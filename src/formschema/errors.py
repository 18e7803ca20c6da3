"""Exception definitions for formschema"""


class FormSchemaException(Exception):
    """Base exception for all formschema errors.

    All custom exceptions in formschema inherit from this class. Use this
    as a catch-all when you don't need to handle specific exception types.
    """

    pass


class SchemaException(FormSchemaException):
    """Raised when a schema document cannot be compiled.

    Use this exception when:
    - A schema node is missing its declared type
    - A schema node member has a value of the wrong shape
    - The schema file cannot be read or decoded
    """

    pass


class UnsupportedSchemaTypeError(SchemaException):
    """Raised when a schema node declares a type the compiler has no parser for."""

    def __init__(self, schema_type: str, name: str | None = None):
        self.schema_type = schema_type
        self.name = name
        where = f" (field '{name}')" if name else ""
        super().__init__(f"Unsupported schema type: '{schema_type}'{where}")


class ConfigException(FormSchemaException):
    """Raised when configuration validation or loading fails.

    Use this exception when:
    - The configuration file cannot be found
    - The TOML syntax is invalid
    - Configuration validation fails
    """

    pass


class RenderException(FormSchemaException):
    pass
