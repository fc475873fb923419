class TinyURLError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:tinyurl_error'


class InvalidInputError(TinyURLError, ValueError):
    """Raised when request data is malformed (caller's responsibility to validate)."""

    error_code = 'app:invalid_input_error'


class MalformedDocumentError(InvalidInputError):
    """Raised when a serialized URL document can't be decoded."""

    error_code = 'app:malformed_document_error'


class ConfigurationError(TinyURLError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
