class LinkShrinkError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:linkshrink_error'


class InvalidUrlError(LinkShrinkError):
    """Raised when a submitted URL is not a valid http(s) URL."""

    error_code = 'link:invalid_url'


class InvalidAliasError(LinkShrinkError):
    """Raised when a custom alias does not match the shortcode format."""

    error_code = 'link:invalid_alias'


class AliasTakenError(LinkShrinkError):
    """Raised when a custom alias collides with an existing shortcode."""

    error_code = 'link:alias_taken'


class LinkNotFoundError(LinkShrinkError):
    """Raised when no link record matches the requested identifier."""

    error_code = 'link:not_found'


class InvalidQueryError(LinkShrinkError):
    """Raised when a listing query names an unknown status, sort field or order."""

    error_code = 'link:invalid_query'


class ConfigurationError(LinkShrinkError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
