"""Custom exceptions for Serper MCP."""


class SerperMCPError(Exception):
    """Base exception for all Serper MCP errors."""

    pass


# ─── Configuration Errors ────────────────────────────────────────


class ConfigurationError(SerperMCPError):
    """Raised when required configuration is missing at startup."""

    def __init__(self, setting: str, message: str) -> None:
        self.setting = setting
        self.message = message
        super().__init__(message)


# ─── Validation Errors ───────────────────────────────────────────


class ValidationError(SerperMCPError):
    """Raised when input validation fails."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"Validation error for '{field}': {message}")


class EmptyBatchError(ValidationError):
    """Raised when a batch search is requested with no queries."""

    def __init__(self) -> None:
        super().__init__("queries", "A non-empty batch of search queries is required")


class InvalidURLError(ValidationError):
    """Raised when a URL is missing or invalid."""

    def __init__(self, url: str | None, reason: str = "URL is required for scraping") -> None:
        self.url = url
        super().__init__("url", reason if not url else f"{reason}: {url}")


# ─── Upstream Errors ─────────────────────────────────────────────


class SerperError(SerperMCPError):
    """Base exception for failures talking to the Serper API."""

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        self.message = message
        super().__init__(f"[{operation}] {message}")


class SerperAPIError(SerperError):
    """Raised when the Serper API answers with a non-success status."""

    def __init__(self, operation: str, status_code: int, reason: str, body: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(operation, f"Serper API error: {status_code} {reason} - {body}")


class SerperTransportError(SerperError):
    """Raised when the request never produced an HTTP response."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(operation, f"Request failed: {reason}")


class SerperResponseError(SerperError):
    """Raised when a successful response has an unusable body."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(operation, f"Invalid response: {reason}")


# ─── Tool / Router Errors ────────────────────────────────────────


class SearchToolError(SerperMCPError):
    """Raised by the tool layer, wrapping the underlying failure with context."""

    def __init__(self, operation: str, message: str, query: str | None = None) -> None:
        self.operation = operation
        self.query = query
        self.message = message
        super().__init__(message)


class ToolNotFoundError(SerperMCPError):
    """Raised when an unknown tool name is called."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class PromptNotFoundError(SerperMCPError):
    """Raised when an unknown prompt name is requested."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Prompt not found: {name}")
