class UriSegmentsException(Exception):
    def __init__(self, error: str, error_description: str | None = None) -> None:
        super().__init__(error_description or error)

        self.error = error
        self.error_description = error_description


class InvalidArgumentError(UriSegmentsException, ValueError):
    def __init__(self, argument: str) -> None:
        super().__init__("invalid_argument", f"{argument} must not be None")

        self.argument = argument


class UriFormatError(UriSegmentsException, ValueError):
    def __init__(self, uri: str, error_description: str | None = None) -> None:
        super().__init__("invalid_uri", error_description or f"Invalid URI: {uri}")

        self.uri = uri
