"""Exceptions raised by swagger-search."""


class SwaggerSearchError(Exception):
    """Base class for all swagger-search errors."""


class DocumentLoadError(SwaggerSearchError):
    """The API document could not be fetched or parsed."""


class UnknownToolError(SwaggerSearchError):
    """A tool name that is not in the catalog."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidToolArguments(SwaggerSearchError):
    """Tool arguments failed validation; the message names each bad field."""

    def __init__(self, tool: str, problems: list[str]):
        super().__init__(f"Invalid arguments for {tool}: " + "; ".join(problems))
        self.tool = tool
        self.problems = problems
