"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class ContainerNotConfiguredError(InterfaceError):
    """Raised when a request arrives at an app without a DI container."""

    def __init__(self):
        super().__init__(
            "No DI container on the application; call setup_di before serving"
        )
