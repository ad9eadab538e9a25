"""Exceptions raised by the layout and animation core."""


class PreconditionError(ValueError):
    """A call was made with arguments the core refuses to accept."""


class UnknownElementError(KeyError):
    """An element id was looked up that no layout rule is registered for."""

    def __init__(self, element_id: str) -> None:
        super().__init__(element_id)
        self.element_id = element_id

    def __str__(self) -> str:
        return f"no layout registered for element {self.element_id!r}"
