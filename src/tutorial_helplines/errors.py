"""Exceptions raised by tutorial-helplines."""


class HelpLinesError(Exception):
    """Base class for tutorial-helplines errors."""


class HelpLinesNotFoundError(HelpLinesError):
    """The configuration file has no <helpLines>...</helpLines> region to replace."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No <helpLines> region found in {path}")
