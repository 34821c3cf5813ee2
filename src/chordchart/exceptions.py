class ChordChartError(Exception):
    """Base exception for chordchart."""


class UnknownKeyError(ChordChartError):
    """Raised when a key label is not one of the twelve chromatic keys."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Unknown key: {label!r}")


class UnknownFormatError(ChordChartError):
    """Raised when a chart format name is neither standard nor nashville."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown chart format: {name!r}")
