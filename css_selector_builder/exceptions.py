class ValidationError(Exception):
    """Base validation error."""
    pass

class ParseError(Exception):
    """Error parsing input data."""
    pass

class InvalidSelectorError(ValidationError):
    """Invalid selector error."""
    pass

class DuplicateSingletonSelector(InvalidSelectorError):
    """A second element, id or pseudo-element was added to one selector."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(
            f"Element, id and pseudo-element should not occur more than one time "
            f"inside the selector (duplicate {kind.label})"
        )

class OutOfOrderSelector(InvalidSelectorError):
    """A fragment was added after a fragment of higher rank."""

    def __init__(self, attempted_kind, preceding_kind):
        self.attempted_kind = attempted_kind
        self.preceding_kind = preceding_kind
        super().__init__(
            "Selector parts should be arranged in the following order: element, id, "
            "class, attribute, pseudo-class, pseudo-element "
            f"({attempted_kind.label} after {preceding_kind.label})"
        )

class SerializationError(Exception):
    """Error serializing output data."""
    pass
