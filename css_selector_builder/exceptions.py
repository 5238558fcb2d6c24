class SelectorBuildError(Exception):
    """Base selector builder error."""
    pass

class OrderViolationError(SelectorBuildError):
    """Selector part added out of canonical order."""
    pass

class DuplicatePartError(SelectorBuildError):
    """Element, id or pseudo-element supplied twice."""
    pass

class ParseError(Exception):
    """Error loading selector definition data."""
    pass
