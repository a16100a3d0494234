"""
Exception types raised by the weightedgraph package.
"""


class InvalidArgumentError(ValueError):
    """
    Raised when a required argument is missing (None) or malformed.

    Structurally absent input (unknown vertex, missing edge, negative weight)
    is never reported through this exception; those cases are signalled by
    the return value of the operation.
    """

    def __init__(self, argument_name: str, message: str = None):
        self.argument_name = argument_name
        if message is None:
            message = f"Input argument '{argument_name}' is None"
        super().__init__(message)
