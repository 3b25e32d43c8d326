class InvalidArgument(ValueError):
    """Raised when an argument violates the contract of a monetary operation.

    Covers non-float amounts, currency mismatches, non-numeric operands, unknown
    rounding modes, unparsable money strings and invalid allocation ratios.
    """

    pass
