"""Errors raised by the priority scoring engine."""


class InvalidInput(ValueError):
    """Raised when a scoring input violates its numeric contract.

    Covers negative counts, out-of-range ratings and a non-positive
    ``total_data_size`` where a division would occur. These are caller
    errors: the engine never clamps out-of-domain inputs.
    """
