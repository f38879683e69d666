class PricingError(ValueError):
    """Base class for every error raised while pricing an option."""


class InvalidParameterError(PricingError):
    """Raised when an input violates the domain of the pricing model.

    This covers non-positive spot or strike, negative volatility, maturity or
    dividend yield, non-finite inputs, and step counts outside the allowed
    range. It is raised before any formula is evaluated.
    """


class SingularInputError(InvalidParameterError):
    """Raised when the Black-Scholes terms ``d1``/``d2`` are undefined.

    Notes
    -----
    ``d1`` and ``d2`` divide by ``sigma * sqrt(T)``, so a zero maturity or a
    zero volatility cannot be priced. Rather than returning the intrinsic
    value or a ``NaN``, the engine raises this error. It subclasses
    :class:`InvalidParameterError`, so callers treating ``volatility <= 0`` and
    ``T <= 0`` uniformly as bad input can catch the parent class.

    The facade also raises it when a pricer produces a non-finite field, so a
    result is either fully populated or not returned at all.
    """


class UnsupportedSideError(PricingError):
    """Raised for an option side other than call or put."""


class UnsupportedModeError(PricingError):
    """Raised for a pricing mode other than continuous or discrete."""
