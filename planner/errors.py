"""
Error taxonomy for plan generation.

Two families of failure exist:
- Input errors: the runner's raw fields cannot be turned into a valid request.
- Configuration errors: a PlanParams set does not describe a sane week.

Arithmetic on valid inputs is always well defined, so there are no
computation errors.
"""


class PlanInputError(ValueError):
    """Base class for invalid runner input."""


class InputFormatError(PlanInputError):
    """Race time is not two numeric MM:SS components."""


class InputRangeError(PlanInputError):
    """Input parsed but is outside the supported range."""


class PlanConfigError(ValueError):
    """Plan parameters fail validation."""
