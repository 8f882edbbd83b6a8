class SimpleGAError(Exception):
    """Base for all simple-ga exceptions."""

    pass


# High-level families
class ContractViolationError(SimpleGAError):
    """An operation was called with inputs that break its contract."""

    pass


class UnknownFitnessFunction(SimpleGAError, KeyError):
    """No fitness function is registered under the requested name."""

    pass


# Contract subtypes
class GenomeLengthMismatchError(ContractViolationError):
    """Genomes of different lengths were combined."""

    pass


class UnevaluatedIndividualError(ContractViolationError):
    """Fitness was queried on an individual that was never evaluated."""

    pass


class SelectionError(ContractViolationError):
    """Parent selection failures."""

    pass


class ReproductionError(ContractViolationError):
    """Next-generation construction failures."""

    pass
