class SimulationError(ValueError):
    """Base class for configuration errors rejected before any state changes."""


class InvalidCapacity(SimulationError):
    pass


class InvalidPage(SimulationError):
    pass


class UnknownPolicy(SimulationError):
    pass


class InvalidClock(SimulationError):
    pass
