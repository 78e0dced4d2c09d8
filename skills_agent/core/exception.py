"""Skills agent exceptions."""


class SkillsAgentError(Exception):
    """Base exception for skills agent errors."""

    pass


class NotInitializedError(SkillsAgentError):
    """An operation was called before initialize()."""

    pass


class SkillNotFoundError(SkillsAgentError):
    """Raised when a skill is not found in the registry."""

    pass


class ConfigurationError(SkillsAgentError):
    """The agent cannot start with the given configuration."""

    pass


class RoutingError(SkillsAgentError):
    """Base exception for routing failures."""

    pass


class RoutingParseError(RoutingError):
    """Router response could not be decoded into a routing decision."""

    pass
