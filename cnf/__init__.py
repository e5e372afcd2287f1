"""Chuck Norris Facts build step: fetch a fact, expose it as a build variable."""

__version__ = "1.0.0"
