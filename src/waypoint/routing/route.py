"""RoutePattern, RouteMatch, and TemplateSegment frozen dataclasses."""

import re
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class TemplateSegment:
    """A parsed span of a route template.

    Literal: ``/video/``  (is_param=False)
    Param:   ``:id``      (is_param=True, param_name="id")

    ``start`` and ``end`` index into the original template.
    """

    value: str
    start: int
    end: int
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class RoutePattern:
    """A compiled route template.

    Build one with ``RoutePattern.compile("/video/:id")`` (or
    ``compile_route``). ``pattern``, ``keys`` and ``regex`` are always
    derived from ``template`` during construction, which either succeeds
    completely or raises ``DuplicateParameterError``.

    Equality and hashing use ``template`` only, so two patterns compiled
    from the same string are interchangeable as set members and dict keys.
    """

    template: str
    pattern: str = field(init=False, compare=False)
    keys: tuple[str, ...] = field(init=False, compare=False)
    regex: re.Pattern[str] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        from waypoint.routing.compiler import compile_template

        pattern, keys = compile_template(self.template)
        object.__setattr__(self, "pattern", pattern)
        object.__setattr__(self, "keys", keys)
        object.__setattr__(self, "regex", re.compile(pattern))

    @classmethod
    def compile(cls, template: str) -> "RoutePattern":
        """Compile *template*. Raises ``DuplicateParameterError``."""
        return cls(template)

    def match(self, candidate: str) -> "RouteMatch | None":
        """Match *candidate* against the whole pattern.

        A single trailing ``/`` is tolerated. Returns ``None`` when the
        candidate does not match; that is an expected outcome, not an error.
        """
        m = self.regex.fullmatch(candidate)
        if m is None:
            return None
        params = dict(zip(self.keys, m.groups(), strict=True))
        return RouteMatch(route=self, path=candidate, params=params)

    def params(self, candidate: str) -> dict[str, str] | None:
        """Return the extracted parameters, or ``None`` on no match."""
        result = self.match(candidate)
        return result.params if result is not None else None

    def matches(self, candidate: str) -> bool:
        """True if *candidate* matches this route."""
        return self.regex.fullmatch(candidate) is not None


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: RoutePattern
    path: str
    params: dict[str, str] = field(hash=False)
