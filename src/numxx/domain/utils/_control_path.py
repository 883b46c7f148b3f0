"""
State-keyed method dispatch ("control paths").

A control path is one implementation of a method selected by the value of an
attribute of the receiver. Arrays use this to route every elementwise
function to a real or a complex kernel depending on ``numeric_domain``,
without an ``if`` ladder inside each method:

    domain_path = create_path_builder("numeric_domain")

    class Mixin:
        def sqrt(self) -> "NArray":
            \"\"\"Elementwise square root.\"\"\"
            ...

    @domain_path(Mixin, Mixin.sqrt, NumericDomain.REAL)
    def _sqrt_real(self): ...

    @domain_path(Mixin, Mixin.sqrt, NumericDomain.COMPLEX)
    def _sqrt_complex(self): ...

Registering the first path replaces ``Mixin.sqrt`` with a dispatcher that
keeps the declared method's name and docstring. Each builder owns its own
tables, so two builders never see each other's registrations.
"""

from functools import wraps
from typing import Any, Callable, Dict, Hashable, Optional, Tuple, Type, Union

from typing_extensions import ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")

Trap = Optional[Union[BaseException, Type[BaseException], Callable[[Callable, Any], None]]]

_MISSING = object()


def _report_missing(declared: Callable, state: Any, trap: Trap) -> None:
    message = f"No control path for state {state!r} in {declared.__qualname__}"
    if isinstance(trap, BaseException):
        raise trap
    if isinstance(trap, type) and issubclass(trap, BaseException):
        raise trap(message)
    if trap is not None:
        trap(declared, state)
    raise NotImplementedError(message)


def create_path_builder(
    state_attr: str = "_state",
) -> Callable[..., Callable[[Callable[P, R]], Callable[P, R]]]:
    """
    Create a decorator factory registering control paths keyed by
    ``getattr(self, state_attr)``.

    The returned callable has the signature
    ``(cls, method, state, trap_exception=None) -> decorator``; applying the
    decorator to a function registers it as the implementation of
    ``cls.<method name>`` for ``state``.

    ``trap_exception`` decides what a call with an unregistered state does:
    ``None`` raises ``NotImplementedError``, an exception instance is raised
    as is, an exception class is raised with a message, and any other
    callable is notified with ``(method, state)`` before
    ``NotImplementedError`` is raised.

    A receiver lacking ``state_attr`` altogether raises
    ``NotImplementedError``. An unhashable ``state`` raises ``TypeError`` at
    registration time.
    """
    tables: Dict[Tuple[Type, str], Dict[Hashable, Callable]] = {}

    def install(cls: Type, declared: Callable, trap: Trap) -> Dict[Hashable, Callable]:
        key = (cls, declared.__name__)
        if key in tables:
            return tables[key]
        paths: Dict[Hashable, Callable] = {}
        tables[key] = paths

        @wraps(declared)
        def dispatcher(self: Any, *args: Any, **kwargs: Any) -> Any:
            state = getattr(self, state_attr, _MISSING)
            if state is _MISSING:
                raise NotImplementedError(
                    f"{type(self).__name__} has no attribute {state_attr!r} to "
                    "select a control path"
                )
            impl = paths.get(state)
            if impl is None:
                _report_missing(declared, state, trap)
            return impl(self, *args, **kwargs)

        dispatcher.__control_path_declared__ = declared
        setattr(cls, declared.__name__, dispatcher)
        return paths

    def builder(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: Trap = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        try:
            hash(state)
        except TypeError:
            raise TypeError(f"Control path state must be hashable, got {state!r}") from None

        declared = getattr(method, "__control_path_declared__", method)

        def register(impl: Callable[P, R]) -> Callable[P, R]:
            install(cls, declared, trap_exception)[state] = impl
            return impl

        return register

    return builder
