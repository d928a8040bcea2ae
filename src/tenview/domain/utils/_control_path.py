"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for routing a single method call to
one of several registered implementations based on the runtime value of a
named state attribute on the receiving object.

Core idea
---------
- You define a *base* method on a class (its signature becomes the canonical
  one).
- You then register one "control path" per state value, each keyed by
  ``(ClassName, MethodName, StateVal)``.
- At runtime, the installed wrapper reads ``getattr(self, state_attribute)``
  and dispatches to the implementation registered for that value.

In tenview the state attribute is ``access_mode``: element access and
iterator comparison have a checked and an unchecked implementation, and the
active one follows the process-wide :class:`AccessMode`.

Important notes
---------------
- The first registration replaces the base method on the class with a
  dispatching wrapper. Subclasses inherit the wrapper.
- Implementations are called like normal instance methods:
  ``impl(self, *args, **kwargs)``.
- Each builder owns its own registry; different builders never share paths.
"""

from __future__ import annotations

from collections import namedtuple
from functools import wraps
from typing import Any, Callable, Dict, Hashable, Optional, Type, Union

from typing_extensions import ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")

MethodKey = namedtuple("MethodKey", ["ClassName", "MethodName", "StateVal"])
"""
Tuple-like key used to uniquely identify a control path.

Fields
------
ClassName : str
    The class the base method was declared on.
MethodName : str
    The base method name being templated.
StateVal : Hashable
    The state value that selects this implementation.
"""

TrapException = Optional[Union[Type[Exception], Callable[[Callable, Any], None]]]


def create_path_builder(
    state_attribute: str,
) -> Callable[
    [Type, Callable[..., Any], Hashable, TrapException],
    Callable[[Callable[..., Any]], Callable[..., Any]],
]:
    """
    Create a "path builder" that registers control paths keyed on
    ``getattr(self, state_attribute)``.

    The returned function (`templator`) is used like this:

        decorator = create_path_builder("mode")

        class MyClass:
            mode = "a"
            def foo(self, x: int) -> int: ...

        @decorator(MyClass, MyClass.foo, "a")
        def foo_a(self, x: int) -> int:
            ...

    Parameters
    ----------
    state_attribute : str
        Name of the attribute (or property) read from ``self`` at call time.

    Returns
    -------
    Callable
        ``templator(cls, method, state, trap_exception=None) -> decorator``.
    """
    methods_map: Dict[MethodKey, Callable[..., Any]] = {}
    installed: Dict[tuple, bool] = {}

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: TrapException = None,
    ) -> Callable[[Callable[..., R]], Callable[..., R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            Class whose method is replaced by the dispatching wrapper.
        method : Callable
            The base method. Its metadata is copied onto the wrapper.
        state : Hashable
            State value selecting the decorated implementation.
        trap_exception : optional
            What to do when no path matches the current state:

            - ``None``: raise ``NotImplementedError``.
            - an exception class: raise it.
            - any other callable: call ``trap_exception(method, state)``;
              if it returns, ``NotImplementedError`` is raised.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(
                f"The argument for 'state' must be hashable. Got {state!r}"
            ) from None

        # Registering against an already installed wrapper keeps the original name.
        method_name = getattr(method, "__name__")
        key = MethodKey(cls.__name__, method_name, state)

        def decorator(sub_method: Callable[..., R]) -> Callable[..., R]:
            methods_map[key] = sub_method

            if installed.get((cls, method_name)):
                return sub_method

            @wraps(method)
            def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
                try:
                    current = getattr(self, state_attribute)
                except AttributeError:
                    raise NotImplementedError(
                        "{} is missing attribute {}".format(
                            type(self), repr(state_attribute)
                        )
                    ) from None
                sm = methods_map.get(MethodKey(cls.__name__, method_name, current))
                if sm is not None:
                    return sm(self, *args, **kwargs)
                if trap_exception is None:
                    raise NotImplementedError(
                        "Missing control path (state={}) for {}".format(
                            repr(current), repr(method)
                        )
                    )
                if isinstance(trap_exception, type) and issubclass(
                    trap_exception, BaseException
                ):
                    raise trap_exception()
                trap_exception(method, current)
                raise NotImplementedError(
                    "Missing control path (state={}) for {}".format(
                        repr(current), repr(method)
                    )
                )

            setattr(cls, method_name, wrapper)
            installed[(cls, method_name)] = True
            return sub_method

        return decorator

    return templator
