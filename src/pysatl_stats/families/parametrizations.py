"""
Parametrization and constraint validation for distribution families.

This module provides the base class shared by the built-in distributions
for declaring their parameters, validating parameter constraints at
construction and exposing the parameters as a mapping.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_stats.types import FamilyName


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values of a distribution.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization:
    """
    Base class for parametrized distributions.

    Subclasses are frozen dataclasses (see :func:`parametric_family`) whose
    fields are the distribution parameters. Parameters are validated once,
    right after construction, and never change afterwards.
    """

    # These attributes are set by the @parametric_family decorator
    __family_name__: ClassVar[FamilyName]
    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    def __post_init__(self) -> None:
        self.validate()

    @property
    def family_name(self) -> FamilyName:
        """Name of the distribution family."""
        return self.__class__.__family_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    def validate(self) -> None:
        """
        Validate all constraints for this parametrization.

        Raises
        ------
        ValueError
            If any constraint is not satisfied.
        """
        for constraint in self._constraints:
            if not constraint.check(self):
                raise ValueError(f'Constraint "{constraint.description}" does not hold')


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator that marks the function as a constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    Sets marker attributes on the function:
    - __is_constraint: True
    - __constraint_description: description
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def parametric_family[T: Parametrization](
    name: FamilyName, *, init: bool = True
) -> Callable[[type[T]], type[T]]:
    """
    Decorator to declare a class as a distribution family.

    Parameters
    ----------
    name : FamilyName
        Name of the family.
    init : bool, default True
        Whether the dataclass ``__init__`` is generated. Families with several
        constructors define their own ``__init__`` and call
        :meth:`Parametrization.validate` themselves.

    Returns
    -------
    Callable[[type], type]
        Class decorator.

    Notes
    -----
    Automatically converts the class to a frozen dataclass if not already one.
    Collects constraint methods marked with @constraint, in declaration order.
    """

    def _collect_constraints(cls: type[T]) -> list[ParametrizationConstraint]:
        """Collect constraint methods from the class."""
        constraints: list[ParametrizationConstraint] = []
        for attr_name, attr in cls.__dict__.items():
            if isinstance(attr, staticmethod):
                if getattr(attr.__func__, "__is_constraint", False):
                    raise TypeError(
                        f"@constraint '{attr_name}' must be an instance method, not @staticmethod"
                    )
                continue
            if isinstance(attr, classmethod):
                if getattr(attr.__func__, "__is_constraint", False):
                    raise TypeError(
                        f"@constraint '{attr_name}' must be an instance method, not @classmethod"
                    )
                continue

            func = attr if callable(attr) and isfunction(attr) else None
            if not func:
                continue
            if getattr(func, "__is_constraint", False):
                desc = getattr(func, "__constraint_description", func.__name__)
                constraints.append(ParametrizationConstraint(description=desc, check=func))
        return constraints

    def decorator(cls: type[T]) -> type[T]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True, init=init)(cls)

        cls.__family_name__ = name
        cls._constraints = _collect_constraints(cls)
        return cls

    return decorator


__all__ = [
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametric_family",
]
